"""Argument helpers shared by the Slack commands and tools."""

import argparse
from argparse import ArgumentParser, Namespace
from datetime import datetime, timezone

from utils.slack.pagination import DEFAULT_PAGE_SIZE, PaginationRequest


def add_pagination_arguments(parser: ArgumentParser, noun: str = "items", default_limit: int = DEFAULT_PAGE_SIZE):
    parser.add_argument("--cursor", type=str, default="", help="Pagination cursor from a previous page")
    parser.add_argument(
        "--limit", type=int, default=default_limit, help=f"Number of {noun} per page (default: {default_limit})"
    )
    parser.add_argument("--all", action="store_true", help=f"Fetch all {noun} (auto-paginate)")


def pagination_request(args: Namespace) -> PaginationRequest:
    return PaginationRequest(cursor=args.cursor, limit=args.limit, fetch_all=args.all)


def parse_datetime(value: str) -> datetime:
    """Parses Unix seconds or an ISO 8601 date/date-time (UTC when naive).

    Raises:
        ValueError: If ``value`` is neither.
    """
    try:
        return datetime.fromtimestamp(float(value), tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        pass
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise ValueError(f"invalid time: {value!r} (use Unix seconds or ISO 8601)") from None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_time(value: str) -> datetime:
    """argparse type for time bounds."""
    try:
        return parse_datetime(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None
