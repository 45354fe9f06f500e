"""Messages Search Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext
from utils.slack.slack_service import DEFAULT_SEARCH_LIMIT


class SearchCommand(BaseCommand):
    """Searches messages across the workspace (requires a user token)."""

    @staticmethod
    def get_name() -> str:
        return "search"

    @staticmethod
    def get_description() -> str:
        return "Search messages"

    @staticmethod
    def get_help() -> str:
        return """
Search messages across the workspace.

Slack search modifiers work in the query (in:#channel, from:@user, before:2024-01-01).
Search needs a user token (xoxp-*).

Examples:
  slacktoolkit messages search --query "deploy failed"
  slacktoolkit messages search --query "in:#ops incident" --sort score --page 2
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--query", required=True, help="Search query")
        parser.add_argument("--sort", choices=["timestamp", "score"], default="timestamp", help="Sort field")
        parser.add_argument("--sort-dir", choices=["asc", "desc"], default="desc", help="Sort direction")
        parser.add_argument(
            "--limit",
            type=int,
            default=DEFAULT_SEARCH_LIMIT,
            help=f"Number of results (default: {DEFAULT_SEARCH_LIMIT})",
        )
        parser.add_argument("--page", type=int, default=1, help="Result page, starting at 1")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        result = context.service.search_messages(
            args.query, sort=args.sort, sort_dir=args.sort_dir, limit=args.limit, page=args.page
        )
        context.render(result)
