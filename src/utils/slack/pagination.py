"""Uniform pagination over Slack's cursor and page-number listings.

Every list operation builds a :class:`PageFetcher` and hands it to :func:`paginate`,
which either returns one page or walks all of them in order.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, TypeVar

from utils.logging.logging_manager import LogManager

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 100


@dataclass(frozen=True)
class PaginationRequest:
    """Caller side of the pagination contract."""

    cursor: str = ""
    limit: int = DEFAULT_PAGE_SIZE
    fetch_all: bool = False

    @property
    def effective_limit(self) -> int:
        """Page size actually sent to Slack; non-positive limits fall back to the default."""
        if self.limit > 0:
            return self.limit
        return DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    """One page (or the concatenation of all pages) of a listing."""

    items: list[T] = field(default_factory=list)
    next_cursor: str = ""
    has_more: bool = False

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "items": [item.to_dict() if hasattr(item, "to_dict") else item for item in self.items],
            "has_more": self.has_more,
        }
        if self.next_cursor:
            payload["next_cursor"] = self.next_cursor
        return payload


class PageFetcher(ABC, Generic[T]):
    """Fetches exactly one page given an opaque cursor ("" means first page)."""

    @abstractmethod
    def fetch_page(self, cursor: str, limit: int) -> PaginatedResult[T]:
        pass


class CursorPageFetcher(PageFetcher[T]):
    """Cursor-token pagination (``response_metadata.next_cursor``).

    ``fetch`` receives ``(cursor, limit)`` and returns ``(items, next_cursor, has_more)``.
    ``has_more`` may be None, in which case a non-empty cursor means more data.
    """

    def __init__(self, fetch: Callable[[str, int], tuple[list[T], str, bool | None]]):
        self._fetch = fetch

    def fetch_page(self, cursor: str, limit: int) -> PaginatedResult[T]:
        items, next_cursor, has_more = self._fetch(cursor, limit)
        next_cursor = next_cursor or ""
        if has_more is None:
            has_more = bool(next_cursor)
        return PaginatedResult(items=list(items), next_cursor=next_cursor, has_more=has_more)


class PageNumberPageFetcher(PageFetcher[T]):
    """Page-number pagination ("page N of P"), exposed through the cursor contract.

    The cursor is the decimal page number; an empty cursor is page 1. ``fetch`` receives
    ``(page, limit)`` and returns ``(items, page_count)``.
    """

    def __init__(self, fetch: Callable[[int, int], tuple[list[T], int]]):
        self._fetch = fetch

    @staticmethod
    def page_from_cursor(cursor: str) -> int:
        if not cursor:
            return 1
        try:
            page = int(cursor)
        except ValueError:
            raise ValueError(f"Invalid page cursor: {cursor!r}") from None
        return max(page, 1)

    def fetch_page(self, cursor: str, limit: int) -> PaginatedResult[T]:
        page = self.page_from_cursor(cursor)
        items, page_count = self._fetch(page, limit)
        if page < page_count:
            return PaginatedResult(items=list(items), next_cursor=str(page + 1), has_more=True)
        return PaginatedResult(items=list(items))


def paginate(fetcher: PageFetcher[T], request: PaginationRequest) -> PaginatedResult[T]:
    """Apply ``request`` to ``fetcher``.

    Without ``fetch_all`` exactly one page is fetched. With it, pages are fetched strictly
    in cursor order starting at ``request.cursor`` until a page reports no continuation;
    the merged result always has ``has_more=False`` and no cursor.
    """
    limit = request.effective_limit
    if not request.fetch_all:
        return fetcher.fetch_page(request.cursor, limit)

    logger = LogManager.get_instance().get_logger("SlackPagination")
    items: list[T] = []
    cursor = request.cursor
    pages = 0
    while True:
        page = fetcher.fetch_page(cursor, limit)
        pages += 1
        items.extend(page.items)
        logger.debug(f"Fetched page {pages}: +{len(page.items)} items (total: {len(items)})")
        if not page.has_more or not page.next_cursor:
            break
        cursor = page.next_cursor

    return PaginatedResult(items=items, next_cursor="", has_more=False)
