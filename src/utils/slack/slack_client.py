import time
from datetime import datetime
from typing import Any, Callable, Sequence, TypeVar

from utils.logging.logging_manager import LogManager
from utils.slack import retry
from utils.slack.error import ClassifiedError, ErrorCategory, SlackConfigurationError, classify
from utils.slack.models import AuthResult, Channel, File, Message, ReactedItem, SearchResult, User
from utils.slack.pagination import (
    CursorPageFetcher,
    PageNumberPageFetcher,
    PaginatedResult,
    PaginationRequest,
    paginate,
)
from utils.slack.slack_api_client import SlackApiClient
from utils.slack.slack_service import DEFAULT_SEARCH_LIMIT, SlackService

T = TypeVar("T")


def format_timestamp(value: datetime) -> str:
    """Slack time bound: whole Unix seconds with a zero microsecond part."""
    return f"{int(value.timestamp())}.000000"


def _next_cursor(data: dict[str, Any]) -> str:
    return (data.get("response_metadata") or {}).get("next_cursor", "") or ""


class SlackClient(SlackService):
    """Production :class:`SlackService` backed by the Slack Web API.

    Each remote call goes through the retry executor; whatever still fails is raised as a
    :class:`ClassifiedError` chained to the original exception.
    """

    def __init__(
        self,
        token: str,
        api_client: SlackApiClient | None = None,
        max_retries: int = retry.MAX_RETRIES,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if not token:
            raise SlackConfigurationError("Slack token is required")
        self.logger = LogManager.get_instance().get_logger("SlackClient")
        self._api = api_client or SlackApiClient(token)
        self._max_retries = max_retries
        self._sleep = sleep

    def _invoke(self, operation: Callable[[], T]) -> T:
        try:
            return retry.execute(operation, max_retries=self._max_retries, sleep=self._sleep)
        except ClassifiedError:
            raise
        except Exception as e:
            classified = classify(e)
            self.logger.debug(f"Slack call failed: {classified}")
            raise classified from e

    # --- Auth ---

    def auth_test(self) -> AuthResult:
        return AuthResult.from_api(self._invoke(self._api.auth_test))

    # --- Channels ---

    def list_channels(self, request: PaginationRequest) -> PaginatedResult[Channel]:
        def fetch(cursor: str, limit: int):
            data = self._invoke(lambda: self._api.list_conversations(cursor=cursor, limit=limit))
            channels = [Channel.from_api(channel) for channel in data.get("channels") or []]
            return channels, _next_cursor(data), None

        return paginate(CursorPageFetcher(fetch), request)

    def get_channel_info(self, channel_id: str) -> Channel:
        data = self._invoke(lambda: self._api.get_conversation_info(channel_id))
        return Channel.from_api(data.get("channel") or {})

    def create_channel(self, name: str, is_private: bool = False) -> Channel:
        data = self._invoke(lambda: self._api.create_conversation(name, is_private=is_private))
        self.logger.info(f"Created channel '{name}' (private={is_private})")
        return Channel.from_api(data.get("channel") or {})

    def archive_channel(self, channel_id: str) -> None:
        self._invoke(lambda: self._api.archive_conversation(channel_id))

    def invite_to_channel(self, channel_id: str, user_ids: Sequence[str]) -> None:
        self._invoke(lambda: self._api.invite_to_conversation(channel_id, list(user_ids)))

    def kick_from_channel(self, channel_id: str, user_id: str) -> None:
        self._invoke(lambda: self._api.kick_from_conversation(channel_id, user_id))

    def set_channel_topic(self, channel_id: str, topic: str) -> None:
        self._invoke(lambda: self._api.set_conversation_topic(channel_id, topic))

    def set_channel_purpose(self, channel_id: str, purpose: str) -> None:
        self._invoke(lambda: self._api.set_conversation_purpose(channel_id, purpose))

    # --- Messages ---

    def list_messages(
        self,
        channel_id: str,
        request: PaginationRequest,
        oldest: datetime | None = None,
        latest: datetime | None = None,
    ) -> PaginatedResult[Message]:
        oldest_ts = format_timestamp(oldest) if oldest else ""
        latest_ts = format_timestamp(latest) if latest else ""

        def fetch(cursor: str, limit: int):
            data = self._invoke(
                lambda: self._api.get_conversation_history(
                    channel_id, cursor=cursor, limit=limit, oldest=oldest_ts, latest=latest_ts
                )
            )
            messages = [Message.from_api(message, channel=channel_id) for message in data.get("messages") or []]
            return messages, _next_cursor(data), bool(data.get("has_more", False))

        return paginate(CursorPageFetcher(fetch), request)

    def send_message(self, channel_id: str, text: str, thread_ts: str = "") -> Message:
        data = self._invoke(lambda: self._api.post_message(channel_id, text, thread_ts=thread_ts))
        message = data.get("message") or {}
        return Message(
            timestamp=data.get("ts", ""),
            user=message.get("user", ""),
            text=message.get("text", text),
            thread_ts=thread_ts,
            channel=data.get("channel", channel_id),
            type=message.get("type", ""),
        )

    def edit_message(self, channel_id: str, timestamp: str, text: str) -> Message:
        data = self._invoke(lambda: self._api.update_message(channel_id, timestamp, text))
        return Message(
            timestamp=data.get("ts", timestamp),
            text=data.get("text", text),
            channel=data.get("channel", channel_id),
        )

    def delete_message(self, channel_id: str, timestamp: str) -> None:
        self._invoke(lambda: self._api.delete_message(channel_id, timestamp))

    def search_messages(
        self,
        query: str,
        sort: str = "timestamp",
        sort_dir: str = "desc",
        limit: int = DEFAULT_SEARCH_LIMIT,
        page: int = 1,
    ) -> SearchResult:
        count = PaginationRequest(limit=limit).effective_limit
        data = self._invoke(
            lambda: self._api.search_messages(query, sort=sort, sort_dir=sort_dir, count=count, page=max(page, 1))
        )
        return SearchResult.from_api(data)

    # --- Users ---

    def list_users(self, request: PaginationRequest) -> PaginatedResult[User]:
        def fetch(cursor: str, limit: int):
            data = self._invoke(lambda: self._api.list_users(cursor=cursor, limit=limit))
            users = [User.from_api(member) for member in data.get("members") or []]
            return users, _next_cursor(data), None

        return paginate(CursorPageFetcher(fetch), request)

    def get_user_info(self, user_id: str) -> User:
        data = self._invoke(lambda: self._api.get_user_info(user_id))
        return User.from_api(data.get("user") or {})

    def get_user_presence(self, user_id: str) -> str:
        data = self._invoke(lambda: self._api.get_user_presence(user_id))
        return data.get("presence", "")

    # --- Reactions ---

    def add_reaction(self, channel_id: str, timestamp: str, name: str) -> None:
        self._invoke(lambda: self._api.add_reaction(channel_id, timestamp, name))

    def remove_reaction(self, channel_id: str, timestamp: str, name: str) -> None:
        self._invoke(lambda: self._api.remove_reaction(channel_id, timestamp, name))

    def list_reactions(self, request: PaginationRequest, user_id: str = "") -> PaginatedResult[ReactedItem]:
        def fetch(page: int, limit: int):
            data = self._invoke(lambda: self._api.list_reactions(user=user_id, count=limit, page=page))
            items = [ReactedItem.from_api(item) for item in data.get("items") or []]
            return items, int((data.get("paging") or {}).get("pages") or 0)

        try:
            return paginate(PageNumberPageFetcher(fetch), request)
        except ValueError as e:
            raise ClassifiedError(ErrorCategory.VALIDATION, str(e), cause=e) from e

    # --- Files ---

    def list_files(
        self, request: PaginationRequest, channel_id: str = "", user_id: str = ""
    ) -> PaginatedResult[File]:
        def fetch(cursor: str, limit: int):
            data = self._invoke(
                lambda: self._api.list_files(channel=channel_id, user=user_id, cursor=cursor, limit=limit)
            )
            files = [File.from_api(item) for item in data.get("files") or []]
            return files, _next_cursor(data), None

        return paginate(CursorPageFetcher(fetch), request)

    def get_file_info(self, file_id: str) -> File:
        data = self._invoke(lambda: self._api.get_file_info(file_id))
        return File.from_api(data.get("file") or {})

    def upload_file(self, channel_id: str, file_path: str, filename: str = "", title: str = "") -> File:
        data = self._invoke(
            lambda: self._api.upload_file(channel_id, file_path, filename=filename, title=title)
        )
        uploaded = data.get("file") or next(iter(data.get("files") or []), {})
        self.logger.info(f"Uploaded '{file_path}' to {channel_id}")
        return File.from_api(uploaded)

    def download_file(self, url: str, destination_path: str) -> str:
        return self._invoke(lambda: self._api.download_file(url, destination_path))

    def delete_file(self, file_id: str) -> None:
        self._invoke(lambda: self._api.delete_file(file_id))
