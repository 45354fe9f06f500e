from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from utils.slack.models import AuthResult, Channel, File, Message, ReactedItem, SearchResult, User
from utils.slack.pagination import PaginatedResult, PaginationRequest

DEFAULT_SEARCH_LIMIT = 20


class SlackService(ABC):
    """Everything the CLI and the MCP server may ask of Slack.

    Implementations raise :class:`utils.slack.error.ClassifiedError` for every failure.
    Write operations that have nothing meaningful to return return ``None``.
    """

    # --- Auth ---

    @abstractmethod
    def auth_test(self) -> AuthResult:
        pass

    # --- Channels ---

    @abstractmethod
    def list_channels(self, request: PaginationRequest) -> PaginatedResult[Channel]:
        pass

    @abstractmethod
    def get_channel_info(self, channel_id: str) -> Channel:
        pass

    @abstractmethod
    def create_channel(self, name: str, is_private: bool = False) -> Channel:
        pass

    @abstractmethod
    def archive_channel(self, channel_id: str) -> None:
        pass

    @abstractmethod
    def invite_to_channel(self, channel_id: str, user_ids: Sequence[str]) -> None:
        pass

    @abstractmethod
    def kick_from_channel(self, channel_id: str, user_id: str) -> None:
        pass

    @abstractmethod
    def set_channel_topic(self, channel_id: str, topic: str) -> None:
        pass

    @abstractmethod
    def set_channel_purpose(self, channel_id: str, purpose: str) -> None:
        pass

    # --- Messages ---

    @abstractmethod
    def list_messages(
        self,
        channel_id: str,
        request: PaginationRequest,
        oldest: datetime | None = None,
        latest: datetime | None = None,
    ) -> PaginatedResult[Message]:
        pass

    @abstractmethod
    def send_message(self, channel_id: str, text: str, thread_ts: str = "") -> Message:
        pass

    @abstractmethod
    def edit_message(self, channel_id: str, timestamp: str, text: str) -> Message:
        pass

    @abstractmethod
    def delete_message(self, channel_id: str, timestamp: str) -> None:
        pass

    @abstractmethod
    def search_messages(
        self,
        query: str,
        sort: str = "timestamp",
        sort_dir: str = "desc",
        limit: int = DEFAULT_SEARCH_LIMIT,
        page: int = 1,
    ) -> SearchResult:
        pass

    # --- Users ---

    @abstractmethod
    def list_users(self, request: PaginationRequest) -> PaginatedResult[User]:
        pass

    @abstractmethod
    def get_user_info(self, user_id: str) -> User:
        pass

    @abstractmethod
    def get_user_presence(self, user_id: str) -> str:
        pass

    # --- Reactions ---

    @abstractmethod
    def add_reaction(self, channel_id: str, timestamp: str, name: str) -> None:
        pass

    @abstractmethod
    def remove_reaction(self, channel_id: str, timestamp: str, name: str) -> None:
        pass

    @abstractmethod
    def list_reactions(self, request: PaginationRequest, user_id: str = "") -> PaginatedResult[ReactedItem]:
        pass

    # --- Files ---

    @abstractmethod
    def list_files(
        self, request: PaginationRequest, channel_id: str = "", user_id: str = ""
    ) -> PaginatedResult[File]:
        pass

    @abstractmethod
    def get_file_info(self, file_id: str) -> File:
        pass

    @abstractmethod
    def upload_file(self, channel_id: str, file_path: str, filename: str = "", title: str = "") -> File:
        pass

    @abstractmethod
    def download_file(self, url: str, destination_path: str) -> str:
        """Download a private file URL; returns the written path."""

    @abstractmethod
    def delete_file(self, file_id: str) -> None:
        pass
