"""
Pydantic models for Slack MCP tools validation.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field, field_validator

from utils.command.arguments import parse_datetime
from utils.slack.slack_service import DEFAULT_SEARCH_LIMIT

from .base import BaseMCPModel, PaginationModel


class SearchSortEnum(str, Enum):
    """Search result ordering."""

    TIMESTAMP = "timestamp"
    SCORE = "score"


class SortDirectionEnum(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Auth


class AuthTestArgs(BaseMCPModel):
    """Arguments for the auth_test tool (none)."""


# Channels


class ListChannelsArgs(PaginationModel):
    """Arguments for listing channels."""


class ChannelIdArgs(BaseMCPModel):
    """Arguments for tools acting on a single channel."""

    channel_id: str = Field(..., description="Channel ID", min_length=1)


class CreateChannelArgs(BaseMCPModel):
    """Arguments for creating a channel."""

    name: str = Field(..., description="Channel name", min_length=1)
    is_private: bool = Field(False, description="Create as private channel")


class InviteToChannelArgs(ChannelIdArgs):
    """Arguments for inviting users to a channel."""

    user_ids: List[str] = Field(..., description="User IDs to invite", min_length=1)


class KickFromChannelArgs(ChannelIdArgs):
    """Arguments for removing a user from a channel."""

    user_id: str = Field(..., description="User ID to remove", min_length=1)


class SetChannelTopicArgs(ChannelIdArgs):
    topic: str = Field(..., description="New topic")


class SetChannelPurposeArgs(ChannelIdArgs):
    purpose: str = Field(..., description="New purpose")


# Messages


class ListMessagesArgs(ChannelIdArgs, PaginationModel):
    """Arguments for reading a channel's history."""

    oldest: Optional[str] = Field(
        None,
        description="Only messages after this time (Unix seconds or ISO 8601)",
    )

    latest: Optional[str] = Field(
        None,
        description="Only messages before this time (Unix seconds or ISO 8601)",
    )

    @field_validator("oldest", "latest")
    @classmethod
    def validate_time_bound(cls, v):
        """Rejects time bounds that cannot be parsed."""
        if v:
            parse_datetime(v)
        return v or None

    def oldest_datetime(self) -> Optional[datetime]:
        return parse_datetime(self.oldest) if self.oldest else None

    def latest_datetime(self) -> Optional[datetime]:
        return parse_datetime(self.latest) if self.latest else None


class SendMessageArgs(ChannelIdArgs):
    """Arguments for posting a message."""

    text: str = Field(..., description="Message text", min_length=1)
    thread_ts: str = Field("", description="Thread timestamp for replies")


class MessageRefArgs(ChannelIdArgs):
    """Arguments identifying one message."""

    timestamp: str = Field(..., description="Message timestamp", min_length=1)


class EditMessageArgs(MessageRefArgs):
    text: str = Field(..., description="New message text", min_length=1)


class SearchMessagesArgs(BaseMCPModel):
    """Arguments for searching messages."""

    query: str = Field(..., description="Search query", min_length=1)
    sort: SearchSortEnum = Field(SearchSortEnum.TIMESTAMP, description="Sort field: timestamp or score")
    sort_dir: SortDirectionEnum = Field(SortDirectionEnum.DESC, description="Sort direction: asc or desc")
    limit: int = Field(DEFAULT_SEARCH_LIMIT, description="Max results to return")
    page: int = Field(1, description="Result page (1-based)", ge=1)


# Users


class ListUsersArgs(PaginationModel):
    """Arguments for listing users."""


class UserIdArgs(BaseMCPModel):
    user_id: str = Field(..., description="User ID", min_length=1)


# Reactions


class ReactionArgs(MessageRefArgs):
    """Arguments for adding or removing a reaction."""

    name: str = Field(..., description="Emoji name (without colons)", min_length=1)

    @field_validator("name")
    @classmethod
    def strip_colons(cls, v: str) -> str:
        return v.strip(":")


class ListReactionsArgs(PaginationModel):
    """Arguments for listing reacted items."""

    user_id: str = Field("", description="User ID (defaults to authenticated user)")


# Files


class ListFilesArgs(PaginationModel):
    """Arguments for listing files."""

    channel_id: str = Field("", description="Filter by channel ID")
    user_id: str = Field("", description="Filter by user ID")


class FileIdArgs(BaseMCPModel):
    file_id: str = Field(..., description="File ID", min_length=1)


class UploadFileArgs(ChannelIdArgs):
    """Arguments for uploading a local file to a channel."""

    file_path: str = Field(..., description="Path of the local file to upload", min_length=1)
    filename: str = Field("", description="Filename shown in Slack (defaults to the file's basename)")
    title: str = Field("", description="File title")


class DownloadFileArgs(FileIdArgs):
    """Arguments for downloading a file."""

    destination: str = Field(
        "",
        description="Destination path or directory (defaults to the file's name in the working directory)",
    )
