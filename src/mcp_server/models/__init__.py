"""MCP Server Pydantic Models for Tool Validation.

This module provides Pydantic models for validating MCP tool arguments,
ensuring type safety and proper parameter validation for every Slack tool.
"""

from .base import BaseMCPModel, PaginationModel
from .slack_models import (
    AuthTestArgs,
    ChannelIdArgs,
    CreateChannelArgs,
    DownloadFileArgs,
    EditMessageArgs,
    FileIdArgs,
    InviteToChannelArgs,
    KickFromChannelArgs,
    ListChannelsArgs,
    ListFilesArgs,
    ListMessagesArgs,
    ListReactionsArgs,
    ListUsersArgs,
    MessageRefArgs,
    ReactionArgs,
    SearchMessagesArgs,
    SendMessageArgs,
    SetChannelPurposeArgs,
    SetChannelTopicArgs,
    UploadFileArgs,
    UserIdArgs,
)

__all__ = [
    "BaseMCPModel",
    "PaginationModel",
    # Auth models
    "AuthTestArgs",
    # Channel models
    "ListChannelsArgs",
    "ChannelIdArgs",
    "CreateChannelArgs",
    "InviteToChannelArgs",
    "KickFromChannelArgs",
    "SetChannelTopicArgs",
    "SetChannelPurposeArgs",
    # Message models
    "ListMessagesArgs",
    "SendMessageArgs",
    "MessageRefArgs",
    "EditMessageArgs",
    "SearchMessagesArgs",
    # User models
    "ListUsersArgs",
    "UserIdArgs",
    # Reaction models
    "ReactionArgs",
    "ListReactionsArgs",
    # File models
    "ListFilesArgs",
    "FileIdArgs",
    "UploadFileArgs",
    "DownloadFileArgs",
]
