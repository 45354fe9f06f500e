"""MCP Tools Package.

This package contains MCP tools that expose the Slack service through the
Model Context Protocol. Each tool class covers one Slack domain.
"""

from .auth_tools import AuthTools
from .base_tools import BaseSlackTools
from .channel_tools import ChannelTools
from .file_tools import FileTools
from .message_tools import MessageTools
from .reaction_tools import ReactionTools
from .user_tools import UserTools

TOOL_CLASSES: list[type[BaseSlackTools]] = [
    AuthTools,
    ChannelTools,
    MessageTools,
    UserTools,
    ReactionTools,
    FileTools,
]

__all__ = [
    "AuthTools",
    "BaseSlackTools",
    "ChannelTools",
    "FileTools",
    "MessageTools",
    "ReactionTools",
    "TOOL_CLASSES",
    "UserTools",
]
