"""Tool name to argument model registry, and validation of incoming tool arguments."""

from typing import Any, Dict, Optional, Type

from pydantic import BaseModel, ValidationError

from utils.logging.logging_manager import LogManager

from .error import UnknownToolError
from .models import (
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


class MCPToolValidator:
    """Maps each tool to its pydantic argument model and validates calls against it.

    The same models produce the ``inputSchema`` advertised by ``list_tools``.
    """

    TOOL_MODELS: Dict[str, Type[BaseModel]] = {
        # Auth tools
        "auth_test": AuthTestArgs,
        # Channel tools
        "list_channels": ListChannelsArgs,
        "get_channel_info": ChannelIdArgs,
        "create_channel": CreateChannelArgs,
        "archive_channel": ChannelIdArgs,
        "invite_to_channel": InviteToChannelArgs,
        "kick_from_channel": KickFromChannelArgs,
        "set_channel_topic": SetChannelTopicArgs,
        "set_channel_purpose": SetChannelPurposeArgs,
        # Message tools
        "list_messages": ListMessagesArgs,
        "send_message": SendMessageArgs,
        "edit_message": EditMessageArgs,
        "delete_message": MessageRefArgs,
        "search_messages": SearchMessagesArgs,
        # User tools
        "list_users": ListUsersArgs,
        "get_user_info": UserIdArgs,
        "get_user_presence": UserIdArgs,
        # Reaction tools
        "list_reactions": ListReactionsArgs,
        "add_reaction": ReactionArgs,
        "remove_reaction": ReactionArgs,
        # File tools
        "list_files": ListFilesArgs,
        "get_file_info": FileIdArgs,
        "upload_file": UploadFileArgs,
        "download_file": DownloadFileArgs,
        "delete_file": FileIdArgs,
    }

    def __init__(self):
        self.logger = LogManager.get_instance().get_logger("MCPValidator")

    def validate_tool_args(self, tool_name: str, arguments: Optional[Dict[str, Any]]) -> BaseModel:
        """
        Validate tool arguments using the appropriate Pydantic model.

        Args:
            tool_name: Name of the MCP tool
            arguments: Dictionary of tool arguments to validate

        Returns:
            Validated Pydantic model instance

        Raises:
            ValidationError: If arguments are invalid
            UnknownToolError: If tool name is not recognized
        """
        if tool_name not in self.TOOL_MODELS:
            raise UnknownToolError(tool_name)

        model_class = self.TOOL_MODELS[tool_name]

        try:
            return model_class.model_validate(arguments or {})
        except ValidationError as e:
            self.logger.warning(f"Invalid arguments for tool {tool_name}: {e.error_count()} error(s)")
            raise

    def format_validation_error(self, error: ValidationError, tool_name: str) -> str:
        """
        Format a ValidationError into a readable tool error message.

        Args:
            error: The ValidationError to format
            tool_name: Name of the tool that failed validation

        Returns:
            One line per invalid field, prefixed by the tool name
        """
        lines = [f"validation_error: invalid arguments for tool '{tool_name}'"]

        for err in error.errors():
            field_path = ".".join(str(loc) for loc in err["loc"]) or "arguments"
            lines.append(f"- {field_path}: {err['msg']}")

        return "\n".join(lines)

    @classmethod
    def get_tool_schema(cls, tool_name: str) -> Optional[Dict[str, Any]]:
        """JSON schema of a tool's arguments, or None for an unknown tool."""
        model_class = cls.TOOL_MODELS.get(tool_name)
        return model_class.model_json_schema() if model_class else None
