from utils.error.base_custom_error import BaseCustomError


class MCPToolError(BaseCustomError):
    """Tool-level failure; its message becomes the text of the error result."""


class UnknownToolError(MCPToolError):
    def __init__(self, tool_name: str):
        super().__init__(f"unknown tool: {tool_name}", tool_name=tool_name)
        self.tool_name = tool_name


class ToolArgumentError(MCPToolError):
    """Raised when tool arguments fail validation."""

    def __init__(self, message: str, tool_name: str):
        super().__init__(message, tool_name=tool_name)
        self.tool_name = tool_name


class ToolExecutionError(MCPToolError):
    """Raised when a tool fails; carries the user-facing message of the underlying error."""

    def __init__(self, message: str, tool_name: str):
        super().__init__(message, tool_name=tool_name)
        self.tool_name = tool_name
