# flake8: noqa: E402
import sys
from pathlib import Path

# Add src to sys.path when launched as a script by an MCP client
src_dir = Path(__file__).resolve().parent.parent
if str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

# MCP Configuration - MUST BE FIRST
from mcp_server.mcp_config import MCPConfig

MCPConfig.setup_environment()

from typing import Any, Optional

from mcp.server import Server
from mcp.types import TextContent, Tool
from pydantic import ValidationError

from mcp_server.error import MCPToolError, ToolArgumentError, ToolExecutionError, UnknownToolError
from mcp_server.tools import TOOL_CLASSES, BaseSlackTools
from mcp_server.validators import MCPToolValidator
from utils.command.error import ReadOnlyViolationError
from utils.error.error_manager import error_message
from utils.logging.logging_manager import LogManager
from utils.slack.slack_service import SlackService


class SlackMCPServer:
    """
    MCP Server exposing the Slack service as agent tools.

    Every failure (unknown tool, read-only violation, invalid arguments, Slack errors)
    is raised out of the call handler so the client receives a tool-level error result
    carrying a readable message.
    """

    def __init__(self, service: SlackService, read_only: bool = False):
        self.logger = LogManager.get_instance().get_logger("MCPServer")
        self.info = MCPConfig.server_info(read_only=read_only)
        self.read_only = read_only
        self.validator = MCPToolValidator()

        self.server = Server(self.info["name"])
        self.tool_handlers: list[BaseSlackTools] = [tool_class(service) for tool_class in TOOL_CLASSES]

        self._register_handlers()

        mode = "read-only" if read_only else "read-write"
        self.logger.info(
            f"MCP Server initialized: {self.info['name']} v{self.info['version']} ({mode})"
        )

    def _register_handlers(self):
        """Register MCP handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[Tool]:
            return self.list_tools()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict) -> list[TextContent]:
            return await self.call_tool(name, arguments)

    def list_tools(self) -> list[Tool]:
        """All tools, without write tools in read-only mode."""
        tools = []
        for handler in self.tool_handlers:
            tools.extend(handler.get_tool_definitions(read_only=self.read_only))

        self.logger.debug(f"Listed {len(tools)} tools")
        return tools

    async def call_tool(self, name: str, arguments: Optional[dict[str, Any]]) -> list[TextContent]:
        """Validates and executes one tool call.

        Raises:
            MCPToolError: For every failure, with the message shown to the client.
        """
        self.logger.info(f"Executing tool: {name} with args: {arguments}")

        handler = self._handler_for(name)
        try:
            if self.read_only and handler.is_write(name):
                raise ReadOnlyViolationError(name, kind="tool")

            try:
                args = self.validator.validate_tool_args(name, arguments)
            except ValidationError as e:
                raise ToolArgumentError(self.validator.format_validation_error(e, name), name) from e

            return await handler.execute_tool(name, args)
        except MCPToolError:
            raise
        except Exception as e:
            message = error_message(e)
            self.logger.error(f"Error executing tool {name}: {message}", exc_info=e)
            raise ToolExecutionError(message, name) from e

    def _handler_for(self, name: str) -> BaseSlackTools:
        for handler in self.tool_handlers:
            if handler.handles(name):
                return handler
        self.logger.error(f"Tool '{name}' not found")
        raise UnknownToolError(name)

    async def run_stdio(self):
        """Run server via stdio."""
        self.logger.info("Starting MCP server with stdio transport")

        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream, self.server.create_initialization_options())


def main():
    """Script entry point: same as ``slacktoolkit mcp serve`` with the given global options."""
    from main import run

    sys.exit(run(["mcp", "serve", *sys.argv[1:]]))


if __name__ == "__main__":
    main()
