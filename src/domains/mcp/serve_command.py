"""MCP Serve Command."""

import asyncio
from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext
from utils.logging.logging_manager import LogManager


class ServeCommand(BaseCommand):
    """Runs the MCP server on stdin/stdout until the client disconnects."""

    @staticmethod
    def get_name() -> str:
        return "serve"

    @staticmethod
    def get_description() -> str:
        return "Start the MCP server (stdio transport)"

    @staticmethod
    def get_help() -> str:
        return """
Start an MCP server on stdio exposing the Slack operations as agent tools.
With --read-only, write tools are hidden and rejected.

Examples:
  slacktoolkit mcp serve
  slacktoolkit mcp serve --read-only -w acme

MCP client configuration:
  {"command": "slacktoolkit", "args": ["mcp", "serve", "--read-only"]}
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        pass

    @staticmethod
    def main(args: Namespace, context: RunContext):
        from mcp_server.slack_mcp_server import SlackMCPServer

        logger = LogManager.get_instance().get_logger("ServeCommand")
        server = SlackMCPServer(context.service, read_only=context.read_only)
        logger.info("Serving MCP over stdio")
        asyncio.run(server.run_stdio())
