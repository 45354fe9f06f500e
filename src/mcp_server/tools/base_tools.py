import asyncio
import json
from abc import ABC, abstractmethod
from typing import Any

from mcp.types import TextContent, Tool
from pydantic import BaseModel

from utils.logging.logging_manager import LogManager
from utils.output_manager import to_serializable
from utils.slack.slack_service import SlackService

from ..validators import MCPToolValidator


class BaseSlackTools(ABC):
    """Common plumbing for one domain's Slack tools.

    Subclasses declare their tools in ``TOOL_DESCRIPTIONS``, tag state-changing ones in
    ``WRITE_TOOLS`` and map validated arguments onto the service in ``_run``.
    """

    TOOL_DESCRIPTIONS: dict[str, str] = {}
    WRITE_TOOLS: frozenset[str] = frozenset()

    def __init__(self, service: SlackService):
        self.service = service
        self.logger = LogManager.get_instance().get_logger(type(self).__name__)

    @classmethod
    def get_tool_definitions(cls, read_only: bool = False) -> list[Tool]:
        """Returns definitions of this domain's tools, without write tools when ``read_only``."""
        return [
            Tool(
                name=name,
                description=description,
                inputSchema=MCPToolValidator.get_tool_schema(name),
            )
            for name, description in cls.TOOL_DESCRIPTIONS.items()
            if not (read_only and name in cls.WRITE_TOOLS)
        ]

    @classmethod
    def handles(cls, name: str) -> bool:
        return name in cls.TOOL_DESCRIPTIONS

    @classmethod
    def is_write(cls, name: str) -> bool:
        return name in cls.WRITE_TOOLS

    async def execute_tool(self, name: str, arguments: BaseModel) -> list[TextContent]:
        """Runs tool ``name`` off the event loop and returns its result as pretty JSON."""
        self.logger.info(f"Executing tool: {name}")
        result = await asyncio.to_thread(self._run, name, arguments)
        return [TextContent(type="text", text=json.dumps(to_serializable(result), indent=2, ensure_ascii=False))]

    @abstractmethod
    def _run(self, name: str, args: Any) -> Any:
        pass
