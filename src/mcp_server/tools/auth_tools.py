from typing import Any

from .base_tools import BaseSlackTools


class AuthTools(BaseSlackTools):
    """MCP Tools for checking the server's Slack credentials."""

    TOOL_DESCRIPTIONS = {
        "auth_test": "Test authentication and get current user info",
    }

    def _run(self, name: str, args: Any) -> Any:
        if name == "auth_test":
            return self.service.auth_test()
        raise ValueError(f"Unknown auth tool '{name}'")
