from typing import Any

from .base_tools import BaseSlackTools


class UserTools(BaseSlackTools):
    TOOL_DESCRIPTIONS = {
        "list_users": "List Slack users",
        "get_user_info": "Get information about a Slack user",
        "get_user_presence": "Get a user's presence status",
    }

    def _run(self, name: str, args: Any) -> Any:
        if name == "list_users":
            return self.service.list_users(args.pagination_request())
        elif name == "get_user_info":
            return self.service.get_user_info(args.user_id)
        elif name == "get_user_presence":
            return {"user_id": args.user_id, "presence": self.service.get_user_presence(args.user_id)}
        raise ValueError(f"Unknown user tool '{name}'")
