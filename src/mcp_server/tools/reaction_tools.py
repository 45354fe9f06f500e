from typing import Any

from .base_tools import BaseSlackTools


class ReactionTools(BaseSlackTools):
    """MCP Tools for emoji reactions."""

    TOOL_DESCRIPTIONS = {
        "list_reactions": "List items a user reacted to",
        "add_reaction": "Add an emoji reaction to a message",
        "remove_reaction": "Remove an emoji reaction from a message",
    }

    WRITE_TOOLS = frozenset({"add_reaction", "remove_reaction"})

    def _run(self, name: str, args: Any) -> Any:
        if name == "list_reactions":
            return self.service.list_reactions(args.pagination_request(), user_id=args.user_id)
        elif name == "add_reaction":
            self.service.add_reaction(args.channel_id, args.timestamp, args.name)
            return self._status("added", args)
        elif name == "remove_reaction":
            self.service.remove_reaction(args.channel_id, args.timestamp, args.name)
            return self._status("removed", args)
        raise ValueError(f"Unknown reaction tool '{name}'")

    @staticmethod
    def _status(status: str, args: Any) -> dict[str, str]:
        return {
            "status": status,
            "reaction": args.name,
            "channel_id": args.channel_id,
            "timestamp": args.timestamp,
        }
