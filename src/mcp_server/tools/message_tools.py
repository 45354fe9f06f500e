from typing import Any

from .base_tools import BaseSlackTools


class MessageTools(BaseSlackTools):
    """MCP Tools for reading, writing and searching messages."""

    TOOL_DESCRIPTIONS = {
        "list_messages": "List messages in a Slack channel",
        "send_message": "Send a message to a Slack channel, optionally as a thread reply",
        "edit_message": "Edit an existing message",
        "delete_message": "Delete a message",
        "search_messages": "Search for messages in Slack",
    }

    WRITE_TOOLS = frozenset({"send_message", "edit_message", "delete_message"})

    def _run(self, name: str, args: Any) -> Any:
        if name == "list_messages":
            return self.service.list_messages(
                args.channel_id,
                args.pagination_request(),
                oldest=args.oldest_datetime(),
                latest=args.latest_datetime(),
            )
        elif name == "send_message":
            return self.service.send_message(args.channel_id, args.text, thread_ts=args.thread_ts)
        elif name == "edit_message":
            return self.service.edit_message(args.channel_id, args.timestamp, args.text)
        elif name == "delete_message":
            self.service.delete_message(args.channel_id, args.timestamp)
            return {"status": "deleted", "channel_id": args.channel_id, "timestamp": args.timestamp}
        elif name == "search_messages":
            return self.service.search_messages(
                args.query, sort=args.sort, sort_dir=args.sort_dir, limit=args.limit, page=args.page
            )
        raise ValueError(f"Unknown message tool '{name}'")
