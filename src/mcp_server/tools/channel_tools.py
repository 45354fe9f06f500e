from typing import Any

from .base_tools import BaseSlackTools


class ChannelTools(BaseSlackTools):
    """MCP Tools for Slack channels."""

    TOOL_DESCRIPTIONS = {
        "list_channels": "List Slack channels",
        "get_channel_info": "Get information about a Slack channel",
        "create_channel": "Create a new Slack channel",
        "archive_channel": "Archive a Slack channel",
        "invite_to_channel": "Invite users to a channel",
        "kick_from_channel": "Remove a user from a channel",
        "set_channel_topic": "Set a channel's topic",
        "set_channel_purpose": "Set a channel's purpose",
    }

    WRITE_TOOLS = frozenset(
        {
            "create_channel",
            "archive_channel",
            "invite_to_channel",
            "kick_from_channel",
            "set_channel_topic",
            "set_channel_purpose",
        }
    )

    def _run(self, name: str, args: Any) -> Any:
        if name == "list_channels":
            return self.service.list_channels(args.pagination_request())
        elif name == "get_channel_info":
            return self.service.get_channel_info(args.channel_id)
        elif name == "create_channel":
            return self.service.create_channel(args.name, is_private=args.is_private)
        elif name == "archive_channel":
            self.service.archive_channel(args.channel_id)
            return {"status": "archived", "channel_id": args.channel_id}
        elif name == "invite_to_channel":
            self.service.invite_to_channel(args.channel_id, args.user_ids)
            return {"status": "invited", "channel_id": args.channel_id, "user_ids": args.user_ids}
        elif name == "kick_from_channel":
            self.service.kick_from_channel(args.channel_id, args.user_id)
            return {"status": "removed", "channel_id": args.channel_id, "user_id": args.user_id}
        elif name == "set_channel_topic":
            self.service.set_channel_topic(args.channel_id, args.topic)
            return {"status": "updated", "channel_id": args.channel_id, "topic": args.topic}
        elif name == "set_channel_purpose":
            self.service.set_channel_purpose(args.channel_id, args.purpose)
            return {"status": "updated", "channel_id": args.channel_id, "purpose": args.purpose}
        raise ValueError(f"Unknown channel tool '{name}'")
