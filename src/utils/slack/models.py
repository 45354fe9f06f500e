"""Read-only snapshots of Slack entities returned by the service layer."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any

# Fields dropped from ``to_dict`` output when empty.
_OMIT_WHEN_EMPTY = frozenset({"topic", "purpose", "email", "tz", "presence", "thread_ts", "channel", "timestamp"})


class _Record:
    """Serialization shared by every record."""

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)  # type: ignore[call-overload]
        return {key: value for key, value in data.items() if not (key in _OMIT_WHEN_EMPTY and value in ("", None))}

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]  # type: ignore[arg-type]


def _text_value(value: Any) -> str:
    """Slack wraps topic and purpose as ``{"value": ...}``."""
    if isinstance(value, dict):
        return value.get("value", "") or ""
    return value or ""


@dataclass(frozen=True)
class Channel(_Record):
    id: str
    name: str = ""
    topic: str = ""
    purpose: str = ""
    num_members: int = 0
    is_archived: bool = False
    is_private: bool = False
    is_member: bool = False
    created: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Channel":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            topic=_text_value(data.get("topic")),
            purpose=_text_value(data.get("purpose")),
            num_members=int(data.get("num_members") or 0),
            is_archived=bool(data.get("is_archived", False)),
            is_private=bool(data.get("is_private", False)),
            is_member=bool(data.get("is_member", False)),
            created=int(data.get("created") or 0),
        )


@dataclass(frozen=True)
class Message(_Record):
    timestamp: str
    user: str = ""
    text: str = ""
    thread_ts: str = ""
    channel: str = ""
    type: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any], channel: str = "") -> "Message":
        """Build from a history or search payload; search nests the channel as ``{"id": ...}``."""
        raw_channel = data.get("channel")
        if isinstance(raw_channel, dict):
            raw_channel = raw_channel.get("id", "")
        return cls(
            timestamp=data.get("ts", ""),
            user=data.get("user", ""),
            text=data.get("text", ""),
            thread_ts=data.get("thread_ts", "") or "",
            channel=channel or raw_channel or "",
            type=data.get("type", ""),
        )


@dataclass(frozen=True)
class User(_Record):
    id: str
    name: str = ""
    real_name: str = ""
    email: str = ""
    is_admin: bool = False
    is_bot: bool = False
    deleted: bool = False
    tz: str = ""
    presence: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "User":
        profile = data.get("profile") or {}
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            real_name=data.get("real_name") or profile.get("real_name", ""),
            email=profile.get("email", ""),
            is_admin=bool(data.get("is_admin", False)),
            is_bot=bool(data.get("is_bot", False)),
            deleted=bool(data.get("deleted", False)),
            tz=data.get("tz", "") or "",
        )


@dataclass(frozen=True)
class File(_Record):
    id: str
    name: str = ""
    title: str = ""
    mimetype: str = ""
    filetype: str = ""
    size: int = 0
    user: str = ""
    created: int = 0
    url_private: str = ""
    permalink: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "File":
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            title=data.get("title", ""),
            mimetype=data.get("mimetype", ""),
            filetype=data.get("filetype", ""),
            size=int(data.get("size") or 0),
            user=data.get("user", ""),
            created=int(data.get("created") or 0),
            url_private=data.get("url_private_download") or data.get("url_private", ""),
            permalink=data.get("permalink", ""),
        )


@dataclass(frozen=True)
class Reaction(_Record):
    name: str
    count: int = 0
    users: tuple[str, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "Reaction":
        return cls(
            name=data.get("name", ""),
            count=int(data.get("count") or 0),
            users=tuple(data.get("users") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "count": self.count, "users": list(self.users)}


@dataclass(frozen=True)
class ReactedItem(_Record):
    type: str
    channel: str = ""
    timestamp: str = ""
    reactions: tuple[Reaction, ...] = ()

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "ReactedItem":
        """``reactions.list`` puts channel on the item and reactions on the nested message."""
        message = data.get("message") or {}
        return cls(
            type=data.get("type", ""),
            channel=data.get("channel") or message.get("channel", ""),
            timestamp=message.get("ts", ""),
            reactions=tuple(Reaction.from_api(r) for r in message.get("reactions") or ()),
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"type": self.type}
        if self.channel:
            payload["channel"] = self.channel
        if self.timestamp:
            payload["timestamp"] = self.timestamp
        payload["reactions"] = [reaction.to_dict() for reaction in self.reactions]
        return payload


@dataclass(frozen=True)
class AuthResult(_Record):
    user_id: str
    user: str = ""
    team_id: str = ""
    team: str = ""
    url: str = ""

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "AuthResult":
        return cls(
            user_id=data.get("user_id", ""),
            user=data.get("user", ""),
            team_id=data.get("team_id", ""),
            team=data.get("team", ""),
            url=data.get("url", ""),
        )


@dataclass(frozen=True)
class SearchResult(_Record):
    matches: tuple[Message, ...] = field(default_factory=tuple)
    total: int = 0

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "SearchResult":
        messages = data.get("messages") or {}
        return cls(
            matches=tuple(
                Message.from_api({**match, "type": match.get("type") or "message"})
                for match in messages.get("matches") or ()
            ),
            total=int(messages.get("total") or 0),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"matches": [match.to_dict() for match in self.matches], "total": self.total}
