"""Tests for the Slack MCP tool surface."""

import json
from datetime import datetime, timezone

import pytest
from mcp import types

from mcp_server.error import ToolArgumentError, ToolExecutionError, UnknownToolError
from mcp_server.slack_mcp_server import SlackMCPServer
from utils.slack.error import ClassifiedError, ErrorCategory

pytestmark = pytest.mark.unit

WRITE_TOOLS = {
    "create_channel",
    "archive_channel",
    "invite_to_channel",
    "kick_from_channel",
    "set_channel_topic",
    "set_channel_purpose",
    "send_message",
    "edit_message",
    "delete_message",
    "add_reaction",
    "remove_reaction",
    "upload_file",
    "delete_file",
}

READ_TOOLS = {
    "auth_test",
    "list_channels",
    "get_channel_info",
    "list_messages",
    "search_messages",
    "list_users",
    "get_user_info",
    "get_user_presence",
    "list_reactions",
    "list_files",
    "get_file_info",
    "download_file",
}


@pytest.fixture
def server(fake_service):
    return SlackMCPServer(fake_service)


@pytest.fixture
def read_only_server(fake_service):
    return SlackMCPServer(fake_service, read_only=True)


async def call(server: SlackMCPServer, name: str, arguments=None):
    content = await server.call_tool(name, arguments or {})
    assert len(content) == 1
    return json.loads(content[0].text)


class TestToolListing:
    def test_all_tools_listed(self, server):
        names = {tool.name for tool in server.list_tools()}

        assert names == READ_TOOLS | WRITE_TOOLS

    def test_read_only_hides_write_tools(self, read_only_server):
        names = {tool.name for tool in read_only_server.list_tools()}

        assert names == READ_TOOLS

    def test_schema_defaults(self, server):
        tools = {tool.name: tool for tool in server.list_tools()}

        list_channels = tools["list_channels"].inputSchema["properties"]
        assert list_channels["limit"]["default"] == 100
        assert list_channels["all"]["default"] is False
        assert list_channels["cursor"]["default"] == ""

        search = tools["search_messages"].inputSchema
        assert search["properties"]["limit"]["default"] == 20
        assert search["required"] == ["query"]

        assert tools["get_channel_info"].inputSchema["required"] == ["channel_id"]
        assert tools["get_channel_info"].inputSchema["additionalProperties"] is False


class TestToolCalls:
    @pytest.mark.asyncio
    async def test_list_channels_defaults(self, server, fake_service):
        data = await call(server, "list_channels")

        assert [item["id"] for item in data["items"]] == ["C1", "C2", "C3"]
        assert data["has_more"] is False
        _, (request,) = fake_service.calls[0]
        assert (request.cursor, request.limit, request.fetch_all) == ("", 100, False)

    @pytest.mark.asyncio
    async def test_list_channels_page(self, server):
        data = await call(server, "list_channels", {"limit": 2})

        assert data["next_cursor"] == "2"
        assert data["has_more"] is True

    @pytest.mark.asyncio
    async def test_list_messages_parses_time_bounds(self, server, fake_service):
        await call(server, "list_messages", {"channel_id": "C1", "oldest": "2024-01-01", "latest": "1704153600"})

        _, (channel, _, oldest, latest) = fake_service.calls[0]
        assert channel == "C1"
        assert oldest == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert latest == datetime(2024, 1, 2, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_search_defaults(self, server, fake_service):
        data = await call(server, "search_messages", {"query": "second"})

        assert fake_service.calls == [("search_messages", ("second", "timestamp", "desc", 20, 1))]
        assert data["total"] == 1

    @pytest.mark.asyncio
    async def test_send_reply(self, server, fake_service):
        data = await call(server, "send_message", {"channel_id": "C1", "text": "ack", "thread_ts": "1.1"})

        assert fake_service.calls == [("send_message", ("C1", "ack", "1.1"))]
        assert data["thread_ts"] == "1.1"

    @pytest.mark.asyncio
    async def test_invite_status(self, server, fake_service):
        data = await call(server, "invite_to_channel", {"channel_id": "C1", "user_ids": ["U1", "U2"]})

        assert data == {"status": "invited", "channel_id": "C1", "user_ids": ["U1", "U2"]}
        assert fake_service.calls == [("invite_to_channel", ("C1", ["U1", "U2"]))]

    @pytest.mark.asyncio
    async def test_presence(self, server):
        assert await call(server, "get_user_presence", {"user_id": "U1"}) == {"user_id": "U1", "presence": "active"}

    @pytest.mark.asyncio
    async def test_add_reaction_strips_colons(self, server, fake_service):
        data = await call(server, "add_reaction", {"channel_id": "C1", "timestamp": "1.1", "name": ":tada:"})

        assert fake_service.calls == [("add_reaction", ("C1", "1.1", "tada"))]
        assert data["status"] == "added"

    @pytest.mark.asyncio
    async def test_download_file(self, server, fake_service, tmp_path):
        destination = str(tmp_path / "report.pdf")

        data = await call(server, "download_file", {"file_id": "F1", "destination": destination})

        assert data == {"status": "downloaded", "file_id": "F1", "path": destination}
        assert fake_service.call_names() == ["get_file_info", "download_file"]

    @pytest.mark.asyncio
    async def test_upload_missing_file(self, server, fake_service, tmp_path):
        with pytest.raises(ToolExecutionError) as exc_info:
            await server.call_tool("upload_file", {"channel_id": "C1", "file_path": str(tmp_path / "nope")})

        assert "File not found" in str(exc_info.value)
        assert fake_service.calls == []


class TestToolErrors:
    @pytest.mark.asyncio
    async def test_read_only_rejects_write_tool(self, read_only_server, fake_service):
        with pytest.raises(ToolExecutionError) as exc_info:
            await read_only_server.call_tool("create_channel", {"name": "launch"})

        assert str(exc_info.value) == (
            'tool "create_channel" is a write operation and cannot be used in read-only mode'
        )
        assert fake_service.calls == []

    @pytest.mark.asyncio
    async def test_classified_error_message(self, server):
        with pytest.raises(ToolExecutionError) as exc_info:
            await server.call_tool("get_channel_info", {"channel_id": "C404"})

        assert str(exc_info.value) == "not_found: channel_not_found (conversations.info)"

    @pytest.mark.asyncio
    async def test_service_failure(self, server, fake_service):
        fake_service.error = ClassifiedError(ErrorCategory.RATE_LIMIT, "rate limited after 3 retries")

        with pytest.raises(ToolExecutionError) as exc_info:
            await server.call_tool("list_users", {})

        assert str(exc_info.value) == "rate_limited: rate limited after 3 retries"

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, server, fake_service):
        with pytest.raises(ToolArgumentError) as exc_info:
            await server.call_tool("get_channel_info", {})

        assert "channel_id" in str(exc_info.value)
        assert fake_service.calls == []

    @pytest.mark.asyncio
    async def test_unknown_argument(self, server):
        with pytest.raises(ToolArgumentError):
            await server.call_tool("list_users", {"limt": 5})

    @pytest.mark.asyncio
    async def test_unknown_tool(self, server):
        with pytest.raises(UnknownToolError):
            await server.call_tool("post_to_twitter", {})

    @pytest.mark.asyncio
    async def test_protocol_handler_returns_error_result(self, server):
        handler = server.server.request_handlers[types.CallToolRequest]
        request = types.CallToolRequest(
            method="tools/call",
            params=types.CallToolRequestParams(name="get_channel_info", arguments={"channel_id": "C404"}),
        )

        result = await handler(request)

        assert result.root.isError is True
        assert "channel_not_found" in result.root.content[0].text
