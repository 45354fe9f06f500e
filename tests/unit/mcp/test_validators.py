"""Tests for MCP tool argument models."""

import pytest
from pydantic import ValidationError

from mcp_server.error import UnknownToolError
from mcp_server.models import ListMessagesArgs, ReactionArgs, SearchMessagesArgs
from mcp_server.tools import TOOL_CLASSES
from mcp_server.validators import MCPToolValidator

pytestmark = pytest.mark.unit


@pytest.fixture
def validator():
    return MCPToolValidator()


def test_every_tool_has_a_model():
    declared = {name for tool_class in TOOL_CLASSES for name in tool_class.TOOL_DESCRIPTIONS}

    assert declared == set(MCPToolValidator.TOOL_MODELS)


def test_write_tools_are_declared_tools():
    for tool_class in TOOL_CLASSES:
        assert tool_class.WRITE_TOOLS <= set(tool_class.TOOL_DESCRIPTIONS)


def test_search_defaults_are_plain_strings():
    args = SearchMessagesArgs(query="deploy")

    assert args.sort == "timestamp"
    assert args.sort_dir == "desc"
    assert args.limit == 20
    assert args.page == 1


def test_search_rejects_unknown_sort():
    with pytest.raises(ValidationError):
        SearchMessagesArgs(query="deploy", sort="relevance")


def test_invalid_time_bound():
    with pytest.raises(ValidationError):
        ListMessagesArgs(channel_id="C1", oldest="last tuesday")


def test_empty_time_bound_is_none():
    args = ListMessagesArgs(channel_id="C1", oldest="")

    assert args.oldest is None
    assert args.oldest_datetime() is None


def test_reaction_name_without_colons():
    assert ReactionArgs(channel_id="C1", timestamp="1.1", name=":+1:").name == "+1"


def test_format_validation_error(validator):
    with pytest.raises(ValidationError) as exc_info:
        validator.validate_tool_args("invite_to_channel", {"channel_id": "C1", "user_ids": []})

    message = validator.format_validation_error(exc_info.value, "invite_to_channel")

    assert message.startswith("validation_error: invalid arguments for tool 'invite_to_channel'")
    assert "- user_ids:" in message


def test_unknown_tool(validator):
    with pytest.raises(UnknownToolError):
        validator.validate_tool_args("nope", {})

    assert validator.get_tool_schema("nope") is None
