import logging

import pytest

from utils.logging.logging_manager import LogManager, LogOutput, TokenRedactingFilter

pytestmark = pytest.mark.unit


def make_record(msg, *args):
    return logging.LogRecord("slacktoolkit.test", logging.INFO, __file__, 1, msg, args, None)


def test_component_loggers_share_the_root_handlers():
    manager = LogManager.get_instance()

    logger = manager.get_logger("SlackClient")

    assert logger.name == "slacktoolkit.SlackClient"
    assert logger.propagate is True
    assert logger.handlers == []
    assert manager.root.handlers


def test_logger_takes_only_a_component_name():
    with pytest.raises(TypeError):
        LogManager.get_instance().get_logger("MCP", "tools")


def test_empty_name_returns_root():
    manager = LogManager.get_instance()

    assert manager.get_logger("") is manager.root


def test_tokens_are_redacted():
    record = make_record("login with %s for %s", "xoxb-1234-abcd", "acme")

    assert TokenRedactingFilter().filter(record) is True
    assert record.getMessage() == "login with xoxb-*** for acme"


def test_messages_without_tokens_are_untouched():
    record = make_record("listing %d channels", 3)

    TokenRedactingFilter().filter(record)

    assert record.args == (3,)


@pytest.mark.parametrize("value, expected", [("FILE", LogOutput.FILE), ("both", LogOutput.BOTH)])
def test_log_output_parse(value, expected):
    assert LogOutput.parse(value) is expected


def test_log_output_parse_invalid():
    with pytest.raises(ValueError):
        LogOutput.parse("syslog")
