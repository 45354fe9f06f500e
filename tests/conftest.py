"""Shared pytest fixtures and configuration."""

import os
import tempfile

# Logging must be configured before anything imports log_config
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="slacktoolkit-tests-")
os.environ["LOG_OUTPUT"] = "file"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ.setdefault("LOG_FILE", "tests.log")

import pytest  # noqa: E402

import log_config  # noqa: E402,F401
from tests.utils.fake_service import FakeSlackService  # noqa: E402
from utils.workspace.workspace_store import WorkspaceStore  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep real tokens and the user's workspace store out of every test."""
    monkeypatch.delenv("SLACK_TOKEN", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    yield


@pytest.fixture
def fake_service():
    return FakeSlackService()


@pytest.fixture
def store_path(tmp_path):
    return str(tmp_path / "slacktoolkit" / "config.json")


@pytest.fixture
def workspace_store(store_path):
    return WorkspaceStore(store_path)
