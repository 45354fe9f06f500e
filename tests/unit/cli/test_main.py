"""End-to-end tests of the CLI dispatch against an in-memory service."""

import io
import json
from datetime import datetime, timezone

import pytest

from main import run
from utils.slack.error import ClassifiedError, ErrorCategory
from utils.workspace.workspace_store import Workspace

pytestmark = pytest.mark.unit


class CLI:
    """Runs the CLI in-process and captures its streams."""

    def __init__(self, service, store):
        self.service = service
        self.store = store
        self.tokens: list[str] = []
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def factory(self, token: str):
        self.tokens.append(token)
        return self.service

    def __call__(self, *argv: str) -> int:
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()
        return run(
            list(argv),
            store=self.store,
            service_factory=self.factory,
            stdout=self.stdout,
            stderr=self.stderr,
        )

    def json(self):
        return json.loads(self.stdout.getvalue())


@pytest.fixture
def cli(fake_service, workspace_store):
    return CLI(fake_service, workspace_store)


class TestDispatch:
    def test_no_command_prints_help(self, cli):
        assert cli() == 0
        assert "slacktoolkit" in cli.stdout.getvalue()

    def test_list_channels_json(self, cli):
        assert cli("channels", "list", "--token", "xoxb-flag", "-o", "json") == 0

        data = cli.json()
        assert [item["id"] for item in data["items"]] == ["C1", "C2", "C3"]
        assert data["has_more"] is False
        assert cli.tokens == ["xoxb-flag"]

    def test_global_options_before_subcommand(self, cli):
        assert cli("--token", "xoxb-flag", "-o", "table", "channels", "list", "--limit", "2") == 0

        output = cli.stdout.getvalue()
        assert output.splitlines()[0].startswith("ID")
        assert "More results available. Next cursor: 2" in output

    def test_pagination_flags_reach_the_service(self, cli, fake_service):
        assert cli("users", "list", "--limit", "1", "--cursor", "1", "--all", "--token", "t", "-o", "json") == 0

        _, (request,) = fake_service.calls[0]
        assert (request.cursor, request.limit, request.fetch_all) == ("1", 1, True)
        assert [user["id"] for user in cli.json()["items"]] == ["U2"]

    def test_environment_token(self, cli, monkeypatch):
        monkeypatch.setenv("SLACK_TOKEN", "xoxb-env")

        assert cli("users", "info", "U1", "-o", "json") == 0
        assert cli.tokens == ["xoxb-env"]
        assert cli.json()["email"] == "alice@example.com"

    def test_active_workspace_token(self, cli, workspace_store):
        workspace_store.set_workspace(Workspace(name="acme", token="xoxb-acme"))

        assert cli("channels", "info", "C1", "-o", "json") == 0
        assert cli.tokens == ["xoxb-acme"]


class TestExitCodes:
    def test_missing_token_is_auth_failure(self, cli, fake_service):
        assert cli("channels", "list") == 2
        assert "no token found" in cli.stderr.getvalue()
        assert fake_service.calls == []

    def test_not_found(self, cli):
        assert cli("channels", "info", "C404", "--token", "t") == 3
        assert cli.stderr.getvalue() == "Error: not_found: channel_not_found (conversations.info)\n"

    def test_auth_error_from_service(self, cli, fake_service):
        fake_service.error = ClassifiedError(ErrorCategory.AUTH, "invalid_auth")

        assert cli("channels", "list", "--token", "t") == 2
        assert "Error: auth_error: invalid_auth" in cli.stderr.getvalue()

    def test_other_categories(self, cli, fake_service):
        fake_service.error = ClassifiedError(ErrorCategory.RATE_LIMIT, "rate limited after 3 retries")

        assert cli("users", "list", "--token", "t") == 1
        assert "rate_limited: rate limited after 3 retries" in cli.stderr.getvalue()

    def test_unknown_workspace(self, cli):
        assert cli("channels", "list", "-w", "ghost") == 1
        assert 'workspace "ghost" not found' in cli.stderr.getvalue()

    def test_usage_error_is_general_failure(self, cli, fake_service):
        assert cli("channels", "info", "--token", "t") == 1

        stderr = cli.stderr.getvalue()
        assert stderr.startswith("usage: slacktoolkit channels info")
        assert stderr.endswith("Error: the following arguments are required: channel_id\n")
        assert fake_service.calls == []

    @pytest.mark.parametrize(
        "argv",
        [
            ["channels", "list", "--limit", "abc"],
            ["channels", "archive-everything"],
            ["--no-such-flag", "channels", "list"],
        ],
    )
    def test_bad_arguments_never_look_like_auth_failures(self, cli, argv):
        assert cli(*argv, "--token", "t") == 1
        assert "Error: " in cli.stderr.getvalue()

    def test_help_still_exits_cleanly(self, cli):
        with pytest.raises(SystemExit) as exc_info:
            cli("channels", "list", "--help")

        assert exc_info.value.code == 0


class TestReadOnly:
    @pytest.mark.parametrize(
        "argv,command",
        [
            (["channels", "create", "new-channel"], "channels create"),
            (["messages", "send", "--channel", "C1", "--text", "hi"], "messages send"),
            (["reactions", "add", "--channel", "C1", "--timestamp", "1.1", "--name", "tada"], "reactions add"),
            (["files", "delete", "F1"], "files delete"),
        ],
    )
    def test_write_commands_are_rejected(self, cli, fake_service, argv, command):
        assert cli("--read-only", "--token", "t", *argv) == 1

        assert f'command "{command}" is a write operation' in cli.stderr.getvalue()
        assert fake_service.calls == []

    def test_flag_after_subcommand(self, cli, fake_service):
        assert cli("channels", "archive", "C1", "--read-only", "--token", "t") == 1
        assert fake_service.calls == []

    def test_read_commands_still_work(self, cli, fake_service):
        assert cli("--read-only", "--token", "t", "messages", "list", "--channel", "C1", "-o", "json") == 0
        assert len(cli.json()["items"]) == 2


class TestCommands:
    def test_create_channel(self, cli, fake_service):
        assert cli("channels", "create", "launch", "--private", "--token", "t", "-o", "json") == 0

        assert fake_service.calls == [("create_channel", ("launch", True))]
        assert cli.json()["name"] == "launch"

    def test_invite(self, cli, fake_service):
        assert cli("channels", "invite", "C1", "U1", "U2", "--token", "t", "-o", "json") == 0

        assert fake_service.calls == [("invite_to_channel", ("C1", ["U1", "U2"]))]
        assert cli.json() == {"status": "invited", "channel": "C1", "users": ["U1", "U2"]}

    def test_kick(self, cli):
        assert cli("channels", "kick", "C1", "U2", "--token", "t", "-o", "json") == 0
        assert cli.json() == {"status": "removed", "channel": "C1", "user": "U2"}

    def test_topic(self, cli):
        assert cli("channels", "topic", "C1", "Launch day", "--token", "t", "-o", "json") == 0
        assert cli.json() == {"status": "updated", "channel": "C1", "topic": "Launch day"}

    def test_messages_list_time_bounds(self, cli, fake_service):
        argv = ["messages", "list", "--channel", "C1", "--oldest", "2024-01-01", "--latest", "1704153600"]
        assert cli(*argv, "--token", "t", "-o", "json") == 0

        _, (channel, _, oldest, latest) = fake_service.calls[0]
        assert channel == "C1"
        assert oldest == datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert latest == datetime(2024, 1, 2, tzinfo=timezone.utc)

    def test_messages_list_rejects_bad_time(self, cli, fake_service):
        assert cli("messages", "list", "--channel", "C1", "--oldest", "yesterday", "--token", "t") == 1

        assert "invalid time: 'yesterday'" in cli.stderr.getvalue()
        assert fake_service.calls == []

    def test_reply(self, cli, fake_service):
        argv = ["messages", "reply", "--channel", "C1", "--thread-ts", "1700000001.000100", "--text", "ack"]
        assert cli(*argv, "--token", "t", "-o", "json") == 0

        assert fake_service.calls == [("send_message", ("C1", "ack", "1700000001.000100"))]
        assert cli.json()["thread_ts"] == "1700000001.000100"

    def test_search_table_shows_total(self, cli, fake_service):
        assert cli("messages", "search", "--query", "first", "--token", "t", "-o", "table") == 0

        assert fake_service.calls == [("search_messages", ("first", "timestamp", "desc", 20, 1))]
        assert cli.stdout.getvalue().endswith("\nTotal: 1\n")

    def test_presence(self, cli):
        assert cli("users", "presence", "U2", "--token", "t", "-o", "json") == 0
        assert cli.json() == {"user_id": "U2", "presence": "away"}

    def test_reactions_remove(self, cli, fake_service):
        argv = ["reactions", "remove", "--channel", "C1", "--timestamp", "1.1", "--name", "tada"]
        assert cli(*argv, "--token", "t", "-o", "json") == 0

        assert fake_service.calls == [("remove_reaction", ("C1", "1.1", "tada"))]
        assert cli.json()["status"] == "removed"

    def test_reactions_list(self, cli):
        assert cli("reactions", "list", "--token", "t", "-o", "json") == 0
        assert cli.json()["items"][0]["reactions"][0]["name"] == "thumbsup"

    def test_upload_missing_file(self, cli, fake_service, tmp_path):
        missing = str(tmp_path / "nope.txt")

        assert cli("files", "upload", "--channel", "C1", "--file", missing, "--token", "t") == 1
        assert "File not found" in cli.stderr.getvalue()
        assert fake_service.calls == []

    def test_upload_defaults_filename(self, cli, fake_service, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        assert cli("files", "upload", "--channel", "C1", "--file", str(path), "--token", "t", "-o", "json") == 0
        assert fake_service.calls == [("upload_file", ("C1", str(path), "notes.txt", ""))]

    def test_download(self, cli, fake_service, tmp_path):
        destination = str(tmp_path / "out.pdf")

        assert cli("files", "download", "F1", "-d", destination, "--token", "t", "-o", "json") == 0
        assert fake_service.call_names() == ["get_file_info", "download_file"]
        assert cli.json() == {"status": "downloaded", "file": "F1", "path": destination}

    def test_version_needs_no_token(self, cli):
        assert cli("version", "-o", "json") == 0
        assert set(cli.json()) == {"version", "python"}


class TestAuth:
    def test_login_saves_workspace(self, cli, workspace_store, fake_service):
        assert cli("auth", "login", "--token", "xoxb-new", "-o", "json") == 0

        assert cli.json() == {
            "status": "authenticated",
            "team": "Acme",
            "user": "alice",
            "team_id": "T1",
            "workspace": "Acme",
        }
        assert workspace_store.active_workspace == "Acme"
        assert workspace_store.get_workspace("Acme").token == "xoxb-new"
        assert cli.tokens == ["xoxb-new"]

    def test_login_with_name(self, cli, workspace_store):
        assert cli("auth", "login", "--token", "xoxb-new", "--name", "work", "-o", "json") == 0
        assert workspace_store.active_workspace == "work"

    def test_login_requires_token(self, cli, monkeypatch):
        monkeypatch.setenv("SLACK_TOKEN", "xoxb-env")

        assert cli("auth", "login") == 2

    def test_status_not_authenticated(self, cli):
        assert cli("auth", "status", "-o", "json") == 0
        assert cli.json() == {"status": "not_authenticated"}

    def test_status_error(self, cli, fake_service):
        fake_service.error = ClassifiedError(ErrorCategory.AUTH, "token_revoked")

        assert cli("auth", "status", "--token", "t", "-o", "json") == 0
        assert cli.json() == {"status": "error", "error": "auth_error: token_revoked"}

    def test_list_switch_logout(self, cli, workspace_store):
        workspace_store.set_workspace(Workspace(name="a", token="xoxb-a", team_id="TA"))
        workspace_store.set_workspace(Workspace(name="b", token="xoxb-b", team_id="TB"))

        assert cli("auth", "switch", "a", "-o", "json") == 0
        assert cli.json() == {"status": "switched", "workspace": "a"}

        assert cli("auth", "list", "-o", "json") == 0
        assert cli.json() == [
            {"name": "a", "team_id": "TA", "active": True},
            {"name": "b", "team_id": "TB", "active": False},
        ]

        assert cli("auth", "logout", "-o", "json") == 0
        assert cli.json() == {"status": "logged_out", "workspace": "a"}
        assert workspace_store.active_workspace == "b"

    def test_switch_unknown(self, cli):
        assert cli("auth", "switch", "ghost") == 1
