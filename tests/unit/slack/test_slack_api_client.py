"""Tests for the slack_sdk boundary."""

from unittest.mock import MagicMock, patch
from urllib.error import URLError

import pytest
import requests
from slack_sdk.errors import SlackApiError as SdkApiError
from slack_sdk.errors import SlackRequestError

from utils.slack.error import SlackApiRequestError, SlackNetworkError, SlackRateLimitError
from utils.slack.slack_api_client import SlackApiClient, _retry_after

pytestmark = pytest.mark.unit


def sdk_error(error: str, status_code: int = 200, headers=None) -> SdkApiError:
    response = MagicMock()
    response.get.side_effect = {"ok": False, "error": error}.get
    response.status_code = status_code
    response.headers = headers or {}
    return SdkApiError("The request to the Slack API failed.", response)


def ok(data: dict):
    response = MagicMock()
    response.data = data
    return response


@pytest.fixture
def web_client():
    return MagicMock()


@pytest.fixture
def api(web_client):
    return SlackApiClient("xoxb-test", web_client=web_client)


def test_returns_response_data(api, web_client):
    web_client.auth_test.return_value = ok({"ok": True, "user_id": "U1"})

    assert api.auth_test() == {"ok": True, "user_id": "U1"}


def test_empty_arguments_are_not_sent(api, web_client):
    web_client.conversations_history.return_value = ok({"messages": []})

    api.get_conversation_history("C1", cursor="", limit=50, oldest="1700000000.000000")

    web_client.conversations_history.assert_called_once_with(channel="C1", limit=50, oldest="1700000000.000000")


def test_list_conversations_includes_archived(api, web_client):
    web_client.conversations_list.return_value = ok({"channels": []})

    api.list_conversations(limit=10)

    web_client.conversations_list.assert_called_once_with(
        limit=10, types="public_channel,private_channel", exclude_archived=False
    )


def test_invite_joins_user_ids(api, web_client):
    web_client.conversations_invite.return_value = ok({"ok": True})

    api.invite_to_conversation("C1", ["U1", "U2"])

    web_client.conversations_invite.assert_called_once_with(channel="C1", users="U1,U2")


def test_http_429_is_rate_limit_with_retry_after(api, web_client):
    web_client.users_list.side_effect = sdk_error("ratelimited", status_code=429, headers={"Retry-After": "3"})

    with pytest.raises(SlackRateLimitError) as exc_info:
        api.list_users()

    assert exc_info.value.retry_after == 3.0


def test_ratelimited_code_without_header(api, web_client):
    web_client.users_list.side_effect = sdk_error("ratelimited")

    with pytest.raises(SlackRateLimitError) as exc_info:
        api.list_users()

    assert exc_info.value.retry_after is None


def test_api_error_keeps_code_and_endpoint(api, web_client):
    web_client.conversations_info.side_effect = sdk_error("channel_not_found")

    with pytest.raises(SlackApiRequestError) as exc_info:
        api.get_conversation_info("C404")

    assert exc_info.value.code == "channel_not_found"
    assert exc_info.value.endpoint == "conversations.info"
    assert exc_info.value.status_code == 200


@pytest.mark.parametrize(
    "error",
    [SlackRequestError("connection reset"), TimeoutError("timed out"), URLError("name resolution failed")],
)
def test_transport_errors_are_network_errors(api, web_client, error):
    web_client.users_info.side_effect = error

    with pytest.raises(SlackNetworkError) as exc_info:
        api.get_user_info("U1")

    assert exc_info.value.endpoint == "users.info"


def test_local_file_errors_are_not_network_errors(api, web_client):
    web_client.files_upload_v2.side_effect = PermissionError(13, "Permission denied", "secret.txt")

    with pytest.raises(PermissionError):
        api.upload_file("C1", "secret.txt")


def test_retry_after_parsing():
    assert _retry_after({"Retry-After": "12"}) == 12.0
    assert _retry_after({"retry-after": ["5"]}) == 5.0
    assert _retry_after({"Retry-After": "soon"}) is None
    assert _retry_after(None) is None


class TestDownloadFile:
    URL = "https://files.slack.com/files-pri/T1-F1/download/report.pdf"

    def http_error(self, status_code: int, headers=None) -> requests.exceptions.HTTPError:
        response = requests.Response()
        response.status_code = status_code
        response.headers.update(headers or {})
        return requests.exceptions.HTTPError(response=response)

    def test_sends_bearer_token(self, api, tmp_path):
        destination = str(tmp_path / "report.pdf")
        with patch("utils.slack.slack_api_client.FileManager.download_file", return_value=destination) as download:
            assert api.download_file(self.URL, destination) == destination

        download.assert_called_once_with(
            self.URL, destination, headers={"Authorization": "Bearer xoxb-test"}, timeout=30
        )

    def test_429_is_rate_limit(self, api):
        error = self.http_error(429, {"Retry-After": "4"})
        with patch("utils.slack.slack_api_client.FileManager.download_file", side_effect=error):
            with pytest.raises(SlackRateLimitError) as exc_info:
                api.download_file(self.URL, "out.pdf")

        assert exc_info.value.retry_after == 4.0

    def test_http_error_is_api_error(self, api):
        with patch("utils.slack.slack_api_client.FileManager.download_file", side_effect=self.http_error(403)):
            with pytest.raises(SlackApiRequestError) as exc_info:
                api.download_file(self.URL, "out.pdf")

        assert exc_info.value.code == "download_failed"
        assert exc_info.value.status_code == 403

    def test_connection_error_is_network_error(self, api):
        error = requests.exceptions.ConnectionError("refused")
        with patch("utils.slack.slack_api_client.FileManager.download_file", side_effect=error):
            with pytest.raises(SlackNetworkError):
                api.download_file(self.URL, "out.pdf")
