from typing import Any, Callable
from urllib.error import URLError

import requests
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from utils.file_manager import FileManager
from utils.logging.logging_manager import LogManager
from utils.slack.error import SlackApiRequestError, SlackNetworkError, SlackRateLimitError


def _retry_after(headers: Any) -> float | None:
    """Read the Retry-After header; None when Slack did not advise a wait."""
    if not headers:
        return None
    value = None
    for key in ("Retry-After", "retry-after"):
        if key in headers:
            value = headers[key]
            break
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        return None


class SlackApiClient:
    """Low-level Slack API client wrapping slack_sdk.WebClient for decoupling.

    Every method performs exactly one HTTP call and returns the raw response payload.
    Failures are raised as :class:`SlackRateLimitError`, :class:`SlackNetworkError` or
    :class:`SlackApiRequestError`; retrying and classification happen a layer above.
    """

    def __init__(self, token: str, web_client: WebClient | None = None, timeout: int = 30):
        """Initialize the Slack API client.

        Args:
            token: Slack bot or user token for authentication.
            web_client: Preconfigured WebClient, mostly for tests.
            timeout: HTTP timeout in seconds.
        """
        self.logger = LogManager.get_instance().get_logger("SlackApiClient")
        self.token = token
        self.timeout = timeout
        self.client = web_client or WebClient(token=token, timeout=timeout)

    def _handle_error(self, e: SlackApiError, endpoint: str):
        """Handle Slack SDK specific errors and map them to custom exceptions.

        Args:
            e: The SlackApiError from the SDK.
            endpoint: The API endpoint being called.

        Raises:
            SlackRateLimitError: If rate limited (429 or ``ratelimited``).
            SlackApiRequestError: For every other API error.
        """
        error_type = e.response.get("error", "unknown") or "unknown"
        status_code = e.response.status_code

        if status_code == 429 or error_type == "ratelimited":
            retry_after = _retry_after(e.response.headers)
            self.logger.warning(f"Slack rate limit hit on {endpoint}. Retry after {retry_after}s")
            raise SlackRateLimitError(retry_after=retry_after, endpoint=endpoint) from e

        self.logger.error(f"Slack API error on {endpoint}: {error_type} (Status: {status_code})")
        raise SlackApiRequestError(error_type, endpoint=endpoint, status_code=status_code) from e

    def _call(self, endpoint: str, method: Callable[..., Any], **kwargs) -> dict[str, Any]:
        params = {key: value for key, value in kwargs.items() if value is not None and value != ""}
        self.logger.debug(f"Calling {endpoint} with {sorted(params)}")
        try:
            response = method(**params)
            return response.data  # type: ignore
        except SlackApiError as e:
            self._handle_error(e, endpoint)
            raise  # Should not be reached
        except (SlackClientError, URLError, TimeoutError, ConnectionError) as e:
            self.logger.error(f"Network error on {endpoint}: {e}")
            raise SlackNetworkError(f"Slack network error: {e}", endpoint=endpoint) from e

    # --- Auth ---

    def auth_test(self) -> dict[str, Any]:
        return self._call("auth.test", self.client.auth_test)

    # --- Conversations ---

    def list_conversations(
        self, cursor: str = "", limit: int = 100, types: str = "public_channel,private_channel"
    ) -> dict[str, Any]:
        """List channels in the workspace, archived ones included."""
        return self._call(
            "conversations.list",
            self.client.conversations_list,
            cursor=cursor,
            limit=limit,
            types=types,
            exclude_archived=False,
        )

    def get_conversation_info(self, channel: str) -> dict[str, Any]:
        return self._call("conversations.info", self.client.conversations_info, channel=channel)

    def create_conversation(self, name: str, is_private: bool = False) -> dict[str, Any]:
        return self._call(
            "conversations.create", self.client.conversations_create, name=name, is_private=is_private
        )

    def archive_conversation(self, channel: str) -> dict[str, Any]:
        return self._call("conversations.archive", self.client.conversations_archive, channel=channel)

    def invite_to_conversation(self, channel: str, users: list[str]) -> dict[str, Any]:
        return self._call(
            "conversations.invite", self.client.conversations_invite, channel=channel, users=",".join(users)
        )

    def kick_from_conversation(self, channel: str, user: str) -> dict[str, Any]:
        return self._call("conversations.kick", self.client.conversations_kick, channel=channel, user=user)

    def set_conversation_topic(self, channel: str, topic: str) -> dict[str, Any]:
        return self._call("conversations.setTopic", self.client.conversations_setTopic, channel=channel, topic=topic)

    def set_conversation_purpose(self, channel: str, purpose: str) -> dict[str, Any]:
        return self._call(
            "conversations.setPurpose", self.client.conversations_setPurpose, channel=channel, purpose=purpose
        )

    def get_conversation_history(
        self, channel: str, cursor: str = "", limit: int = 100, oldest: str = "", latest: str = ""
    ) -> dict[str, Any]:
        """Fetch one page of conversation history."""
        return self._call(
            "conversations.history",
            self.client.conversations_history,
            channel=channel,
            cursor=cursor,
            limit=limit,
            oldest=oldest,
            latest=latest,
        )

    # --- Messaging ---

    def post_message(self, channel: str, text: str, thread_ts: str = "") -> dict[str, Any]:
        """Post a message to a channel, optionally as a thread reply."""
        return self._call(
            "chat.postMessage", self.client.chat_postMessage, channel=channel, text=text, thread_ts=thread_ts
        )

    def update_message(self, channel: str, ts: str, text: str) -> dict[str, Any]:
        """Update an existing message."""
        return self._call("chat.update", self.client.chat_update, channel=channel, ts=ts, text=text)

    def delete_message(self, channel: str, ts: str) -> dict[str, Any]:
        """Delete a message."""
        return self._call("chat.delete", self.client.chat_delete, channel=channel, ts=ts)

    # --- Search ---

    def search_messages(
        self,
        query: str,
        sort: str = "timestamp",
        sort_dir: str = "desc",
        count: int = 20,
        page: int = 1,
    ) -> dict[str, Any]:
        """Search for messages matching a query.

        Args:
            query: Search query string (supports Slack search modifiers like in:#channel).
            sort: Sort field ('timestamp' or 'score').
            sort_dir: Sort direction ('asc' or 'desc').
            count: Number of results per page (max 100).
            page: Page number, starting at 1.

        Returns:
            Raw API response data containing messages.matches and pagination info.
        """
        return self._call(
            "search.messages",
            self.client.search_messages,
            query=query,
            sort=sort,
            sort_dir=sort_dir,
            count=count,
            page=page,
        )

    # --- Users ---

    def list_users(self, cursor: str = "", limit: int = 100) -> dict[str, Any]:
        """List one page of workspace users."""
        return self._call("users.list", self.client.users_list, cursor=cursor, limit=limit)

    def get_user_info(self, user: str) -> dict[str, Any]:
        """Get info about a specific user."""
        return self._call("users.info", self.client.users_info, user=user)

    def get_user_presence(self, user: str) -> dict[str, Any]:
        return self._call("users.getPresence", self.client.users_getPresence, user=user)

    # --- Reactions ---

    def add_reaction(self, channel: str, timestamp: str, name: str) -> dict[str, Any]:
        """Add a reaction to an item."""
        return self._call("reactions.add", self.client.reactions_add, channel=channel, timestamp=timestamp, name=name)

    def remove_reaction(self, channel: str, timestamp: str, name: str) -> dict[str, Any]:
        return self._call(
            "reactions.remove", self.client.reactions_remove, channel=channel, timestamp=timestamp, name=name
        )

    def list_reactions(self, user: str = "", count: int = 100, page: int = 1) -> dict[str, Any]:
        """List items reacted to by ``user`` (the token owner when empty)."""
        return self._call(
            "reactions.list", self.client.reactions_list, user=user, count=count, page=page, full=True
        )

    # --- Files ---

    def list_files(self, channel: str = "", user: str = "", cursor: str = "", limit: int = 100) -> dict[str, Any]:
        return self._call(
            "files.list", self.client.files_list, channel=channel, user=user, cursor=cursor, limit=limit
        )

    def get_file_info(self, file: str) -> dict[str, Any]:
        return self._call("files.info", self.client.files_info, file=file)

    def upload_file(self, channel: str, file: str, filename: str = "", title: str = "") -> dict[str, Any]:
        """Upload a local file to a channel using the v2 upload flow."""
        return self._call(
            "files.uploadV2",
            self.client.files_upload_v2,
            channel=channel,
            file=file,
            filename=filename,
            title=title,
        )

    def delete_file(self, file: str) -> dict[str, Any]:
        return self._call("files.delete", self.client.files_delete, file=file)

    def download_file(self, url: str, destination_path: str) -> str:
        """Download a private file URL with the client's token.

        Returns:
            The path the file was written to.
        """
        headers = {"Authorization": f"Bearer {self.token}"}
        try:
            return FileManager.download_file(url, destination_path, headers=headers, timeout=self.timeout)
        except requests.exceptions.HTTPError as e:
            response = e.response
            status_code = response.status_code if response is not None else None
            if status_code == 429:
                retry_after = _retry_after(response.headers if response is not None else None)
                self.logger.warning(f"Slack rate limit hit on file download. Retry after {retry_after}s")
                raise SlackRateLimitError(retry_after=retry_after, endpoint="files.download") from e
            self.logger.error(f"File download failed (Status: {status_code})")
            raise SlackApiRequestError("download_failed", endpoint="files.download", status_code=status_code) from e
        except requests.exceptions.RequestException as e:
            self.logger.error(f"Network error on file download: {e}")
            raise SlackNetworkError(f"Slack network error: {e}", endpoint="files.download") from e
