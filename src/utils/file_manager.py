import os
from typing import Dict, Optional
from urllib.parse import unquote, urlparse

import requests

DOWNLOAD_CHUNK_SIZE = 64 * 1024


class FileManager:
    """Local filesystem helpers for logs, the workspace store and file transfers."""

    @staticmethod
    def create_folder(folder_path: str, mode: int = 0o777) -> None:
        """Creates ``folder_path`` and any missing parents; an existing folder is fine."""
        os.makedirs(folder_path, mode=mode, exist_ok=True)

    @staticmethod
    def is_folder(path: str) -> bool:
        return os.path.isdir(path)

    @staticmethod
    def validate_file(file_path: str) -> None:
        """
        Checks that ``file_path`` is an existing regular file.

        Raises:
            FileNotFoundError: If it is missing or not a regular file.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

    @staticmethod
    def resolve_destination(destination_path: str, url: str) -> str:
        """Appends the URL's file name when ``destination_path`` is an existing folder."""
        if not FileManager.is_folder(destination_path):
            return destination_path
        filename = os.path.basename(unquote(urlparse(url).path)) or "download"
        return os.path.join(destination_path, filename)

    @staticmethod
    def download_file(
        url: str,
        destination_path: str,
        headers: Optional[Dict[str, str]] = None,
        timeout: int = 30,
    ) -> str:
        """
        Streams ``url`` to ``destination_path``.

        The body is written to ``<destination>.part`` and renamed once complete, so a
        failed transfer never leaves a truncated file under the final name.

        Args:
            url (str): HTTP(S) URL to fetch.
            destination_path (str): Target file, or an existing folder to save into.
            headers (Optional[Dict[str, str]]): Extra request headers, e.g. Authorization.
            timeout (int): Request timeout in seconds.

        Returns:
            str: The path the file was written to.

        Raises:
            ValueError: If the URL is not HTTP(S).
            requests.exceptions.RequestException: If the request fails; HTTP errors keep their response.
            OSError: If the file cannot be written.
        """
        if not url or not url.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL: {url}")

        destination_path = FileManager.resolve_destination(destination_path, url)
        destination_dir = os.path.dirname(destination_path)
        if destination_dir:
            FileManager.create_folder(destination_dir)

        partial_path = f"{destination_path}.part"
        with requests.get(url, headers=headers or {}, timeout=timeout, stream=True) as response:
            response.raise_for_status()
            try:
                with open(partial_path, "wb") as file:
                    for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                        file.write(chunk)
            except BaseException:
                if os.path.exists(partial_path):
                    os.remove(partial_path)
                raise
        os.replace(partial_path, destination_path)
        return destination_path
