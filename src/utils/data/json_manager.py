import json
import os
import tempfile
from typing import Any, Optional

from filelock import FileLock


class JSONManager:
    """
    JSON documents on disk, written atomically under a sibling ``.lock`` file so that
    concurrent CLI and MCP processes never observe a half-written file.

    Example Usage:
        >>> JSONManager.write_json({"active_workspace": "acme"}, "config.json", mode=0o600)
        >>> JSONManager.read_json("config.json", default={})
        {'active_workspace': 'acme'}
    """

    @staticmethod
    def read_json(file_path: str, default: Any = None) -> Any:
        """
        Reads a JSON file.

        Args:
            file_path (str): Path to the JSON file.
            default (Any): Returned when the file does not exist. When None, a missing
                file raises FileNotFoundError.

        Raises:
            json.JSONDecodeError: If the file is not valid JSON.
        """
        if not os.path.exists(file_path) and default is not None:
            return default
        with FileLock(f"{file_path}.lock"):
            with open(file_path, "r", encoding="utf-8") as file:
                return json.load(file)

    @staticmethod
    def write_json(data: Any, file_path: str, mode: Optional[int] = None, indent: int = 2) -> None:
        """
        Replaces ``file_path`` with ``data`` serialized as JSON.

        The document is written to a temporary file in the same directory and moved into
        place, so readers see either the old or the new content.

        Args:
            data (Any): JSON-serializable data.
            file_path (str): Destination path.
            mode (Optional[int]): Permission bits of the written file (e.g. 0o600).
            indent (int): JSON indentation.
        """
        directory = os.path.dirname(os.path.abspath(file_path))
        with FileLock(f"{file_path}.lock"):
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as file:
                    json.dump(data, file, indent=indent, ensure_ascii=False)
                    file.write("\n")
                if mode is not None:
                    os.chmod(tmp_path, mode)
                os.replace(tmp_path, file_path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
