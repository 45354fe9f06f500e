import os
import tempfile

from utils.file_manager import FileManager
from utils.version import get_version

APP_NAME = "slacktoolkit"


class MCPConfig:
    """Settings for the stdio MCP server.

    stdout carries the JSON-RPC stream, so logs go to a file unless the environment
    explicitly asks otherwise. The log directory is per user because MCP clients start
    the server from arbitrary working directories.
    """

    SERVER_NAME = APP_NAME
    LOG_FILE = "slacktoolkit_mcp.log"

    @staticmethod
    def get_log_dir() -> str:
        """``$XDG_STATE_HOME/slacktoolkit/logs`` (``~/.local/state`` by default), else a temp dir."""
        state_home = os.getenv("XDG_STATE_HOME") or os.path.join(os.path.expanduser("~"), ".local", "state")
        log_dir = os.path.join(state_home, APP_NAME, "logs")
        try:
            FileManager.create_folder(log_dir)
        except OSError:
            log_dir = os.path.join(tempfile.gettempdir(), f"{APP_NAME}_mcp", "logs")
            FileManager.create_folder(log_dir)
        return log_dir

    @staticmethod
    def is_serve_invocation(argv) -> bool:
        """True when the command line runs `mcp serve`, possibly after global options."""
        argv = list(argv)
        return any(argv[i : i + 2] == ["mcp", "serve"] for i in range(len(argv) - 1))

    @classmethod
    def setup_environment(cls) -> None:
        """Sets logging defaults for the server. Must run before ``log_config`` is imported.

        Values already present in the environment are kept.
        """
        if "LOG_DIR" not in os.environ:
            os.environ["LOG_DIR"] = cls.get_log_dir()
        os.environ.setdefault("LOG_FILE", cls.LOG_FILE)
        os.environ.setdefault("LOG_OUTPUT", "file")

    @classmethod
    def server_info(cls, read_only: bool = False) -> dict:
        return {"name": cls.SERVER_NAME, "version": get_version(), "read_only": read_only}
