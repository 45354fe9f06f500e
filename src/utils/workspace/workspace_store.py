import json
import os
from dataclasses import asdict, dataclass
from typing import Optional

from utils.data.json_manager import JSONManager
from utils.file_manager import FileManager
from utils.logging.logging_manager import LogManager
from utils.workspace.error import WorkspaceNotFoundError, WorkspaceStoreError

APP_DIR_NAME = "slacktoolkit"
CONFIG_FILE_NAME = "config.json"


@dataclass
class Workspace:
    name: str
    token: str = ""
    team_id: str = ""

    def to_dict(self) -> dict:
        data = asdict(self)
        return {key: value for key, value in data.items() if key == "name" or value}


class WorkspaceStore:
    """
    Persisted set of named workspace credentials plus the active workspace.

    File layout::

        {"active_workspace": "acme", "workspaces": {"acme": {"name": "acme", "token": "...", "team_id": "T1"}}}

    The directory is created with 0o700 and the file written with 0o600.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or self.default_path()
        self.active_workspace = ""
        self.workspaces: dict[str, Workspace] = {}
        self._logger = LogManager.get_instance().get_logger("WorkspaceStore")

    @staticmethod
    def default_path() -> str:
        """``$XDG_CONFIG_HOME/slacktoolkit/config.json``, falling back to ``~/.config``."""
        config_home = os.getenv("XDG_CONFIG_HOME") or os.path.join(os.path.expanduser("~"), ".config")
        return os.path.join(config_home, APP_DIR_NAME, CONFIG_FILE_NAME)

    @classmethod
    def load(cls, path: Optional[str] = None) -> "WorkspaceStore":
        """Loads the store; a missing file yields an empty store."""
        store = cls(path)
        try:
            data = JSONManager.read_json(store.path, default={})
        except (OSError, json.JSONDecodeError) as e:
            raise WorkspaceStoreError(f"Failed to read workspace config: {store.path}", path=store.path, error=e) from e

        store.active_workspace = data.get("active_workspace", "") or ""
        for name, entry in (data.get("workspaces") or {}).items():
            store.workspaces[name] = Workspace(
                name=entry.get("name") or name,
                token=entry.get("token", ""),
                team_id=entry.get("team_id", ""),
            )
        store._logger.debug(f"Loaded {len(store.workspaces)} workspace(s) from {store.path}")
        return store

    def save(self) -> None:
        data = {
            "active_workspace": self.active_workspace,
            "workspaces": {name: workspace.to_dict() for name, workspace in self.workspaces.items()},
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                FileManager.create_folder(directory, mode=0o700)
            JSONManager.write_json(data, self.path, mode=0o600)
        except OSError as e:
            raise WorkspaceStoreError(f"Failed to save workspace config: {self.path}", path=self.path, error=e) from e
        self._logger.info(f"Saved workspace config to {self.path}")

    def get_workspace(self, name: str) -> Workspace:
        if name not in self.workspaces:
            raise WorkspaceNotFoundError(name)
        return self.workspaces[name]

    def set_workspace(self, workspace: Workspace) -> None:
        """Adds or replaces ``workspace`` and makes it active."""
        self.workspaces[workspace.name] = workspace
        self.active_workspace = workspace.name

    def remove_workspace(self, name: str) -> None:
        """Removes ``name``; if it was active, another remaining workspace (if any) becomes active."""
        if name not in self.workspaces:
            raise WorkspaceNotFoundError(name)
        del self.workspaces[name]
        if self.active_workspace == name:
            self.active_workspace = next(iter(self.workspaces), "")

    def switch(self, name: str) -> None:
        if name not in self.workspaces:
            raise WorkspaceNotFoundError(name)
        self.active_workspace = name

    def active_token(self) -> str:
        workspace = self.workspaces.get(self.active_workspace)
        return workspace.token if workspace else ""
