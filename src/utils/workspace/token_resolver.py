import os
from typing import Optional

from utils.workspace.workspace_store import WorkspaceStore

DEFAULT_TOKEN_ENV = "SLACK_TOKEN"


class TokenResolver:
    """Resolves the Slack token: explicit flag, then environment, then the workspace store.

    Within the store a workspace named with ``--workspace`` wins over the active one.
    """

    def __init__(
        self,
        flag_token: str = "",
        workspace: str = "",
        store: Optional[WorkspaceStore] = None,
        env_var: str = DEFAULT_TOKEN_ENV,
    ):
        self.flag_token = flag_token or ""
        self.workspace = workspace or ""
        self.store = store
        self.env_var = env_var

    def resolve(self) -> str:
        if self.flag_token:
            return self.flag_token
        env_token = os.getenv(self.env_var, "")
        if env_token:
            return env_token
        if self.store is None:
            return ""
        if self.workspace:
            return self.store.get_workspace(self.workspace).token
        return self.store.active_token()
