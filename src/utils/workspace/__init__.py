from utils.workspace.token_resolver import TokenResolver
from utils.workspace.workspace_store import Workspace, WorkspaceStore

__all__ = ["TokenResolver", "Workspace", "WorkspaceStore"]
