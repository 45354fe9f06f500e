from utils.error.base_custom_error import BaseCustomError


class WorkspaceError(BaseCustomError):
    """Base class for workspace store errors."""

    pass


class WorkspaceNotFoundError(WorkspaceError):
    """Raised when a named workspace is not in the store."""

    def __init__(self, name: str):
        super().__init__(f'workspace "{name}" not found', workspace=name)
        self.name = name


class WorkspaceStoreError(WorkspaceError):
    """Raised when the store file cannot be read or written."""

    def __init__(self, message: str, path: str, error: Exception | None = None):
        super().__init__(message, path=path, original_error=error)
        self.path = path
