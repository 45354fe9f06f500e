from utils.error.base_custom_error import BaseCustomError


class CommandManagerError(BaseCustomError):
    """Command discovery or parser construction failed."""


class ModuleImportError(CommandManagerError):
    def __init__(self, module_path: str, error: Exception):
        super().__init__(f"Cannot import command module '{module_path}': {error}", module_path=module_path)
        self.original_error = error


class CommandLoadError(CommandManagerError):
    def __init__(self, module_name: str, error: Exception):
        super().__init__(f"Cannot load commands from '{module_name}': {error}", module_name=module_name)
        self.original_error = error


class HierarchyConflictError(CommandManagerError):
    """Two command classes resolve to the same command path."""

    def __init__(self, command_name: str):
        super().__init__(f"Command '{command_name}' is defined more than once", command_name=command_name)


class ReadOnlyViolationError(BaseCustomError):
    """A write command or tool was invoked in read-only mode."""

    def __init__(self, operation: str, kind: str = "command"):
        super().__init__(
            f'{kind} "{operation}" is a write operation and cannot be used in read-only mode',
            operation=operation,
        )
        self.operation = operation


class UsageError(BaseCustomError):
    """The command line did not parse: unknown command, missing or malformed argument."""

    def __init__(self, message: str, usage: str = ""):
        super().__init__(message)
        self.usage = usage
