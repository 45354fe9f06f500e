import importlib
import inspect
import os
import pkgutil
from argparse import ArgumentParser, _SubParsersAction
from types import ModuleType

from utils.command.base_command import BaseCommand
from utils.command.run_context import add_global_arguments
from utils.logging.logging_manager import LogManager

from .error import (
    CommandLoadError,
    CommandManagerError,
    HierarchyConflictError,
    ModuleImportError,
    UsageError,
)

PROG_NAME = "slacktoolkit"


class CommandArgumentParser(ArgumentParser):
    """ArgumentParser that raises :class:`UsageError` instead of exiting with status 2.

    Subparsers inherit the class, so the whole command tree reports usage mistakes the same way.
    """

    def error(self, message: str):
        raise UsageError(message, usage=self.format_usage())


class CommandManager:
    """Discovers the commands under ``domains/`` and builds the argparse tree for them.

    Each package below the base path is a domain (``channels``, ``messages``...). Its
    docstring is the domain help, and every concrete ``BaseCommand`` subclass in its
    modules becomes one command.
    """

    _logger = LogManager.get_instance().get_logger("CommandManager")

    def __init__(self, base_path: str, package: str = "domains"):
        self.base_path = os.path.abspath(base_path)
        self.package = package
        self.hierarchy: dict[str, dict] = {}
        self.domain_help: dict[str, str] = {}

    def load_commands(self) -> None:
        """Imports every module under the base path and registers the commands found."""
        self._logger.debug(f"Loading commands from {self.base_path}")

        for root, dirs, _ in os.walk(self.base_path):
            dirs[:] = sorted(d for d in dirs if os.path.isfile(os.path.join(root, d, "__init__.py")))
            if root != self.base_path:
                self._register_domain(root)

            for module_info in pkgutil.iter_modules([root]):
                if module_info.ispkg:
                    continue
                try:
                    self._process_module(self._import_module(root, module_info.name))
                except CommandManagerError as e:
                    self._logger.error(str(e), exc_info=True)

        self._logger.debug(f"Loaded domains: {', '.join(sorted(self.hierarchy))}")

    def _relative_module(self, root: str, module_name: str = "") -> str:
        relative_path = os.path.relpath(root, self.base_path)
        parts = [] if relative_path == "." else relative_path.split(os.sep)
        if module_name:
            parts.append(module_name)
        return "." + ".".join(parts)

    def _import_module(self, root: str, module_name: str = "") -> ModuleType:
        relative_path = self._relative_module(root, module_name)
        try:
            return importlib.import_module(relative_path, package=self.package)
        except Exception as e:
            raise ModuleImportError(module_path=relative_path, error=e) from e

    def _register_domain(self, root: str) -> None:
        """Records the first docstring line of a domain package as its help."""
        try:
            package = self._import_module(root)
        except CommandManagerError as e:
            self._logger.error(str(e), exc_info=True)
            return
        doc = inspect.getdoc(package) or ""
        key = package.__name__.split(".", 1)[1]
        self.domain_help[key] = doc.splitlines()[0] if doc else ""

    def _process_module(self, module: ModuleType):
        try:
            for name, obj in inspect.getmembers(module, inspect.isclass):
                if not issubclass(obj, BaseCommand) or obj is BaseCommand:
                    continue
                if obj.__module__ != module.__name__ or inspect.isabstract(obj):
                    continue

                self._logger.debug(f"Found command class {name} in {module.__name__}")
                self._add_to_hierarchy(obj)
        except CommandManagerError:
            raise
        except Exception as e:
            raise CommandLoadError(module_name=module.__name__, error=e) from e

    def _add_to_hierarchy(self, command: type[BaseCommand]):
        domain_parts = command.__module__.split(".")[1:-1]
        command_name = command.get_name()

        level = self.hierarchy
        for part in domain_parts:
            level = level.setdefault(part, {})

        if command_name in level:
            raise HierarchyConflictError(command_name=" ".join(domain_parts + [command_name]))
        level[command_name] = {"class": command}

    def build_parser(self) -> ArgumentParser:
        """Builds the ArgumentParser hierarchy from the loaded commands."""
        try:
            parser = CommandArgumentParser(
                prog=PROG_NAME,
                description="Slack from the command line and from MCP clients.",
            )
            add_global_arguments(parser, suppress_defaults=False)
            subparsers = parser.add_subparsers(dest="domain", metavar="<command>")

            for name, node in sorted(self.hierarchy.items()):
                self._add_node(subparsers, name, node, [])

            return parser
        except Exception as e:
            raise CommandManagerError(f"Failed to build argument parser: {e}") from e

    def _add_node(self, subparsers: _SubParsersAction, name: str, node: dict, path: list[str]):
        if "class" in node:
            node["class"].register_command(subparsers, " ".join(path + [name]))
            return

        domain_path = path + [name]
        help_text = self.domain_help.get(".".join(domain_path)) or f"{name} commands"
        parser = subparsers.add_parser(name, help=help_text, description=help_text)
        add_global_arguments(parser)
        domain_subparsers = parser.add_subparsers(dest="subdomain_or_command", metavar="<command>")

        for key, child in sorted(node.items()):
            self._add_node(domain_subparsers, key, child, domain_path)
