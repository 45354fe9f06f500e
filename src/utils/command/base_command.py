from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace, RawDescriptionHelpFormatter, _SubParsersAction

from utils.command.run_context import RunContext, add_global_arguments


class BaseCommand(ABC):
    """Base class for CLI commands.

    Subclasses live under ``domains/``. The package path gives the command path, so
    ``domains/channels/create_command.py`` becomes ``slacktoolkit channels create``.
    """

    # Commands that change workspace state set this; they are rejected under --read-only.
    WRITE = False

    @staticmethod
    @abstractmethod
    def get_name() -> str:
        """Name of the command inside its domain."""

    @staticmethod
    def get_description() -> str:
        """One line shown in the domain's command list."""
        return "No description provided."

    @staticmethod
    def get_help() -> str:
        """Longer text, usually examples, printed after the command's usage."""
        return ""

    @classmethod
    def register_command(cls, subparsers: _SubParsersAction, command_path: str = "") -> ArgumentParser:
        """Adds this command to ``subparsers`` and binds it to the parsed namespace.

        Args:
            subparsers (_SubParsersAction): Subparsers of the command's domain.
            command_path (str): Space separated path of the command, e.g. "channels create".
        """
        description = cls.get_description()
        epilog = cls.get_help().strip()
        parser = subparsers.add_parser(
            cls.get_name(),
            help=description,
            description=description,
            epilog=epilog if epilog and epilog != description else None,
            formatter_class=RawDescriptionHelpFormatter,
        )
        cls.get_arguments(parser)
        add_global_arguments(parser)

        parser.set_defaults(
            func=cls.main,
            command_class=cls,
            command_path=command_path or cls.get_name(),
        )
        return parser

    @staticmethod
    @abstractmethod
    def get_arguments(parser: ArgumentParser):
        pass

    @staticmethod
    @abstractmethod
    def main(args: Namespace, context: RunContext):
        """Runs the command; results go through ``context.render``.

        Raises whatever the service raises; ``main.run`` turns it into an exit status.
        """
