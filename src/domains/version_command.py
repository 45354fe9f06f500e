"""Version Command."""

import platform
from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext
from utils.version import get_version


class VersionCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "version"

    @staticmethod
    def get_description() -> str:
        return "Print version information"

    @staticmethod
    def get_help() -> str:
        return "Print version information"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        pass

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render({"version": get_version(), "python": platform.python_version()})
