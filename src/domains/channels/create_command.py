"""Channels Create Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class CreateCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "create"

    @staticmethod
    def get_description() -> str:
        return "Create a channel"

    @staticmethod
    def get_help() -> str:
        return "Create a channel"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("name", help="Channel name")
        parser.add_argument("--private", action="store_true", help="Create a private channel")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.create_channel(args.name, is_private=args.private))
