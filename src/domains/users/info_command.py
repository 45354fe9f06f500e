"""Users Info Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class InfoCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "info"

    @staticmethod
    def get_description() -> str:
        return "Get user info"

    @staticmethod
    def get_help() -> str:
        return "Get user info"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("user_id", help="User ID")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.get_user_info(args.user_id))
