"""Files List Command."""

from argparse import ArgumentParser, Namespace

from utils.command.arguments import add_pagination_arguments, pagination_request
from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class ListCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "list"

    @staticmethod
    def get_description() -> str:
        return "List files"

    @staticmethod
    def get_help() -> str:
        return "List files, optionally filtered by channel or user"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", default="", help="Filter by channel ID")
        parser.add_argument("--user", default="", help="Filter by user ID")
        add_pagination_arguments(parser, noun="files")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        result = context.service.list_files(pagination_request(args), channel_id=args.channel, user_id=args.user)
        context.render(result)
