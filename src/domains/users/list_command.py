"""Users List Command."""

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
        return "List users"

    @staticmethod
    def get_help() -> str:
        return "List workspace users, one page at a time or all with --all"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        add_pagination_arguments(parser, noun="users")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.list_users(pagination_request(args)))
