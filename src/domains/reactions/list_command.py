"""Reactions List Command."""

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
        return "List reactions"

    @staticmethod
    def get_help() -> str:
        return "List items reacted to by a user (the authenticated user by default)"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--user", default="", help="User ID (defaults to authenticated user)")
        add_pagination_arguments(parser, noun="reactions")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.list_reactions(pagination_request(args), user_id=args.user))
