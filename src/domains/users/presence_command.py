"""Users Presence Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class PresenceCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "presence"

    @staticmethod
    def get_description() -> str:
        return "Get user presence"

    @staticmethod
    def get_help() -> str:
        return "Get user presence (active or away)"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("user_id", help="User ID")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        presence = context.service.get_user_presence(args.user_id)
        context.render({"user_id": args.user_id, "presence": presence})
