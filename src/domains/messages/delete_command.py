"""Messages Delete Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class DeleteCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "delete"

    @staticmethod
    def get_description() -> str:
        return "Delete a message"

    @staticmethod
    def get_help() -> str:
        return "Delete a message"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        parser.add_argument("--timestamp", required=True, help="Message timestamp")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.delete_message(args.channel, args.timestamp)
        context.render({"status": "deleted", "channel": args.channel, "timestamp": args.timestamp})
