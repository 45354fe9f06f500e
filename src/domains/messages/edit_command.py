"""Messages Edit Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class EditCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "edit"

    @staticmethod
    def get_description() -> str:
        return "Edit a message"

    @staticmethod
    def get_help() -> str:
        return "Edit a message"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        parser.add_argument("--timestamp", required=True, help="Message timestamp")
        parser.add_argument("--text", required=True, help="New message text")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.edit_message(args.channel, args.timestamp, args.text))
