"""Reactions Add Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class AddCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "add"

    @staticmethod
    def get_description() -> str:
        return "Add a reaction"

    @staticmethod
    def get_help() -> str:
        return """
Add an emoji reaction to a message.

Example:
  slacktoolkit reactions add --channel C0123456789 --timestamp 1700000000.000100 --name thumbsup
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        parser.add_argument("--timestamp", required=True, help="Message timestamp")
        parser.add_argument("--name", required=True, help="Emoji name without colons")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.add_reaction(args.channel, args.timestamp, args.name)
        context.render(
            {"status": "added", "reaction": args.name, "channel": args.channel, "timestamp": args.timestamp}
        )
