"""Reactions Remove Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class RemoveCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "remove"

    @staticmethod
    def get_description() -> str:
        return "Remove a reaction"

    @staticmethod
    def get_help() -> str:
        return "Remove an emoji reaction from a message"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        parser.add_argument("--timestamp", required=True, help="Message timestamp")
        parser.add_argument("--name", required=True, help="Emoji name without colons")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.remove_reaction(args.channel, args.timestamp, args.name)
        context.render(
            {"status": "removed", "reaction": args.name, "channel": args.channel, "timestamp": args.timestamp}
        )
