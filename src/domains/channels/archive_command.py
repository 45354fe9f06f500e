"""Channels Archive Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class ArchiveCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "archive"

    @staticmethod
    def get_description() -> str:
        return "Archive a channel"

    @staticmethod
    def get_help() -> str:
        return "Archive a channel"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("channel_id", help="Channel ID")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.archive_channel(args.channel_id)
        context.render({"status": "archived", "channel": args.channel_id})
