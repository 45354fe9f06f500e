"""Channels Purpose Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class PurposeCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "purpose"

    @staticmethod
    def get_description() -> str:
        return "Set channel purpose"

    @staticmethod
    def get_help() -> str:
        return "Set channel purpose"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("channel_id", help="Channel ID")
        parser.add_argument("purpose", help="New purpose")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.set_channel_purpose(args.channel_id, args.purpose)
        context.render({"status": "updated", "channel": args.channel_id, "purpose": args.purpose})
