"""Channels Info Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class InfoCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "info"

    @staticmethod
    def get_description() -> str:
        return "Get channel info"

    @staticmethod
    def get_help() -> str:
        return "Get channel info"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("channel_id", help="Channel ID")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.get_channel_info(args.channel_id))
