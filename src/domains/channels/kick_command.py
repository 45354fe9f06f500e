"""Channels Kick Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class KickCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "kick"

    @staticmethod
    def get_description() -> str:
        return "Remove a user from a channel"

    @staticmethod
    def get_help() -> str:
        return "Remove a user from a channel"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("channel_id", help="Channel ID")
        parser.add_argument("user_id", help="User ID to remove")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.kick_from_channel(args.channel_id, args.user_id)
        context.render({"status": "removed", "channel": args.channel_id, "user": args.user_id})
