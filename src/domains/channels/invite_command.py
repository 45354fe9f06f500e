"""Channels Invite Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class InviteCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "invite"

    @staticmethod
    def get_description() -> str:
        return "Invite users to a channel"

    @staticmethod
    def get_help() -> str:
        return """
Invite one or more users to a channel.

Example:
  slacktoolkit channels invite C0123456789 U01AAAAAAA U01BBBBBBB
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("channel_id", help="Channel ID")
        parser.add_argument("user_ids", nargs="+", help="User IDs to invite")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.invite_to_channel(args.channel_id, args.user_ids)
        context.render({"status": "invited", "channel": args.channel_id, "users": args.user_ids})
