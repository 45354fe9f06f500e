"""Messages List Command."""

from argparse import ArgumentParser, Namespace

from utils.command.arguments import add_pagination_arguments, pagination_request, parse_time
from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class ListCommand(BaseCommand):
    """Reads a channel's history, newest first."""

    @staticmethod
    def get_name() -> str:
        return "list"

    @staticmethod
    def get_description() -> str:
        return "List messages in a channel"

    @staticmethod
    def get_help() -> str:
        return """
List messages in a channel.

--oldest and --latest bound the history and accept Unix seconds or an ISO 8601
date/date-time (UTC when no offset is given).

Examples:
  slacktoolkit messages list --channel C0123456789 --limit 20
  slacktoolkit messages list --channel C0123456789 --oldest 2024-01-01 --all
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        add_pagination_arguments(parser, noun="messages")
        parser.add_argument("--oldest", type=parse_time, default=None, help="Only messages after this time")
        parser.add_argument("--latest", type=parse_time, default=None, help="Only messages before this time")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        result = context.service.list_messages(
            args.channel, pagination_request(args), oldest=args.oldest, latest=args.latest
        )
        context.render(result)
