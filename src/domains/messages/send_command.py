"""Messages Send Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class SendCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "send"

    @staticmethod
    def get_description() -> str:
        return "Send a message"

    @staticmethod
    def get_help() -> str:
        return "Send a message"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        parser.add_argument("--text", required=True, help="Message text")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.send_message(args.channel, args.text))
