"""Messages Reply Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class ReplyCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "reply"

    @staticmethod
    def get_description() -> str:
        return "Reply to a thread"

    @staticmethod
    def get_help() -> str:
        return "Reply to a thread"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        parser.add_argument("--thread-ts", required=True, help="Timestamp of the thread's parent message")
        parser.add_argument("--text", required=True, help="Message text")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.send_message(args.channel, args.text, thread_ts=args.thread_ts))
