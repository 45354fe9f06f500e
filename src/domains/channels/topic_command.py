"""Channels Topic Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class TopicCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "topic"

    @staticmethod
    def get_description() -> str:
        return "Set channel topic"

    @staticmethod
    def get_help() -> str:
        return "Set channel topic"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("channel_id", help="Channel ID")
        parser.add_argument("topic", help="New topic")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.set_channel_topic(args.channel_id, args.topic)
        context.render({"status": "updated", "channel": args.channel_id, "topic": args.topic})
