"""Auth Switch Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class SwitchCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "switch"

    @staticmethod
    def get_description() -> str:
        return "Switch active workspace"

    @staticmethod
    def get_help() -> str:
        return "Switch active workspace"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("name", help="Workspace name")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.store.switch(args.name)
        context.store.save()
        context.render({"status": "switched", "workspace": args.name})
