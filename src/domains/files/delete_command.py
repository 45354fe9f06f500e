"""Files Delete Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class DeleteCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "delete"

    @staticmethod
    def get_description() -> str:
        return "Delete a file"

    @staticmethod
    def get_help() -> str:
        return "Delete a file"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("file_id", help="File ID")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.service.delete_file(args.file_id)
        context.render({"status": "deleted", "file": args.file_id})
