"""Files Download Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class DownloadCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "download"

    @staticmethod
    def get_description() -> str:
        return "Download a file"

    @staticmethod
    def get_help() -> str:
        return "Download a file to --dest (defaults to the file's name in the current directory)"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("file_id", help="File ID")
        parser.add_argument("-d", "--dest", default="", help="Destination path")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        service = context.service
        file = service.get_file_info(args.file_id)
        path = service.download_file(file.url_private, args.dest or file.name)
        context.render({"status": "downloaded", "file": args.file_id, "path": path})
