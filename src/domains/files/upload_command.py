"""Files Upload Command."""

import os
from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext
from utils.file_manager import FileManager
from utils.logging.logging_manager import LogManager


class UploadCommand(BaseCommand):
    WRITE = True

    @staticmethod
    def get_name() -> str:
        return "upload"

    @staticmethod
    def get_description() -> str:
        return "Upload a file"

    @staticmethod
    def get_help() -> str:
        return """
Upload a local file to a channel.

The optional positional argument overrides the file name shown in Slack.

Examples:
  slacktoolkit files upload --channel C0123456789 --file ./report.pdf
  slacktoolkit files upload --channel C0123456789 --file ./out.csv --title "Weekly numbers" numbers.csv
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--channel", required=True, help="Channel ID")
        parser.add_argument("--file", required=True, help="Path of the file to upload")
        parser.add_argument("--title", default="", help="File title")
        parser.add_argument("filename", nargs="?", default="", help="File name shown in Slack")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        logger = LogManager.get_instance().get_logger("UploadCommand")
        FileManager.validate_file(args.file)
        filename = args.filename or os.path.basename(args.file)
        logger.info(f"Uploading {args.file} to {args.channel} as '{filename}'")
        context.render(context.service.upload_file(args.channel, args.file, filename=filename, title=args.title))
