"""Channels List Command."""

from argparse import ArgumentParser, Namespace

from utils.command.arguments import add_pagination_arguments, pagination_request
from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class ListCommand(BaseCommand):
    """Lists public and private channels visible to the token."""

    @staticmethod
    def get_name() -> str:
        return "list"

    @staticmethod
    def get_description() -> str:
        return "List channels"

    @staticmethod
    def get_help() -> str:
        return """
List public and private channels, archived ones included.

Examples:
  # First page of 100 channels
  slacktoolkit channels list

  # Continue from a cursor printed by the previous page
  slacktoolkit channels list --cursor dXNlcjpVMDYxTkZUVDI=

  # Every channel in the workspace
  slacktoolkit channels list --all -o json
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        add_pagination_arguments(parser, noun="channels")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        context.render(context.service.list_channels(pagination_request(args)))
