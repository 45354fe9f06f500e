"""Auth Logout Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class LogoutCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "logout"

    @staticmethod
    def get_description() -> str:
        return "Remove a workspace"

    @staticmethod
    def get_help() -> str:
        return "Remove a workspace (the active one when no name is given)"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("name", nargs="?", default="", help="Workspace name")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        name = args.name or context.store.active_workspace
        context.store.remove_workspace(name)
        context.store.save()
        context.render({"status": "logged_out", "workspace": name})
