"""Auth List Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext


class ListCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "list"

    @staticmethod
    def get_description() -> str:
        return "List configured workspaces"

    @staticmethod
    def get_help() -> str:
        return "List configured workspaces"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        pass

    @staticmethod
    def main(args: Namespace, context: RunContext):
        store = context.store
        context.render(
            [
                {"name": name, "team_id": workspace.team_id, "active": name == store.active_workspace}
                for name, workspace in sorted(store.workspaces.items())
            ]
        )
