"""Auth Status Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext
from utils.slack.error import ClassifiedError


class StatusCommand(BaseCommand):
    @staticmethod
    def get_name() -> str:
        return "status"

    @staticmethod
    def get_description() -> str:
        return "Show current authentication status"

    @staticmethod
    def get_help() -> str:
        return "Show current authentication status"

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        pass

    @staticmethod
    def main(args: Namespace, context: RunContext):
        token = context.resolver.resolve()
        if not token:
            context.render({"status": "not_authenticated"})
            return

        try:
            result = context.create_service(token).auth_test()
        except ClassifiedError as e:
            context.render({"status": "error", "error": str(e)})
            return

        context.render(
            {
                "status": "authenticated",
                "workspace": args.workspace or context.store.active_workspace,
                "team": result.team,
                "user": result.user,
                "team_id": result.team_id,
            }
        )
