"""Auth Login Command."""

from argparse import ArgumentParser, Namespace

from utils.command.base_command import BaseCommand
from utils.command.run_context import RunContext
from utils.logging.logging_manager import LogManager
from utils.slack.error import ClassifiedError, ErrorCategory
from utils.workspace.workspace_store import Workspace


class LoginCommand(BaseCommand):
    """Verifies a token against Slack and stores it as the active workspace."""

    @staticmethod
    def get_name() -> str:
        return "login"

    @staticmethod
    def get_description() -> str:
        return "Login to a Slack workspace"

    @staticmethod
    def get_help() -> str:
        return """
Login to a Slack workspace.

The token is verified with auth.test before it is saved. The workspace becomes
the active one and is named after the Slack team unless --name is given.

Examples:
  slacktoolkit auth login --token xoxb-123
  slacktoolkit auth login --token xoxp-456 --name personal
        """

    @staticmethod
    def get_arguments(parser: ArgumentParser):
        parser.add_argument("--name", type=str, default="", help="Workspace name (defaults to team name)")

    @staticmethod
    def main(args: Namespace, context: RunContext):
        logger = LogManager.get_instance().get_logger("LoginCommand")
        token = args.token
        if not token:
            raise ClassifiedError(ErrorCategory.AUTH, "a token is required: pass --token")

        result = context.create_service(token).auth_test()
        workspace_name = args.name or result.team

        context.store.set_workspace(Workspace(name=workspace_name, token=token, team_id=result.team_id))
        context.store.save()
        logger.info(f"Logged in to workspace '{workspace_name}' as {result.user}")

        context.render(
            {
                "status": "authenticated",
                "team": result.team,
                "user": result.user,
                "team_id": result.team_id,
                "workspace": workspace_name,
            }
        )
