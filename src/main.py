import os
import sys
from typing import Callable, Optional, Sequence

from mcp_server.mcp_config import MCPConfig

# stdout belongs to JSON-RPC while serving; logging must be pointed at a file before log_config loads
if MCPConfig.is_serve_invocation(sys.argv[1:]):
    MCPConfig.setup_environment()

from config import Config  # noqa: E402
from log_config import LogManager  # noqa: E402
from utils.command.command_manager import CommandManager  # noqa: E402
from utils.command.error import ReadOnlyViolationError, UsageError  # noqa: E402
from utils.command.run_context import RunContext  # noqa: E402
from utils.error.error_manager import report_error  # noqa: E402
from utils.slack.slack_api_client import SlackApiClient  # noqa: E402
from utils.slack.slack_client import SlackClient  # noqa: E402
from utils.slack.slack_service import SlackService  # noqa: E402
from utils.workspace.workspace_store import WorkspaceStore  # noqa: E402

logger = LogManager.get_instance().get_logger("CLI")


def build_slack_client(token: str) -> SlackService:
    return SlackClient(
        token,
        api_client=SlackApiClient(token, timeout=Config.SLACK_TIMEOUT),
        max_retries=Config.SLACK_MAX_RETRIES,
    )


def run(
    argv: Optional[Sequence[str]] = None,
    store: Optional[WorkspaceStore] = None,
    service_factory: Callable[[str], SlackService] = build_slack_client,
    stdout=None,
    stderr=None,
) -> int:
    """Parses ``argv``, runs the selected command and returns the process exit status."""
    command_manager = CommandManager(os.path.join(os.path.dirname(__file__), "domains"))
    command_manager.load_commands()
    parser = command_manager.build_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        (stderr or sys.stderr).write(e.usage)
        return report_error(e, stderr)

    # If no command is provided, show general help
    if not hasattr(args, "func") or args.func is None:
        parser.print_help(stdout)
        return 0

    try:
        if args.read_only and args.command_class.WRITE:
            raise ReadOnlyViolationError(args.command_path)

        if store is None:
            store = WorkspaceStore.load(Config.WORKSPACE_CONFIG_PATH or None)
        context = RunContext.from_args(
            args,
            store=store,
            token_env=Config.SLACK_TOKEN_ENV,
            service_factory=service_factory,
            stream=stdout,
        )
        logger.info(f"Running command: {args.command_path}")
        args.func(args, context)
    except Exception as e:
        return report_error(e, stderr)
    return 0


def main():
    """Entry point for the CLI application. Loads commands dynamically and executes
    the requested command.
    """
    sys.exit(run())


if __name__ == "__main__":
    main()
