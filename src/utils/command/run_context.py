import argparse
from argparse import ArgumentParser, Namespace
from typing import Any, Callable, Optional

from utils.output_manager import OUTPUT_FORMATS, Formatter, OutputManager
from utils.slack.error import ClassifiedError, ErrorCategory
from utils.slack.slack_client import SlackClient
from utils.slack.slack_service import SlackService
from utils.workspace.token_resolver import TokenResolver
from utils.workspace.workspace_store import WorkspaceStore

MISSING_TOKEN_MESSAGE = "no token found. Run 'slacktoolkit auth login' or set SLACK_TOKEN"


def add_global_arguments(parser: ArgumentParser, suppress_defaults: bool = True) -> None:
    """Adds the process-wide options to ``parser``.

    The root parser owns the real defaults; every nested parser registers the same options
    with suppressed defaults so they are accepted after the subcommand without clobbering
    a value given before it.
    """

    def default(value: Any) -> Any:
        return argparse.SUPPRESS if suppress_defaults else value

    group = parser.add_argument_group("global options")
    group.add_argument("--token", default=default(""), help="Slack API token (xoxb-* or xoxp-*)")
    group.add_argument("-w", "--workspace", default=default(""), help="Workspace name from the local store")
    group.add_argument(
        "-o", "--output", choices=OUTPUT_FORMATS, default=default(None), help="Output format (json|table)"
    )
    group.add_argument(
        "--read-only",
        action="store_true",
        default=default(False),
        help="Restrict to read-only operations (reject writes)",
    )


class RunContext:
    """Everything a command needs for one CLI invocation.

    The Slack service is created on first use so commands that never talk to Slack
    (version, workspace management, ...) run without a token.
    """

    def __init__(
        self,
        store: WorkspaceStore,
        resolver: TokenResolver,
        formatter: Formatter,
        read_only: bool = False,
        service_factory: Callable[[str], SlackService] = SlackClient,
    ):
        self.store = store
        self.resolver = resolver
        self.formatter = formatter
        self.read_only = read_only
        self.service_factory = service_factory
        self._service: Optional[SlackService] = None

    @classmethod
    def from_args(
        cls,
        args: Namespace,
        store: WorkspaceStore,
        token_env: str = "SLACK_TOKEN",
        service_factory: Callable[[str], SlackService] = SlackClient,
        stream=None,
    ) -> "RunContext":
        resolver = TokenResolver(
            flag_token=getattr(args, "token", ""),
            workspace=getattr(args, "workspace", ""),
            store=store,
            env_var=token_env,
        )
        formatter = OutputManager.get_formatter(getattr(args, "output", None), stream)
        return cls(
            store=store,
            resolver=resolver,
            formatter=formatter,
            read_only=bool(getattr(args, "read_only", False)),
            service_factory=service_factory,
        )

    @property
    def service(self) -> SlackService:
        """The Slack service for the resolved token.

        Raises:
            ClassifiedError: Auth category when no token can be resolved.
        """
        if self._service is None:
            token = self.resolver.resolve()
            if not token:
                raise ClassifiedError(ErrorCategory.AUTH, MISSING_TOKEN_MESSAGE)
            self._service = self.service_factory(token)
        return self._service

    def create_service(self, token: str) -> SlackService:
        """A service for an explicit token, bypassing resolution."""
        return self.service_factory(token)

    def render(self, data: Any) -> None:
        self.formatter.render(data)
