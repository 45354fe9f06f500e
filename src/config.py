import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_OUTPUTS = ("console", "file", "both")


def _choice(name: str, default: str, choices: tuple[str, ...], upper: bool = False) -> str:
    value = os.getenv(name, default)
    value = value.upper() if upper else value.lower()
    if value not in choices:
        raise ValueError(f"Invalid {name}: {value}. Must be one of {', '.join(repr(c) for c in choices)}.")
    return value


def _int(name: str, default: int, minimum: int = 0) -> int:
    raw = os.getenv(name, str(default))
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"Invalid {name}: {raw}. Must be an integer.") from None
    if value < minimum:
        raise ValueError(f"Invalid {name}: {value}. Must be at least {minimum}.")
    return value


class Config:
    """
    Environment settings for the CLI and the MCP server, read once from the process
    environment and an optional ``.env`` file.
    """

    # Logging
    LOG_DIR = os.getenv("LOG_DIR", "./logs")
    LOG_FILE = os.getenv("LOG_FILE", "slacktoolkit.log")
    LOG_LEVEL = _choice("LOG_LEVEL", "INFO", LOG_LEVELS, upper=True)
    LOG_OUTPUT = _choice("LOG_OUTPUT", "file", LOG_OUTPUTS)
    LOG_RETENTION_HOURS = _int("LOG_RETENTION_HOURS", 24, minimum=1)
    USE_FILTER = _choice("USE_FILTER", "false", ("true", "false")) == "true"

    # Slack
    SLACK_TOKEN_ENV = os.getenv("SLACK_TOKEN_ENV", "SLACK_TOKEN")
    SLACK_TIMEOUT = _int("SLACK_TIMEOUT", 30, minimum=1)
    SLACK_MAX_RETRIES = _int("SLACK_MAX_RETRIES", 3)

    # Workspace store, defaults to $XDG_CONFIG_HOME/slacktoolkit/config.json
    WORKSPACE_CONFIG_PATH = os.getenv("WORKSPACE_CONFIG_PATH", "")
