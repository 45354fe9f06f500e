import logging
import os
import re
import sys
import zlib
from enum import Enum
from logging import Logger
from logging.handlers import TimedRotatingFileHandler
from typing import Optional

from utils.file_manager import FileManager

ROOT_LOGGER_NAME = "slacktoolkit"
FILE_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Bot, user, app and refresh tokens
SLACK_TOKEN_PATTERN = re.compile(r"\b(xox[abeprs]|xapp)-[0-9A-Za-z-]+")


class LogLevel(Enum):
    """
    Enum for log levels to improve readability and usability.

    Attributes:
        DEBUG: Debug log level.
        INFO: Info log level.
        WARNING: Warning log level.
        ERROR: Error log level.
        CRITICAL: Critical log level.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogOutput(Enum):
    """Where log records are written."""

    CONSOLE = "console"
    FILE = "file"
    BOTH = "both"

    @classmethod
    def parse(cls, value: "str | LogOutput") -> "LogOutput":
        if isinstance(value, LogOutput):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(f"Invalid log output: {value}. Must be one of 'console', 'file', or 'both'.") from None


class LevelFilter(logging.Filter):
    """Passes only records of exactly one level."""

    def __init__(self, level: LogLevel):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno == self.level.value


class TokenRedactingFilter(logging.Filter):
    """Masks Slack tokens in log messages, keeping only their prefix."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = SLACK_TOKEN_PATTERN.sub(lambda m: f"{m.group(1)}-***", message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


class ColorFormatter(logging.Formatter):
    """
    Console formatter: the level is coloured by severity and the logger name by a colour
    derived from the name, so each component keeps the same colour across runs.
    """

    LEVEL_COLORS = {
        LogLevel.DEBUG: "\033[94m",  # Blue
        LogLevel.INFO: "\033[92m",  # Green
        LogLevel.WARNING: "\033[93m",  # Yellow
        LogLevel.ERROR: "\033[91m",  # Red
        LogLevel.CRITICAL: "\033[91m\033[1m",  # Bold Red
    }
    NAME_COLORS = ["\033[95m", "\033[96m", "\033[36m", "\033[35m", "\033[34m", "\033[90m"]
    RESET = "\033[0m"

    def __init__(self):
        super().__init__(datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        try:
            level_color = self.LEVEL_COLORS[LogLevel(record.levelno)]
        except ValueError:
            level_color = self.RESET
        name_color = self.NAME_COLORS[zlib.crc32(record.name.encode()) % len(self.NAME_COLORS)]
        self._style._fmt = (
            f"{level_color}[%(asctime)s][%(levelname)s]{self.RESET}"
            f"{name_color}[%(name)s]{self.RESET}: %(message)s"
        )
        return super().format(record)


class LogManager:
    """
    Singleton owning the ``slacktoolkit`` logger tree.

    Handlers are attached once to the root ``slacktoolkit`` logger and every component
    logger is a child of it. Console output always goes to stderr so command output on
    stdout and the MCP stdio channel stay clean.
    """

    _instance = None

    @staticmethod
    def get_instance() -> "LogManager":
        """
        Returns the singleton instance of LogManager.

        Raises:
            RuntimeError: If ``log_config`` (or another caller) has not created it yet.
        """
        if LogManager._instance is None:
            raise RuntimeError("LogManager is not initialized. Import log_config first.")
        return LogManager._instance

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(LogManager, cls).__new__(cls)
        return cls._instance

    def __init__(
        self,
        log_dir: str,
        log_file: str,
        log_retention_hours: int,
        default_level: LogLevel = LogLevel.INFO,
        use_filter: bool = False,
        log_output: "str | LogOutput" = LogOutput.BOTH,
    ):
        """
        Configures the logger tree. Later instantiations return the first instance unchanged.

        Args:
            log_dir (str): Directory of the log file.
            log_file (str): Name of the log file.
            log_retention_hours (int): Hourly log files kept after rotation.
            default_level (LogLevel): Minimum level logged.
            use_filter (bool): Log only records of exactly ``default_level``.
            log_output (str | LogOutput): 'console', 'file' or 'both'.

        Raises:
            ValueError: If ``log_output`` is not a known output.
        """
        if getattr(self, "_initialized", False):
            return

        self.log_dir = log_dir
        self.log_file = log_file
        self.log_retention_hours = log_retention_hours
        self.default_level = default_level
        self.use_filter = use_filter
        self.log_output = LogOutput.parse(log_output)

        self.root = logging.getLogger(ROOT_LOGGER_NAME)
        self.root.setLevel(default_level.value)
        self.root.propagate = False
        for handler in self._build_handlers():
            self.root.addHandler(handler)
        self._initialized = True

    def _build_handlers(self) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []

        if self.log_output in (LogOutput.CONSOLE, LogOutput.BOTH):
            console_handler = logging.StreamHandler(sys.stderr)
            if sys.stderr.isatty():
                console_handler.setFormatter(ColorFormatter())
            else:
                console_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            handlers.append(console_handler)

        if self.log_output in (LogOutput.FILE, LogOutput.BOTH):
            FileManager.create_folder(self.log_dir)
            file_handler = TimedRotatingFileHandler(
                os.path.join(self.log_dir, self.log_file),
                when="h",
                interval=1,
                backupCount=self.log_retention_hours,
                delay=True,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
            handlers.append(file_handler)

        for handler in handlers:
            handler.addFilter(TokenRedactingFilter())
            if self.use_filter:
                handler.addFilter(LevelFilter(self.default_level))
        return handlers

    def get_logger(self, name: Optional[str] = None) -> Logger:
        """
        Returns the component logger ``slacktoolkit.<name>``.

        Args:
            name (Optional[str]): Component name, e.g. "SlackClient". Empty returns the root logger.
        """
        if not (isinstance(name, str) and name.strip()):
            return self.root

        return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
