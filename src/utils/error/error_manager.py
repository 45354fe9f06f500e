import sys
from typing import TextIO

from log_config import log_manager
from utils.error.base_custom_error import BaseCustomError
from utils.slack.error import ClassifiedError, ErrorCategory

logger = log_manager.get_logger("ErrorManager")

EXIT_GENERAL_ERROR = 1
EXIT_AUTH_ERROR = 2
EXIT_NOT_FOUND = 3

_CATEGORY_EXIT_CODES = {
    ErrorCategory.AUTH: EXIT_AUTH_ERROR,
    ErrorCategory.NOT_FOUND: EXIT_NOT_FOUND,
}


def find_classified(error: BaseException | None) -> ClassifiedError | None:
    """Returns the first ClassifiedError in ``error``'s cause/context chain."""
    seen = set()
    while error is not None and id(error) not in seen:
        if isinstance(error, ClassifiedError):
            return error
        seen.add(id(error))
        error = error.__cause__ or error.__context__
    return None


def exit_code_for(error: BaseException) -> int:
    """Process exit status for a failed command: auth 2, not found 3, anything else 1."""
    classified = find_classified(error)
    if classified is None:
        return EXIT_GENERAL_ERROR
    return _CATEGORY_EXIT_CODES.get(classified.category, EXIT_GENERAL_ERROR)


def error_message(error: BaseException) -> str:
    classified = find_classified(error)
    if classified is not None:
        return str(classified)
    if isinstance(error, BaseCustomError):
        return error.message
    return str(error) or type(error).__name__


def report_error(error: BaseException, stream: TextIO | None = None) -> int:
    """Writes ``Error: <message>`` to stderr, logs the failure and returns the exit code.

    :param error: The exception that ended the command.
    :param stream: Destination for the user-facing line. Defaults to stderr.
    """
    stream = stream or sys.stderr
    message = error_message(error)
    details = error.log_message() if isinstance(error, BaseCustomError) else message
    logger.error(f"An error occurred: {details}", exc_info=error)
    stream.write(f"Error: {message}\n")
    return exit_code_for(error)
