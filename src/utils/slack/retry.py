"""Bounded backoff for rate-limited Slack calls."""

import time
from typing import Callable, TypeVar

from utils.logging.logging_manager import LogManager
from utils.slack.error import RateLimitExhaustedError, SlackRateLimitError

T = TypeVar("T")

MAX_RETRIES = 3


def execute(
    operation: Callable[[], T],
    max_retries: int = MAX_RETRIES,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Run ``operation`` and retry it while Slack answers with a rate limit.

    Only :class:`SlackRateLimitError` is retried. The wait is the advised ``retry_after``
    or, when Slack advised nothing, ``attempt`` seconds (1s, 2s, 3s). Any other exception
    propagates unchanged on the first occurrence.

    Args:
        operation: Zero-argument callable performing one remote call.
        max_retries: Retries allowed after the first attempt.
        sleep: Blocking sleep function, replaceable in tests.

    Returns:
        Whatever ``operation`` returns.

    Raises:
        RateLimitExhaustedError: If the call is still rate limited after ``max_retries`` retries.
    """
    logger = LogManager.get_instance().get_logger("SlackRetry")
    attempt = 0
    while True:
        try:
            return operation()
        except SlackRateLimitError as e:
            if attempt >= max_retries:
                logger.error(f"Giving up after {max_retries} rate limited retries")
                raise RateLimitExhaustedError(retries=max_retries, last_error=e) from e
            attempt += 1
            wait = e.retry_after if e.retry_after else float(attempt)
            logger.warning(f"Rate limited, retry {attempt}/{max_retries} in {wait}s")
            sleep(wait)
