from enum import Enum

from utils.error.base_custom_error import BaseCustomError


class SlackError(BaseCustomError):
    """Base exception class for all Slack related errors."""

    pass


class SlackApiError(SlackError):
    """Base exception for Slack API errors."""

    pass


class SlackApiRequestError(SlackApiError):
    """Raised when Slack answers a request with ``ok: false``.

    ``code`` is the provider's error string (``channel_not_found``, ``invalid_auth``, ...).
    """

    def __init__(self, code: str, endpoint: str | None = None, status_code: int | None = None, **metadata):
        super().__init__(code, endpoint=endpoint, status_code=status_code, **metadata)
        self.code = code
        self.endpoint = endpoint
        self.status_code = status_code


class SlackRateLimitError(SlackApiError):
    """Raised when Slack API returns a rate limit error (429).

    ``retry_after`` is the advisory wait in seconds, or None when Slack sent no Retry-After header.
    """

    def __init__(self, retry_after: float | None = None, **metadata):
        if retry_after:
            message = f"Rate limited, retry after {retry_after}s"
        else:
            message = "Rate limited"
        super().__init__(message, retry_after=retry_after, **metadata)
        self.retry_after = retry_after


class RateLimitExhaustedError(SlackApiError):
    """Raised when a call is still rate limited after the retry budget is spent."""

    def __init__(self, retries: int, last_error: SlackRateLimitError | None = None, **metadata):
        super().__init__(f"rate limited after {retries} retries", **metadata)
        self.retries = retries
        self.last_error = last_error


class SlackNetworkError(SlackApiError):
    """Raised when Slack could not be reached at all."""

    def __init__(self, message: str = "Slack network error", endpoint: str | None = None, **metadata):
        super().__init__(message, endpoint=endpoint, **metadata)
        self.endpoint = endpoint


class SlackConfigurationError(SlackError):
    """Raised when Slack configuration is missing or invalid."""

    def __init__(self, message: str = "Slack configuration error", **metadata):
        super().__init__(message, **metadata)


class ErrorCategory(str, Enum):
    """Stable error taxonomy exposed to every surface."""

    AUTH = "auth_error"
    RATE_LIMIT = "rate_limited"
    NOT_FOUND = "not_found"
    PERMISSION = "permission_denied"
    VALIDATION = "validation_error"
    API_ERROR = "api_error"
    NETWORK = "network_error"


class ClassifiedError(SlackError):
    """A Slack failure normalized into an :class:`ErrorCategory`.

    The original exception stays reachable through ``cause`` (and ``__cause__``).
    """

    def __init__(
        self,
        category: ErrorCategory,
        message: str,
        detail: str | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message, category=category.value, detail=detail)
        self.category = category
        self.detail = detail
        self.cause = cause
        self.__cause__ = cause

    def __str__(self):
        if self.detail:
            return f"{self.category.value}: {self.message} ({self.detail})"
        return f"{self.category.value}: {self.message}"

    def to_dict(self) -> dict:
        payload = {"code": self.category.value, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        return payload


AUTH_ERROR_CODES = frozenset({"invalid_auth", "not_authed", "token_revoked", "token_expired", "account_inactive"})
NOT_FOUND_ERROR_CODES = frozenset({"channel_not_found", "user_not_found", "file_not_found", "message_not_found"})
PERMISSION_ERROR_CODES = frozenset({"not_in_channel", "missing_scope", "cannot_dm_bot", "restricted_action"})
VALIDATION_ERROR_CODES = frozenset({"too_many_attachments", "msg_too_long", "no_text", "invalid_blocks"})

_CODE_CATEGORIES: dict[str, ErrorCategory] = {
    **{code: ErrorCategory.AUTH for code in AUTH_ERROR_CODES},
    **{code: ErrorCategory.NOT_FOUND for code in NOT_FOUND_ERROR_CODES},
    **{code: ErrorCategory.PERMISSION for code in PERMISSION_ERROR_CODES},
    **{code: ErrorCategory.VALIDATION for code in VALIDATION_ERROR_CODES},
}


def _error_code(error: BaseException) -> str:
    code = getattr(error, "code", None)
    if isinstance(code, str) and code:
        return code
    try:
        return str(error)
    except Exception:
        return type(error).__name__


def classify(error: BaseException | None) -> ClassifiedError | None:
    """Map a raw failure onto the error taxonomy.

    Provider error codes are matched exactly against the four known code sets; any other
    code is an ``API_ERROR``. Rate limit, transport and missing-token failures are
    recognized by their exception type. ``None`` passes through as ``None``.
    """
    if error is None:
        return None
    if isinstance(error, ClassifiedError):
        return error
    if isinstance(error, (RateLimitExhaustedError, SlackRateLimitError)):
        return ClassifiedError(ErrorCategory.RATE_LIMIT, error.message, cause=error)
    if isinstance(error, SlackNetworkError):
        return ClassifiedError(ErrorCategory.NETWORK, error.message, detail=error.endpoint, cause=error)
    if isinstance(error, SlackConfigurationError):
        return ClassifiedError(ErrorCategory.AUTH, error.message, cause=error)

    code = _error_code(error)
    category = _CODE_CATEGORIES.get(code, ErrorCategory.API_ERROR)
    return ClassifiedError(category, code, detail=getattr(error, "endpoint", None), cause=error)
