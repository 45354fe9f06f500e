"""Resilient Slack access layer.

Usage:
    >>> from utils.slack import PaginationRequest, SlackClient
    >>> client = SlackClient(token="xoxb-...")
    >>> page = client.list_channels(PaginationRequest(limit=50))
"""

from utils.slack.error import (
    ClassifiedError,
    ErrorCategory,
    RateLimitExhaustedError,
    SlackApiError,
    SlackApiRequestError,
    SlackConfigurationError,
    SlackError,
    SlackNetworkError,
    SlackRateLimitError,
    classify,
)
from utils.slack.models import AuthResult, Channel, File, Message, ReactedItem, Reaction, SearchResult, User
from utils.slack.pagination import DEFAULT_PAGE_SIZE, PaginatedResult, PaginationRequest, paginate
from utils.slack.slack_api_client import SlackApiClient
from utils.slack.slack_client import SlackClient
from utils.slack.slack_service import SlackService

__all__ = [
    "AuthResult",
    "Channel",
    "ClassifiedError",
    "DEFAULT_PAGE_SIZE",
    "ErrorCategory",
    "File",
    "Message",
    "PaginatedResult",
    "PaginationRequest",
    "RateLimitExhaustedError",
    "ReactedItem",
    "Reaction",
    "SearchResult",
    "SlackApiClient",
    "SlackApiError",
    "SlackApiRequestError",
    "SlackClient",
    "SlackConfigurationError",
    "SlackError",
    "SlackNetworkError",
    "SlackRateLimitError",
    "SlackService",
    "User",
    "classify",
    "paginate",
]
