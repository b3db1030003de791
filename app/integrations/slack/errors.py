"""
Slack Thread Errors

Fatal errors abort a whole thread fetch. NameResolutionError and
TimestampFormatError are per-message and are degraded to fallback values
by the pipeline.
"""

from typing import Optional


class SlackThreadError(Exception):
    """Base class for every error raised while fetching a thread."""


class PermalinkParseError(SlackThreadError, ValueError):
    """Raised when a URL is not a Slack message permalink."""


class SlackTransportError(SlackThreadError):
    """Raised when Slack could not be reached or answered with a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SlackAPIError(SlackThreadError):
    """Raised when Slack answered with ok:false."""

    def __init__(self, error: str, method: str = ""):
        super().__init__(f"slack api returned an error: {error}")
        self.error = error
        self.method = method


class SlackDecodeError(SlackThreadError):
    """Raised when a Slack response body is not a JSON object."""


class NameResolutionError(SlackThreadError):
    """Raised when a user id cannot be mapped to a display name."""

    def __init__(self, user_id: str, reason: str):
        super().__init__(f"failed to resolve user {user_id or '<empty>'}: {reason}")
        self.user_id = user_id
        self.reason = reason


class TimestampFormatError(SlackThreadError, ValueError):
    """Raised when a Slack ts string cannot be formatted as a date-time."""
