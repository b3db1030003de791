"""
Shared Utility Functions

Timestamp formatting, ordering and rendering helpers used by the pipeline,
the API routes and the CLI.
"""

import json
import re
import logging
from datetime import datetime
from typing import Iterable, List, TypeVar

from app.integrations.slack.errors import TimestampFormatError
from app.integrations.slack.models import FallbackReason, Resolution, ResolvedMessage

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_SECONDS_PATTERN = re.compile(r"[+-]?[0-9]+")

T = TypeVar("T")


def format_slack_timestamp(ts: str, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> str:
    """
    Format a Slack ts ("seconds.microseconds") as a local date-time string.

    Only the seconds part is used; microseconds are dropped.

    Examples:
        "1700000000.000001" -> "2023-11-14 22:13:20" (in UTC)

    Raises:
        TimestampFormatError: no dot, non-integer seconds, or out of range
    """
    if not isinstance(ts, str) or "." not in ts:
        raise TimestampFormatError(f"invalid timestamp format: {ts!r}")

    seconds_part = ts.split(".", 1)[0]
    if not _SECONDS_PATTERN.fullmatch(seconds_part):
        raise TimestampFormatError(f"failed to parse timestamp: {ts!r}")

    try:
        return datetime.fromtimestamp(int(seconds_part)).strftime(fmt)
    except (OverflowError, OSError, ValueError) as e:
        raise TimestampFormatError(f"failed to parse timestamp: {ts!r}: {e}") from e


def resolve_timestamp(ts: str, fmt: str = DEFAULT_TIMESTAMP_FORMAT) -> Resolution:
    """Format ts, falling back to the raw string on failure."""
    try:
        return Resolution(value=format_slack_timestamp(ts, fmt))
    except TimestampFormatError as e:
        logger.warning(f"Keeping raw timestamp {ts!r}: {e}")
        return Resolution(
            value=ts,
            fallback_reason=FallbackReason.INVALID_TIMESTAMP,
            error=str(e),
        )


def sort_messages(messages: Iterable[T]) -> List[T]:
    """
    Stable ascending sort on the raw ts string.

    Lexical order equals chronological order only while seconds stay
    10 digits wide.
    """
    return sorted(messages, key=lambda m: m.ts)


def render_console_lines(messages: Iterable[ResolvedMessage]) -> List[str]:
    """Render messages as "[timestamp] user: text" lines."""
    return [msg.console_line() for msg in messages]


def render_json(messages: Iterable[ResolvedMessage], indent: int = 2) -> str:
    """Render messages as a JSON array of {timestamp, user_name, text}."""
    return json.dumps([msg.to_payload() for msg in messages], ensure_ascii=False, indent=indent)
