"""
Slack Permalink Parser

Parses Slack message permalinks to extract channel_id and thread_ts.
"""

import re
from dataclasses import dataclass
from typing import Tuple

from app.integrations.slack.errors import PermalinkParseError

# Pattern: https://{workspace}.slack.com/archives/{channel_id}/p{10 digits}{6 digits}
PERMALINK_PATTERN = re.compile(
    r"https://([a-zA-Z0-9-]+)\.slack\.com/archives/([CG][A-Za-z0-9]+)/p([0-9]{10})([0-9]{6})"
)


@dataclass
class ParsedPermalink:
    """Parsed Slack permalink components."""

    workspace: str
    channel_id: str
    thread_ts: str


def _match(link: str):
    if not isinstance(link, str):
        return None
    return PERMALINK_PATTERN.search(link)


def extract_slack_link_info(link: str) -> Tuple[str, str]:
    """
    Extract channel id and message timestamp from a permalink.

    Examples:
        https://myworkspace.slack.com/archives/C123ABC456/p1234567890123456
        -> ("C123ABC456", "1234567890.123456")

    Returns:
        (channel_id, thread_ts), or ("", "") when the link does not match
    """
    match = _match(link)
    if not match:
        return "", ""

    _, channel_id, seconds, micros = match.groups()
    return channel_id, f"{seconds}.{micros}"


def parse_permalink(permalink: str) -> ParsedPermalink:
    """
    Parse Slack message permalink to extract workspace, channel and timestamp.

    Args:
        permalink: Full Slack permalink URL

    Returns:
        ParsedPermalink with workspace, channel_id, and thread_ts

    Raises:
        PermalinkParseError: If permalink format is invalid
    """
    match = _match(permalink)
    if not match:
        raise PermalinkParseError(f"Invalid Slack message URL format: {permalink}")

    workspace, channel_id, seconds, micros = match.groups()

    # Slack uses 10 digits before decimal, 6 after
    return ParsedPermalink(
        workspace=workspace,
        channel_id=channel_id,
        thread_ts=f"{seconds}.{micros}",
    )
