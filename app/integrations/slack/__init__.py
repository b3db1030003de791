# Slack integration module
from app.integrations.slack.client import SlackClient
from app.integrations.slack.models import (
    FallbackReason,
    Resolution,
    ResolvedMessage,
    ThreadMessage,
    ThreadPage,
)
from app.integrations.slack.parser import (
    ParsedPermalink,
    extract_slack_link_info,
    parse_permalink,
)

__all__ = [
    "SlackClient",
    "ThreadMessage",
    "ThreadPage",
    "Resolution",
    "ResolvedMessage",
    "FallbackReason",
    "ParsedPermalink",
    "extract_slack_link_info",
    "parse_permalink",
]
