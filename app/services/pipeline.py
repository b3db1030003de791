"""
Thread Fetch Pipeline

Full pipeline orchestration:
Permalink -> conversations.replies (all pages) -> sort -> user names + timestamps
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.config import Settings, get_settings
from app.integrations.slack import SlackClient, parse_permalink
from app.integrations.slack.errors import SlackThreadError
from app.integrations.slack.models import Resolution, ResolvedMessage
from app.services.user_names import UserNameResolver
from app.utils.helpers import resolve_timestamp, sort_messages

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of the full pipeline execution."""

    success: bool
    messages: List[ResolvedMessage] = field(default_factory=list)
    error: str | None = None
    error_type: str | None = None  # Name of the SlackThreadError subclass


class ThreadPipeline:
    """
    Orchestrates fetching and resolving a Slack thread.

    Pipeline steps:
    1. Parse permalink (no network call on failure)
    2. Fetch every page of the thread
    3. Sort by raw ts
    4. Resolve user names and format timestamps per message
    """

    def __init__(
        self,
        slack_client: Optional[SlackClient] = None,
        settings: Optional[Settings] = None,
        user_names: Optional[UserNameResolver] = None,
    ):
        self.settings = settings or get_settings()
        self.slack_client = slack_client or SlackClient(settings=self.settings)
        self.user_names = user_names or UserNameResolver(
            self.slack_client,
            cache_enabled=self.settings.user_name_cache_enabled,
            unknown_name=self.settings.unknown_user_name,
        )

    async def _resolve_user_names(self, user_ids: List[str]) -> Dict[str, Resolution]:
        # One lookup per distinct id so concurrent misses never hit users.info twice
        unique_ids = list(dict.fromkeys(user_ids))
        results = await asyncio.gather(
            *(self.user_names.resolve(user_id) for user_id in unique_ids)
        )
        return dict(zip(unique_ids, results))

    async def fetch_thread(self, permalink: str) -> List[ResolvedMessage]:
        """
        Fetch a thread and return its messages sorted and resolved.

        Args:
            permalink: Slack message permalink

        Raises:
            PermalinkParseError: permalink does not match
            SlackTransportError, SlackAPIError, SlackDecodeError: fetch failed
        """
        parsed = parse_permalink(permalink)
        logger.info(f"Fetching thread {parsed.thread_ts} in channel {parsed.channel_id}")

        raw_messages = await self.slack_client.fetch_thread_messages(
            parsed.channel_id, parsed.thread_ts
        )
        ordered = sort_messages(raw_messages)

        names = await self._resolve_user_names([msg.user_id for msg in ordered])

        resolved = [
            ResolvedMessage(
                ts=msg.ts,
                user_id=msg.user_id,
                text=msg.text,
                timestamp=resolve_timestamp(msg.ts, self.settings.timestamp_format),
                user_name=names[msg.user_id],
            )
            for msg in ordered
        ]

        degraded = sum(1 for msg in resolved if msg.user_name.degraded or msg.timestamp.degraded)
        logger.info(f"Resolved {len(resolved)} messages ({degraded} with fallback values)")
        return resolved

    async def process_thread(self, permalink: str) -> PipelineResult:
        """
        Run fetch_thread and capture fatal errors in a PipelineResult.

        Args:
            permalink: Slack message permalink

        Returns:
            PipelineResult with outcome details
        """
        try:
            messages = await self.fetch_thread(permalink)
        except SlackThreadError as e:
            return PipelineResult(
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )

        return PipelineResult(success=True, messages=messages)
