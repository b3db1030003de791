"""
User name resolution with an in-memory cache.

The cache belongs to the resolver instance and lives as long as it does.
Entries are never invalidated.
"""

import threading
import logging
from typing import Dict, Optional

from app.integrations.slack.client import SlackClient
from app.integrations.slack.errors import NameResolutionError, SlackThreadError
from app.integrations.slack.models import FallbackReason, Resolution

logger = logging.getLogger(__name__)


class UserNameResolver:
    """Maps Slack user ids to real names via users.info."""

    def __init__(
        self,
        slack_client: SlackClient,
        cache_enabled: bool = True,
        unknown_name: str = "Unknown",
    ):
        self.slack_client = slack_client
        self.cache_enabled = cache_enabled
        self.unknown_name = unknown_name
        self._lock = threading.Lock()
        self._cache: Dict[str, str] = {}

    def cached(self, user_id: str) -> Optional[str]:
        with self._lock:
            return self._cache.get(user_id)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    async def lookup(self, user_id: str) -> str:
        """
        Return the display name for user_id.

        Raises:
            NameResolutionError: empty id or any users.info failure
        """
        if not user_id:
            raise NameResolutionError(user_id, "message has no user")

        if self.cache_enabled:
            name = self.cached(user_id)
            if name is not None:
                logger.debug(f"User name cache hit for {user_id}")
                return name

        try:
            name = await self.slack_client.get_user_name(user_id)
        except SlackThreadError as e:
            raise NameResolutionError(user_id, str(e)) from e

        if self.cache_enabled:
            with self._lock:
                self._cache[user_id] = name
        return name

    async def resolve(self, user_id: str) -> Resolution:
        """Best-effort lookup; failures degrade to the unknown name."""
        try:
            return Resolution(value=await self.lookup(user_id))
        except NameResolutionError as e:
            logger.warning(f"Using '{self.unknown_name}' for user {user_id or '<empty>'}: {e.reason}")
            return Resolution(
                value=self.unknown_name,
                fallback_reason=FallbackReason.NAME_LOOKUP_FAILED,
                error=str(e),
            )
