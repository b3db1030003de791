"""
Slack API Client

Responsibilities:
- conversations.replies: Fetch every page of a thread, following next_cursor
- users.info: Look up a user's real name
- Translate slack_sdk failures into the SlackThreadError hierarchy

Requests go through AsyncWebClient, which sends GET with query parameters.
The sync WebClient always POSTs a form body.
"""

from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web import SlackResponse
from slack_sdk.web.async_client import AsyncWebClient
from slack_sdk.web.async_slack_response import AsyncSlackResponse
from app.config import Settings, get_settings
from app.integrations.slack.errors import (
    SlackAPIError,
    SlackDecodeError,
    SlackThreadError,
    SlackTransportError,
)
from app.integrations.slack.models import ThreadMessage, ThreadPage
from typing import Any, AsyncIterator, Dict, List, Optional
import asyncio
import aiohttp
import logging

logger = logging.getLogger(__name__)


def _translate_api_error(method: str, error: SlackApiError) -> SlackThreadError:
    """Map a SlackApiError onto transport, decode or API failure."""
    response = error.response

    # slack_sdk hands back the raw aiohttp response when the body is not JSON
    if not isinstance(response, (AsyncSlackResponse, SlackResponse)):
        return SlackDecodeError(f"failed to decode slack api response from {method}: {error}")

    if response.status_code != 200:
        return SlackTransportError(
            f"slack api request failed with status: {response.status_code}",
            status_code=response.status_code,
        )

    # Non-JSON content types leave an empty body behind
    data = response.data
    if not isinstance(data, dict) or not data:
        return SlackDecodeError(f"failed to decode slack api response from {method}")

    return SlackAPIError(data.get("error") or "unknown_error", method=method)


class SlackClient:
    """Slack Web API client bound to a single bot token."""

    def __init__(
        self,
        token: Optional[str] = None,
        settings: Optional[Settings] = None,
        client: Optional[AsyncWebClient] = None,
    ):
        settings = settings or get_settings()
        self.settings = settings
        self.client = client or AsyncWebClient(
            token=token if token is not None else settings.slack_bot_token,
            base_url=settings.slack_api_base_url,
            timeout=settings.slack_timeout,
            retry_handlers=[],
        )

    async def _call(self, method: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        GET a Slack Web API method and return its JSON body.

        Raises:
            SlackTransportError: network failure or non-200 status
            SlackDecodeError: body is not a JSON object
            SlackAPIError: Slack answered ok:false
        """
        try:
            response = await self.client.api_call(method, http_verb="GET", params=params)
        except SlackApiError as e:
            raise _translate_api_error(method, e) from e
        except (SlackClientError, aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            raise SlackTransportError(f"failed to call slack api {method}: {e}") from e
        except AttributeError as e:
            # slack_sdk cannot validate a text/plain body
            raise SlackDecodeError(f"failed to decode slack api response from {method}") from e

        data = response.data if isinstance(response, (AsyncSlackResponse, SlackResponse)) else response
        if not isinstance(data, dict):
            raise SlackDecodeError(f"failed to decode slack api response from {method}")

        if not data.get("ok", False):
            raise SlackAPIError(data.get("error") or "unknown_error", method=method)

        return data

    async def iter_thread_pages(self, channel_id: str, thread_ts: str) -> AsyncIterator[ThreadPage]:
        """
        Walk conversations.replies page by page.

        The generator stops after the first page whose next_cursor is empty.
        Pages are requested one at a time since each cursor comes from the
        previous response.
        """
        cursor = ""
        number = 0

        while True:
            params: Dict[str, Any] = {
                "channel": channel_id,
                "ts": thread_ts,
                "inclusive": "true",
            }
            if self.settings.replies_page_limit:
                params["limit"] = str(self.settings.replies_page_limit)
            if cursor:
                params["cursor"] = cursor

            data = await self._call("conversations.replies", params)
            number += 1

            messages = [ThreadMessage.from_slack(m) for m in data.get("messages") or []]
            cursor = (data.get("response_metadata") or {}).get("next_cursor") or ""
            logger.debug(f"Fetched page {number} of thread {thread_ts}: {len(messages)} messages")

            yield ThreadPage(
                number=number,
                messages=messages,
                next_cursor=cursor,
                has_more=bool(data.get("has_more", False)),
            )

            if not cursor:
                return

    async def fetch_thread_messages(self, channel_id: str, thread_ts: str) -> List[ThreadMessage]:
        """
        Fetch all messages in a thread, parent included.

        Any failure aborts the whole fetch; nothing accumulated so far is returned.
        """
        all_messages: List[ThreadMessage] = []
        pages = 0
        async for page in self.iter_thread_pages(channel_id, thread_ts):
            all_messages.extend(page.messages)
            pages = page.number

        logger.info(f"Fetched {len(all_messages)} messages from thread {thread_ts} in {pages} page(s)")
        return all_messages

    async def get_user_name(self, user_id: str) -> str:
        """Return user.profile.real_name from users.info."""
        data = await self._call("users.info", {"user": user_id})
        profile = (data.get("user") or {}).get("profile") or {}
        return profile.get("real_name", "")
