"""
Slack API Routes
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel
from functools import lru_cache
from typing import List, Optional
import json
import logging
import time

from app.config import get_settings
from app.integrations.slack import extract_slack_link_info
from app.integrations.slack.errors import PermalinkParseError, SlackThreadError
from app.services.pipeline import ThreadPipeline

logger = logging.getLogger(__name__)
router = APIRouter()


class MessagePayload(BaseModel):
    """One resolved message as returned to the frontend."""

    timestamp: str
    user_name: str
    text: str


class FetchMessageResponse(BaseModel):
    messages: List[MessagePayload]
    error: Optional[str] = None


@lru_cache
def get_thread_pipeline() -> ThreadPipeline:
    """Process-wide pipeline so the user name cache outlives a request."""
    settings = get_settings()
    if not settings.slack_bot_token:
        logger.error("SLACK_BOT_TOKEN environment variable is not set")
        raise HTTPException(status_code=500, detail="SLACK_BOT_TOKEN environment variable is not set")
    return ThreadPipeline(settings=settings)


async def _read_url(request: Request) -> str:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise HTTPException(status_code=400, detail="Failed to parse request body")

    url = body.get("url") if isinstance(body, dict) else None
    if not isinstance(url, str):
        if url is not None:
            raise HTTPException(status_code=400, detail="Failed to parse request body")
        url = ""
    return url


@router.post("/fetch-message", response_model=FetchMessageResponse, response_model_exclude_none=True)
async def fetch_message(
    request: Request,
    pipeline: ThreadPipeline = Depends(get_thread_pipeline),
):
    """
    Fetch a thread from its permalink.

    Body:
        {"url": "https://<workspace>.slack.com/archives/<channel>/p<ts>"}

    Returns the thread messages sorted by timestamp with user names resolved.
    """
    start_time = time.time()
    slack_url = await _read_url(request)

    if not slack_url:
        raise HTTPException(status_code=400, detail="Slack URL is required")

    channel_id, _ = extract_slack_link_info(slack_url)
    if not channel_id:
        raise HTTPException(status_code=400, detail="Invalid Slack message URL format")

    try:
        messages = await pipeline.fetch_thread(slack_url)
    except PermalinkParseError:
        raise HTTPException(status_code=400, detail="Invalid Slack message URL format")
    except SlackThreadError as e:
        logger.error(f"Error getting messages for {slack_url}: {e}")
        raise HTTPException(status_code=500, detail=f"Error getting messages: {e}")

    logger.info(f"Served {len(messages)} messages in {time.time() - start_time:.2f}s")
    return FetchMessageResponse(
        messages=[MessagePayload(**msg.to_payload()) for msg in messages]
    )
