"""
API client for the thread viewer backend.
Makes real HTTP calls to the FastAPI backend at app/api/routes.
"""

from typing import Any
import requests
import logging
from config.settings import API_BASE_URL, API_TIMEOUT
from utils.validators import validate_slack_url

logger = logging.getLogger(__name__)


def _extract_error_detail(e: requests.HTTPError) -> str:
    """Pull a human-readable detail string from an HTTPError response."""
    try:
        return e.response.json().get("detail", str(e))
    except ValueError:
        return e.response.text or str(e)


def _api_post(endpoint: str, json: dict | None = None) -> requests.Response:
    """Make a POST request to the backend API."""
    url = f"{API_BASE_URL}{endpoint}"
    return requests.post(url, json=json, timeout=API_TIMEOUT)


def fetch_thread(url: str) -> dict[str, Any]:
    """
    Validate the permalink locally, then POST it to the backend.

    Calls: POST /api/fetch-message

    Returns:
        dict with keys: success (bool), message (str), messages (list)
    """
    url_valid, url_msg = validate_slack_url(url)
    if not url_valid:
        return {"success": False, "message": url_msg, "messages": []}

    try:
        resp = _api_post("/api/fetch-message", json={"url": url.strip()})
        resp.raise_for_status()
        data = resp.json()
        messages = data.get("messages") or []
        return {
            "success": True,
            "message": f"Fetched {len(messages)} messages.",
            "messages": messages,
        }
    except requests.ConnectionError:
        return {"success": False, "message": "Cannot connect to backend API. Is it running?", "messages": []}
    except requests.Timeout:
        return {"success": False, "message": "Backend API timed out.", "messages": []}
    except requests.HTTPError as e:
        detail = _extract_error_detail(e)
        logger.warning(f"Fetch failed for {url}: {detail}")
        return {"success": False, "message": f"Failed to fetch thread: {detail}", "messages": []}
