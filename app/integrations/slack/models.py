"""
Slack Data Models
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class ThreadMessage(BaseModel):
    """One message of a thread as returned by conversations.replies."""

    model_config = ConfigDict(frozen=True)

    ts: str  # "seconds.microseconds", also the message id
    user_id: str = ""
    text: str = ""

    @classmethod
    def from_slack(cls, payload: Dict[str, Any]) -> "ThreadMessage":
        # Bot and system messages may carry no user
        return cls(
            ts=str(payload.get("ts", "")),
            user_id=payload.get("user") or "",
            text=payload.get("text") or "",
        )


class ThreadPage(BaseModel):
    """One page of a conversations.replies walk."""

    number: int
    messages: List[ThreadMessage]
    next_cursor: str = ""
    has_more: bool = False


class FallbackReason(str, Enum):
    """Why a per-message value was replaced by a fallback."""

    NAME_LOOKUP_FAILED = "name_lookup_failed"
    INVALID_TIMESTAMP = "invalid_timestamp"


class Resolution(BaseModel):
    """A resolved value, or the fallback used in its place."""

    value: str
    fallback_reason: Optional[FallbackReason] = None
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.fallback_reason is not None


class ResolvedMessage(BaseModel):
    """A thread message ready for display."""

    ts: str
    user_id: str
    text: str
    timestamp: Resolution
    user_name: Resolution

    def to_payload(self) -> Dict[str, str]:
        return {
            "timestamp": self.timestamp.value,
            "user_name": self.user_name.value,
            "text": self.text,
        }

    def console_line(self) -> str:
        return f"[{self.timestamp.value}] {self.user_name.value}: {self.text}"
