"""
Request and Response models for the relay API.

These Pydantic models define the contract between client and server.
Stats fields are snake_case in Python and camelCase on the wire.
"""
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """
    Request model for the /api/chat endpoint.

    `message` is left untyped so numbers and other scalars reach the
    validator, which coerces them to text. A missing field is rejected
    with the same reply as an empty one.
    """
    message: Any = Field(
        default=None,
        description="The user's health question",
        examples=["ما هي فوائد شرب الماء؟"]
    )


class ChatResponse(BaseModel):
    """Response model for every /api/chat outcome."""
    reply: str = Field(
        ...,
        description="The assistant's reply, or an error message in Arabic"
    )


class HistoryEntry(BaseModel):
    """One recorded exchange."""
    time: str
    question: str
    answer: str


class StatsResponse(BaseModel):
    """Response model for the /api/stats endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    total_requests: int = Field(..., alias="totalRequests")
    total_user_messages: int = Field(..., alias="totalUserMessages")
    total_bot_messages: int = Field(..., alias="totalBotMessages")
    total_tokens: int = Field(..., alias="totalTokens")
    last_messages: List[HistoryEntry] = Field(
        default_factory=list,
        alias="lastMessages",
        description="Up to 10 most recent exchanges, newest first"
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    """Response model for the /health endpoint."""
    ok: bool = True
    status: str = Field(default="healthy")
    model: str
    version: str
    timestamp: datetime = Field(default_factory=_utc_now)
