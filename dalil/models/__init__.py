"""
Models module - Pydantic schemas for request and response validation.
"""
from dalil.models.chat import (
    ChatRequest,
    ChatResponse,
    HealthResponse,
    HistoryEntry,
    StatsResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "HealthResponse",
    "HistoryEntry",
    "StatsResponse",
]
