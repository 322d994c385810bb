"""
Prompts module - LLM prompt templates.

Prompts are stored as separate Python files so prompt changes are
reviewed like code.
"""
from dalil.llm.prompts.health_prompts import (
    DISCLAIMER,
    FALLBACK_REPLY,
    build_chat_messages,
    get_health_system_prompt,
)

__all__ = [
    "DISCLAIMER",
    "FALLBACK_REPLY",
    "build_chat_messages",
    "get_health_system_prompt",
]
