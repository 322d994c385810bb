"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- API calls to Groq
- Error handling for LLM failures
"""
from dalil.llm.client import CompletionResult, LLMClient, LLMError, LLMStatusError

__all__ = [
    "CompletionResult",
    "LLMClient",
    "LLMError",
    "LLMStatusError",
]
