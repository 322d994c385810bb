"""
LLM Client for Groq API integration.

This module provides a thin interface to Groq's chat completions
endpoint. It handles:
- API client initialization
- The single completion request (no retries, no fallback models)
- Normalising the response into reply text and token usage
- Wrapping SDK failures into two error types

Why a separate client class:
1. Encapsulation - SDK details hidden from the chat service
2. Testability - an httpx transport can be injected for tests
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

import httpx
from groq import APIStatusError, Groq
from groq.types.chat import ChatCompletion

from dalil.core.config import Settings
from dalil.core.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CompletionResult:
    """
    Outcome of a successful completion call.

    Attributes:
        content: Text of the first choice, or None when the API returned none
        total_tokens: usage.total_tokens when reported, else None
    """
    content: Optional[str]
    total_tokens: Optional[int] = None


class LLMClient:
    """
    Client for the Groq completion API.

    The SDK's own retry loop is disabled: a failed call is reported
    to the caller once and never repeated.

    Example:
        >>> client = LLMClient(get_settings())
        >>> result = client.complete([{"role": "user", "content": "مرحبا"}])
        >>> print(result.content)
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None):
        """
        Initialize the Groq client.

        Args:
            settings: Application settings (API key and model)
            http_client: Optional httpx client, e.g. one with a mock transport
        """
        self.model = settings.llm_model
        self.groq_client = Groq(
            api_key=settings.groq_api_key,
            max_retries=0,
            http_client=http_client,
        )

        logger.info(f"Groq LLM client initialized: model={self.model}")

    def complete(self, messages: List[Dict[str, str]]) -> CompletionResult:
        """
        Send one chat completion request.

        Args:
            messages: OpenAI-style message list (system turn first)

        Returns:
            CompletionResult with reply text and token usage

        Raises:
            LLMStatusError: If the API answered with a non-success status
            LLMError: For network, timeout or response parsing failures
        """
        try:
            response = self.groq_client.chat.completions.create(
                model=self.model,
                messages=messages,
            )
        except APIStatusError as e:
            raise LLMStatusError(e.status_code, _response_text(e.response)) from e
        except Exception as e:
            raise LLMError(f"Groq request failed: {e}") from e

        try:
            return _to_result(response)
        except Exception as e:
            raise LLMError(f"Unexpected Groq response: {e}") from e

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self.groq_client.close()


def _to_result(response) -> CompletionResult:
    # Non-JSON bodies come back from the SDK as plain str
    if not isinstance(response, ChatCompletion):
        raise LLMError(f"Unexpected Groq response type: {type(response).__name__}")

    choices = getattr(response, "choices", None) or []
    content = None
    if choices:
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)

    usage = getattr(response, "usage", None)
    total_tokens = getattr(usage, "total_tokens", None) if usage is not None else None

    return CompletionResult(
        content=content,
        total_tokens=total_tokens,
    )


def _response_text(response: httpx.Response) -> str:
    try:
        return response.text
    except Exception:
        return ""


class LLMError(Exception):
    """
    Custom exception for LLM-related errors.

    This exception wraps all non-status API failures into a single type
    for easier handling in the service layer.
    """
    pass


class LLMStatusError(LLMError):
    """Raised when the completion API answers with a non-success status."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(f"Groq API error ({status_code})")
        self.status_code = status_code
        self.body = body
