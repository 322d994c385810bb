"""
Chat Service - Business logic for the relay.

This service orchestrates one chat exchange:
1. Validates and trims the user message
2. Prepends the fixed system prompt
3. Calls the completion API once
4. Extracts the reply (or substitutes the fallback text)
5. Records the exchange in the shared stats

Stats are only touched after a successful upstream call, so failed
requests are never counted.
"""
from typing import Any

from dalil.core.exceptions import RelayServerError, UpstreamError
from dalil.core.logging_config import get_logger
from dalil.core.validators import validate_message
from dalil.llm.client import LLMClient, LLMError, LLMStatusError
from dalil.llm.prompts import FALLBACK_REPLY, build_chat_messages
from dalil.stats.tracker import StatsTracker

logger = get_logger(__name__)


class ChatService:
    """
    Service for relaying a user message to the LLM.

    Example:
        >>> service = ChatService(LLMClient(settings), StatsTracker(), max_message_length=350)
        >>> service.process_message("كيف أحافظ على ضغط دم طبيعي؟")
        "..."
    """

    def __init__(
        self,
        llm_client: LLMClient,
        stats: StatsTracker,
        max_message_length: int = 350
    ):
        """
        Initialize the chat service.

        Args:
            llm_client: Client used for the completion call
            stats: The process-wide stats tracker
            max_message_length: Longest accepted trimmed message
        """
        self.llm_client = llm_client
        self.stats = stats
        self.max_message_length = max_message_length

    def process_message(self, raw_message: Any) -> str:
        """
        Relay one user message and return the reply text.

        Args:
            raw_message: `message` value from the request body

        Returns:
            The model's reply, or FALLBACK_REPLY when the API returned no text

        Raises:
            EmptyMessageError: Message empty after trimming
            MessageTooLongError: Message longer than the configured limit
            UpstreamError: Completion API answered with a non-success status
            RelayServerError: Network or parsing failure during the call
        """
        message = validate_message(raw_message, self.max_message_length)

        logger.info(f"Processing message: length={len(message)}")

        try:
            result = self.llm_client.complete(build_chat_messages(message))
        except LLMStatusError as e:
            logger.error(f"Groq API error: status={e.status_code} body={e.body}")
            raise UpstreamError(e.status_code, e.body) from e
        except LLMError as e:
            logger.exception(f"Groq request failed: {e}")
            raise RelayServerError(str(e)) from e

        reply = result.content
        if not reply or not reply.strip():
            logger.warning("Completion returned no content, using fallback reply")
            reply = FALLBACK_REPLY

        self.stats.record_exchange(message, reply, total_tokens=result.total_tokens)

        logger.info(
            f"Message processed: reply_length={len(reply)}, "
            f"tokens={result.total_tokens}"
        )

        return reply
