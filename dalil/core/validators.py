"""
Input Validators - Message sanitization and validation.

The relay only trims the message: the trimmed text is what reaches the
model and what is recorded in the history.
"""
from typing import Any

from dalil.core.exceptions import EmptyMessageError, MessageTooLongError
from dalil.core.logging_config import get_logger

logger = get_logger(__name__)


def sanitize_message(message: Any) -> str:
    """
    Coerce a raw body value to a trimmed string.

    None and other falsy values become "" so a missing field is
    handled exactly like an empty one.
    """
    if not message:
        return ""
    return str(message).strip()


def validate_message(message: Any, max_length: int) -> str:
    """
    Full validation and sanitization of a message.

    Args:
        message: Raw `message` value from the request body
        max_length: Maximum allowed length after trimming

    Returns:
        The trimmed message

    Raises:
        EmptyMessageError: If nothing is left after trimming
        MessageTooLongError: If the trimmed message exceeds max_length
    """
    sanitized = sanitize_message(message)

    if not sanitized:
        raise EmptyMessageError()

    if len(sanitized) > max_length:
        logger.warning(f"Rejected message: length={len(sanitized)} max={max_length}")
        raise MessageTooLongError(len(sanitized), max_length)

    return sanitized
