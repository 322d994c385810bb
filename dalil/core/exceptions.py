"""
Custom Exceptions - Application-specific error classes.

Every HTTP-facing error carries a status code and the Arabic text
returned to the caller in the `reply` field. Upstream details are
logged server-side and never copied into the reply.
"""
from typing import Optional


EMPTY_MESSAGE_REPLY = "الرجاء كتابة سؤالك أولًا."
MESSAGE_TOO_LONG_REPLY = "رسالتك طويلة جدًا، يرجى اختصار السؤال."
UPSTREAM_ERROR_REPLY = "حدث خطأ أثناء الاتصال بخدمة الذكاء الاصطناعي، حاول مرة أخرى."
SERVER_ERROR_REPLY = "حدث خطأ غير متوقع في الخادم، حاول مرة أخرى لاحقًا."


class ConfigurationError(Exception):
    """Raised at startup when required configuration is missing or invalid."""
    pass


class RelayException(Exception):
    """
    Base exception for all errors answered with a `reply` payload.

    Subclass this for specific error types.
    """
    status_code: int = 500
    reply: str = SERVER_ERROR_REPLY

    def __init__(self, details: Optional[str] = None):
        super().__init__(details or self.reply)
        self.details = details

    def to_dict(self) -> dict:
        """Convert to the response body."""
        return {"reply": self.reply}


class EmptyMessageError(RelayException):
    """Raised when the user message is empty after trimming."""
    status_code = 400
    reply = EMPTY_MESSAGE_REPLY


class MessageTooLongError(RelayException):
    """Raised when the trimmed message exceeds the configured limit."""
    status_code = 400
    reply = MESSAGE_TOO_LONG_REPLY

    def __init__(self, length: int, max_length: int):
        super().__init__(details=f"length={length} max={max_length}")
        self.length = length
        self.max_length = max_length


class UpstreamError(RelayException):
    """Raised when the completion API answers with a non-success status."""
    status_code = 500
    reply = UPSTREAM_ERROR_REPLY

    def __init__(self, upstream_status: int, body: str = ""):
        super().__init__(details=f"upstream_status={upstream_status}")
        self.upstream_status = upstream_status
        self.body = body


class RelayServerError(RelayException):
    """Raised when the upstream call fails with an unexpected exception."""
    status_code = 500
    reply = SERVER_ERROR_REPLY
