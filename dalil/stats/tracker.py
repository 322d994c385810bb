"""
Stats Tracker - In-memory usage counters and recent exchanges.

One tracker instance lives for the lifetime of the process and is
shared by the chat and stats handlers. Nothing is persisted: the
counters start from zero on every restart.
"""
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Deque, Dict, List, Optional

from dalil.core.logging_config import get_logger

logger = get_logger(__name__)

MAX_HISTORY = 50
RECENT_LIMIT = 10


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


@dataclass(frozen=True)
class Exchange:
    """
    One question/answer pair kept in the history.

    Attributes:
        question: The trimmed user message
        answer: The reply returned to the caller
        time: ISO-8601 UTC timestamp of the exchange
    """
    question: str
    answer: str
    time: str = field(default_factory=_utc_now_iso)

    def to_dict(self) -> Dict[str, str]:
        return {"time": self.time, "question": self.question, "answer": self.answer}


class StatsTracker:
    """
    Thread-safe usage statistics.

    FastAPI runs sync handlers on a thread pool, so every mutation and
    every snapshot happens under one lock.

    Example:
        >>> tracker = StatsTracker()
        >>> tracker.record_exchange("ما فوائد المشي؟", "...", total_tokens=120)
        >>> tracker.snapshot()["totalRequests"]
        1
    """

    def __init__(self, max_history: int = MAX_HISTORY):
        self.max_history = max_history
        self.total_requests = 0
        self.total_user_messages = 0
        self.total_bot_messages = 0
        self.total_tokens = 0
        self._messages: Deque[Exchange] = deque(maxlen=max_history)
        self._lock = threading.RLock()

    def record_exchange(
        self,
        question: str,
        answer: str,
        total_tokens: Optional[int] = None
    ) -> Exchange:
        """
        Record one successful chat exchange.

        The three message counters always move together. Tokens are
        added only when the upstream reported usage.

        Args:
            question: The trimmed user message
            answer: The reply returned to the caller
            total_tokens: usage.total_tokens from the upstream, if any

        Returns:
            The appended Exchange
        """
        exchange = Exchange(question=question, answer=answer)

        with self._lock:
            self.total_requests += 1
            self.total_user_messages += 1
            self.total_bot_messages += 1
            if total_tokens is not None:
                self.total_tokens += int(total_tokens)
            # deque(maxlen) drops the oldest entry once full
            self._messages.append(exchange)

            logger.debug(
                f"Exchange recorded: total_requests={self.total_requests}, "
                f"total_tokens={self.total_tokens}, history={len(self._messages)}"
            )

        return exchange

    @property
    def history(self) -> List[Exchange]:
        """All retained exchanges, oldest first."""
        with self._lock:
            return list(self._messages)

    def recent(self, limit: int = RECENT_LIMIT) -> List[Exchange]:
        """The last `limit` exchanges, most recent first."""
        with self._lock:
            items = list(self._messages)
        return list(reversed(items[-limit:])) if limit > 0 else []

    def snapshot(self, limit: int = RECENT_LIMIT) -> Dict[str, Any]:
        """
        Read-only view used by the stats endpoint.

        Returns:
            Counters plus `lastMessages` (at most `limit`, newest first)
        """
        with self._lock:
            return {
                "totalRequests": self.total_requests,
                "totalUserMessages": self.total_user_messages,
                "totalBotMessages": self.total_bot_messages,
                "totalTokens": self.total_tokens,
                "lastMessages": [e.to_dict() for e in self.recent(limit)],
            }
