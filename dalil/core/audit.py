"""
Audit Middleware - One log line per relayed request.

Each line carries the method, path, status, duration and client
address, plus an outcome tag:
- ok       : 2xx/3xx
- rejected : 4xx, e.g. an empty or too long chat message
- failed   : 5xx, e.g. the completion API was unreachable

Message bodies are never logged here.
"""
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from dalil.core.logging_config import get_logger

logger = get_logger(__name__)

QUIET_PATHS = frozenset({"/health"})


def classify_outcome(status_code: int) -> str:
    """Map a response status to the audit outcome tag."""
    if status_code >= 500:
        return "failed"
    if status_code >= 400:
        return "rejected"
    return "ok"


class AuditMiddleware(BaseHTTPMiddleware):
    """
    Logs every request with its outcome and adds an X-Response-Time header.

    Health probes are logged at DEBUG so they do not drown the chat traffic.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        client_ip = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                f"REQUEST {request.method} {request.url.path} outcome=failed "
                f"duration={time.perf_counter() - started:.3f}s "
                f"client={client_ip} error={e}"
            )
            raise

        duration = time.perf_counter() - started
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        outcome = classify_outcome(response.status_code)
        if request.url.path in QUIET_PATHS:
            log_fn = logger.debug
        elif outcome == "failed":
            log_fn = logger.error
        elif outcome == "rejected":
            log_fn = logger.warning
        else:
            log_fn = logger.info

        log_fn(
            f"REQUEST {request.method} {request.url.path} outcome={outcome} "
            f"status={response.status_code} duration={duration:.3f}s "
            f"client={client_ip}"
        )
        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Adds nosniff, frame-deny and referrer-policy headers to every response."""

    HEADERS = {
        "X-Content-Type-Options": "nosniff",
        "X-Frame-Options": "DENY",
        "Referrer-Policy": "strict-origin-when-cross-origin",
    }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        response = await call_next(request)
        for name, value in self.HEADERS.items():
            response.headers[name] = value
        return response
