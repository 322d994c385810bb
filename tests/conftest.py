"""Shared fixtures: settings, a fake Groq upstream and a test client."""
import json
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from dalil.api.main import create_app
from dalil.core.config import DEFAULT_MODEL, Settings, get_settings
from dalil.stats.tracker import StatsTracker

COMPLETIONS_PATH = "/openai/v1/chat/completions"


def completion_body(content: Optional[str], total_tokens: Optional[int] = 42) -> Dict[str, Any]:
    """A Groq chat completion payload with one choice."""
    body: Dict[str, Any] = {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": DEFAULT_MODEL,
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }
    if total_tokens is not None:
        body["usage"] = {
            "prompt_tokens": 10,
            "completion_tokens": total_tokens - 10,
            "total_tokens": total_tokens,
        }
    return body


class FakeGroq:
    """
    Stand-in for the Groq HTTP API, plugged in through httpx.MockTransport.

    `respond` decides what the next requests return; every request body
    is kept in `requests` for assertions.
    """

    def __init__(self):
        self.requests: List[Dict[str, Any]] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=completion_body("رد تجريبي"))
        )

    def respond(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self._responder = responder

    def reply_with(self, content: Optional[str], total_tokens: Optional[int] = 42) -> None:
        self.respond(lambda request: httpx.Response(200, json=completion_body(content, total_tokens)))

    def fail_with(self, status_code: int, body: str) -> None:
        self.respond(lambda request: httpx.Response(status_code, text=body))

    def handler(self, request: httpx.Request) -> httpx.Response:
        assert request.url.path == COMPLETIONS_PATH
        self.requests.append(
            {
                "headers": dict(request.headers),
                "json": json.loads(request.content.decode("utf-8")),
            }
        )
        return self._responder(request)

    @property
    def call_count(self) -> int:
        return len(self.requests)


@pytest.fixture(autouse=True)
def groq_env(monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "test-key")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return replace(
        get_settings(),
        public_dir=str(tmp_path / "no-public-dir"),
        enable_audit_logging=True,
    )


@pytest.fixture
def fake_groq() -> FakeGroq:
    return FakeGroq()


@pytest.fixture
def stats() -> StatsTracker:
    return StatsTracker()


@pytest.fixture
def app(settings, fake_groq, stats):
    http_client = httpx.Client(transport=httpx.MockTransport(fake_groq.handler))
    return create_app(settings, http_client=http_client, stats=stats)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
