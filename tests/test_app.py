"""Tests for health, middleware and static assets."""
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from dalil import __version__
from dalil.api.main import create_app
from dalil.core.audit import classify_outcome


def test_health(client, settings, fake_groq):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    assert body["status"] == "healthy"
    assert body["model"] == settings.llm_model
    assert body["version"] == __version__
    assert fake_groq.call_count == 0


def test_security_and_timing_headers(client):
    response = client.get("/api/stats")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "X-Response-Time" in response.headers


def test_root_without_public_dir(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["health"] == "/health"


def test_public_dir_is_served(settings, tmp_path):
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<h1>دليل العافية</h1>", encoding="utf-8")

    app = create_app(replace(settings, public_dir=str(public)))
    with TestClient(app) as client:
        response = client.get("/")
        stats = client.get("/api/stats")

    assert response.status_code == 200
    assert "دليل العافية" in response.text
    assert stats.status_code == 200
    assert stats.json()["totalRequests"] == 0


def test_cors_restricted_to_allowed_origins(settings):
    app = create_app(replace(settings, allowed_origins=("https://app.example",)))
    with TestClient(app) as client:
        allowed = client.get("/health", headers={"Origin": "https://app.example"})
        blocked = client.get("/health", headers={"Origin": "https://evil.example"})

    assert allowed.headers["access-control-allow-origin"] == "https://app.example"
    assert "access-control-allow-origin" not in blocked.headers


def test_cors_open_when_no_origins_configured(client):
    response = client.get("/health", headers={"Origin": "https://any.example"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_open_cors_warns_in_production(settings, caplog):
    with caplog.at_level("INFO", logger="dalil.api.main"):
        create_app(replace(settings, app_env="production"))

    [record] = [r for r in caplog.records if "CORS configured for all origins" in r.message]
    assert record.levelname == "WARNING"


def test_open_cors_is_informational_in_development(settings, caplog):
    with caplog.at_level("INFO", logger="dalil.api.main"):
        create_app(replace(settings, app_env="development"))

    [record] = [r for r in caplog.records if "CORS configured for all origins" in r.message]
    assert record.levelname == "INFO"


@pytest.mark.parametrize(
    "status_code, outcome",
    [(200, "ok"), (304, "ok"), (400, "rejected"), (404, "rejected"), (500, "failed"), (503, "failed")],
)
def test_classify_outcome(status_code, outcome):
    assert classify_outcome(status_code) == outcome


def test_audit_tags_rejected_and_failed_chat_requests(client, fake_groq, caplog):
    with caplog.at_level("INFO", logger="dalil.core.audit"):
        client.post("/api/chat", json={"message": "   "})
        fake_groq.fail_with(503, "down")
        client.post("/api/chat", json={"message": "سؤال"})
        fake_groq.reply_with("جواب")
        client.post("/api/chat", json={"message": "سؤال"})

    lines = [r for r in caplog.records if r.name == "dalil.core.audit"]
    assert [(r.levelname, "outcome=" in r.message) for r in lines] == [
        ("WARNING", True),
        ("ERROR", True),
        ("INFO", True),
    ]
    assert "outcome=rejected status=400" in lines[0].message
    assert "outcome=failed status=500" in lines[1].message
    assert "outcome=ok status=200" in lines[2].message
    assert all("سؤال" not in r.message for r in lines)
