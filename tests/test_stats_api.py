"""Tests for GET /api/stats."""
import pytest


def test_stats_start_at_zero(client):
    response = client.get("/api/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalRequests": 0,
        "totalUserMessages": 0,
        "totalBotMessages": 0,
        "totalTokens": 0,
        "lastMessages": [],
    }


@pytest.mark.parametrize("n", [1, 3, 10, 12])
def test_stats_after_n_calls(client, fake_groq, n):
    for i in range(n):
        fake_groq.reply_with(f"جواب {i}", total_tokens=20)
        client.post("/api/chat", json={"message": f"سؤال {i}"})

    body = client.get("/api/stats").json()

    assert body["totalRequests"] == n
    assert body["totalUserMessages"] == n
    assert body["totalBotMessages"] == n
    assert body["totalTokens"] == 20 * n

    last = body["lastMessages"]
    assert len(last) == min(n, 10)
    assert [m["question"] for m in last] == [f"سؤال {i}" for i in reversed(range(n))][:10]
    assert [m["answer"] for m in last] == [f"جواب {i}" for i in reversed(range(n))][:10]
    assert set(last[0]) == {"time", "question", "answer"}


def test_failed_calls_do_not_show_in_stats(client, fake_groq):
    fake_groq.reply_with("جواب")
    client.post("/api/chat", json={"message": "سؤال"})
    fake_groq.fail_with(500, "boom")
    client.post("/api/chat", json={"message": "سؤال ثان"})
    client.post("/api/chat", json={"message": "   "})

    body = client.get("/api/stats").json()

    assert body["totalRequests"] == 1
    assert [m["question"] for m in body["lastMessages"]] == ["سؤال"]


def test_stats_endpoint_does_not_mutate(client, stats):
    client.get("/api/stats")
    client.get("/api/stats")

    assert stats.total_requests == 0
    assert stats.history == []
