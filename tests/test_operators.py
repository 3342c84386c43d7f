from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from backend.config import Settings
from backend.main import create_app


def ask(client, question):
    response = client.post("/api/faq", json={"question": question})
    assert response.status_code == 200


def test_queries_are_logged_newest_first(client, operator_headers):
    ask(client, "internship duration")
    ask(client, "how to bake a cake")

    response = client.get("/operators/queries", headers=operator_headers)

    assert response.status_code == 200
    rows = response.json()
    assert [row["question"] for row in rows] == ["how to bake a cake", "internship duration"]
    assert rows[0]["outcome"] == "unmatched"
    assert rows[0]["category"] is None
    assert rows[1]["outcome"] == "matched"
    assert rows[1]["category"] == "Internship"
    assert rows[1]["score"] <= 0.4
    datetime.fromisoformat(rows[0]["created_at"])


def test_query_limit(client, operator_headers):
    for _ in range(3):
        ask(client, "internship duration")

    response = client.get("/operators/queries", params={"limit": 2}, headers=operator_headers)

    assert len(response.json()) == 2
    assert client.get("/operators/queries", params={"limit": 0}, headers=operator_headers).status_code == 422


def test_unanswered_grouped_by_text(client, operator_headers):
    ask(client, "How to bake a cake")
    ask(client, "how to bake a cake ")
    ask(client, "Where do I park?")
    ask(client, "internship duration")
    ask(client, "   ")

    response = client.get("/operators/unanswered", headers=operator_headers)

    assert response.status_code == 200
    rows = response.json()
    assert [(row["question"], row["count"]) for row in rows] == [
        ("how to bake a cake", 2),
        ("where do i park?", 1),
    ]


@pytest.mark.parametrize("headers", [{}, {"X-Operator-Token": "wrong"}])
@pytest.mark.parametrize("path", ["/operators/queries", "/operators/unanswered"])
def test_operator_routes_require_token(client, headers, path):
    response = client.get(path, headers=headers)

    assert response.status_code == 401


def test_operator_routes_closed_without_configured_token(knowledge_base):
    settings = Settings(database_url="sqlite://", operator_history_token=None)
    app = create_app(settings=settings, knowledge_base=knowledge_base)

    with TestClient(app) as client:
        response = client.get("/operators/queries", headers={"X-Operator-Token": ""})

    assert response.status_code == 401


def test_query_log_can_be_disabled(knowledge_base, operator_headers):
    settings = Settings(database_url="sqlite://", operator_history_token="operator-secret", query_log_enabled=False)
    app = create_app(settings=settings, knowledge_base=knowledge_base)

    with TestClient(app) as client:
        ask(client, "internship duration")
        response = client.get("/operators/queries", headers=operator_headers)

    assert response.json() == []
