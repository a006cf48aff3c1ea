"""
Tests for the HTTP API.
"""
import pytest
from fastapi.testclient import TestClient

from interview_coach.db import session as db_session
from interview_coach.db.session import get_db
from interview_coach.llm.mock_provider import MockProvider
from interview_coach.llm.router import PROVIDER_FACTORIES
from interview_coach.core import config
from interview_coach.main import app


@pytest.fixture
def client(db, session_factory, monkeypatch):
    """TestClient bound to the in-memory test database, scored by the mock provider."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    monkeypatch.setitem(PROVIDER_FACTORIES, config.LLM_PROVIDER, lambda call_config: MockProvider())
    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _start(client, user_id, **body):
    payload = {"user_id": user_id, "role": "Backend Engineer", "category": "system design"}
    payload.update(body)
    return client.post("/sessions", json=payload)


def test_health(client, session_factory, monkeypatch):
    monkeypatch.setattr(db_session, "SessionLocal", session_factory)
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["database"] == "connected"


def test_start_session(client, test_user):
    response = _start(client, test_user.id, difficulty="hard", mode="company", company_preset="meta")
    assert response.status_code == 201
    body = response.json()
    assert body["difficulty"] == "hard"
    assert body["company_preset"] == "meta"
    assert body["completed_at"] is None


def test_start_session_unknown_user(client):
    assert _start(client, 12345).status_code == 404


def test_full_interview_flow(client, test_user):
    session_id = _start(client, test_user.id).json()["id"]

    answer = client.post(f"/sessions/{session_id}/responses", json={
        "user_id": test_user.id,
        "question_text": "How would you design a rate limiter?",
        "user_answer": "A token bucket per client stored in Redis.",
    })
    assert answer.status_code == 200
    result = answer.json()
    assert result["success"] is True
    assert result["llm_output_valid"] is True
    assert result["session_averages"]["response_count"] == 1
    assert result["next_difficulty"] in ("easy", "medium", "hard")
    assert result["top_weak_skills"] == ["edge cases", "error handling"]

    completed = client.post(f"/sessions/{session_id}/complete", json={"user_id": test_user.id})
    assert completed.status_code == 200
    assert completed.json()["success"] is True
    assert set(completed.json()["roadmap"]) == {"week1", "week2", "week3", "week4"}

    readiness = client.get(f"/users/{test_user.id}/readiness")
    assert readiness.status_code == 200
    assert readiness.json()["readiness_score"] == completed.json()["readiness_score"]

    roadmap = client.get(f"/users/{test_user.id}/roadmap")
    assert roadmap.status_code == 200
    assert roadmap.json() == completed.json()["roadmap"]

    history = client.get(f"/users/{test_user.id}/roadmaps")
    assert len(history.json()) == 1

    weak = client.get(f"/users/{test_user.id}/weak-skills")
    assert [row["skill_name"] for row in weak.json()] == ["edge cases", "error handling"]

    dashboard = client.get(f"/users/{test_user.id}/dashboard")
    assert dashboard.status_code == 200
    assert dashboard.json()["total_sessions"] == 1


def test_answer_to_foreign_session_is_404(client, interview_session, other_user):
    response = client.post(f"/sessions/{interview_session.id}/responses", json={
        "user_id": other_user.id,
        "question_text": "Q?",
        "user_answer": "A.",
    })
    assert response.status_code == 404


def test_adaptive_step_endpoint(client, interview_session):
    response = client.post(f"/sessions/{interview_session.id}/adaptive-step", json={
        "user_id": interview_session.user_id,
        "current_difficulty": "medium",
        "evaluation_recommendation": "decrease",
        "weak_topics": [],
    })
    assert response.status_code == 200
    assert response.json() == {"next_difficulty": "easy", "next_question": None}


def test_weak_skills_endpoint(client, test_user):
    response = client.post(f"/users/{test_user.id}/weak-skills", json={"weak_topics": ["Graphs", " graphs "]})
    assert response.status_code == 200
    assert response.json()["top_weak_skills"] == ["graphs"]


def test_roadmap_not_generated_yet(client, test_user):
    assert client.get(f"/users/{test_user.id}/roadmap").status_code == 404
    assert client.post(f"/users/{test_user.id}/roadmap").status_code == 201


def test_unknown_user_routes(client):
    for path in ("readiness", "weak-skills", "roadmap", "roadmaps", "badges", "dashboard"):
        assert client.get(f"/users/999/{path}").status_code == 404


def test_recompute_readiness_and_badges(client, test_user):
    response = client.post(f"/users/{test_user.id}/readiness")
    assert response.status_code == 200
    assert response.json() == {"user_id": test_user.id, "readiness_score": 0.0}
    assert client.get(f"/users/{test_user.id}/badges").json() == []
