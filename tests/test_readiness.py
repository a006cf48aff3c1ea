"""
Tests for readiness calculation and the readiness index.
"""
from datetime import datetime, timedelta

from sqlalchemy.exc import SQLAlchemyError

from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.models.readiness_index import ReadinessIndex
from interview_coach.db.models.score_breakdown import ScoreBreakdown
from interview_coach.db.models.weak_skill_memory import WeakSkillMemory
from interview_coach.services.readiness_calculator import ReadinessParams, calculate_readiness
from interview_coach.services.readiness_service import get_readiness_score, update_readiness_index


def test_reference_example():
    params = ReadinessParams(overall_score=80, weak_skill_count=20, current_difficulty="hard", total_sessions=12)
    assert calculate_readiness(params) == 46.00


def test_bounds():
    assert calculate_readiness(ReadinessParams(overall_score=0, weak_skill_count=50)) == 0
    top = ReadinessParams(overall_score=100, current_difficulty="hard", total_sessions=30)
    assert calculate_readiness(top) == 78.0
    assert calculate_readiness(ReadinessParams(overall_score=500, current_difficulty="hard", total_sessions=10)) <= 100


def test_monotone_in_score_and_weak_count():
    scores = [calculate_readiness(ReadinessParams(overall_score=s, current_difficulty="medium")) for s in range(0, 101, 10)]
    assert scores == sorted(scores)
    penalties = [calculate_readiness(ReadinessParams(overall_score=70, weak_skill_count=w)) for w in range(0, 20)]
    assert penalties == sorted(penalties, reverse=True)


def test_bad_inputs_are_coerced():
    params = ReadinessParams(
        overall_score=float("nan"),
        weak_skill_count=-3,
        current_difficulty="impossible",
        total_sessions="many",
    )
    assert calculate_readiness(params) == 0
    assert calculate_readiness(ReadinessParams(overall_score=50, current_difficulty="impossible")) == 30.0


def test_consistency_tiers():
    assert calculate_readiness(ReadinessParams(overall_score=50, total_sessions=4)) == 30.0
    assert calculate_readiness(ReadinessParams(overall_score=50, total_sessions=5)) == 35.0
    assert calculate_readiness(ReadinessParams(overall_score=50, total_sessions=10)) == 38.0


def test_no_sessions_stores_zero(db, test_user):
    assert update_readiness_index(db, test_user.id) == 0
    index = db.query(ReadinessIndex).filter(ReadinessIndex.user_id == test_user.id).one()
    assert index.readiness_score == 0


def test_uses_latest_session_and_overwrites(db, test_user):
    old = InterviewSession(
        user_id=test_user.id, role="Dev", difficulty="easy", mode="normal",
        started_at=datetime.utcnow() - timedelta(days=2), completed_at=datetime.utcnow() - timedelta(days=2),
    )
    latest = InterviewSession(
        user_id=test_user.id, role="Dev", difficulty="hard", mode="normal",
        started_at=datetime.utcnow(), completed_at=datetime.utcnow(),
    )
    db.add_all([old, latest])
    db.commit()
    db.add_all([
        ScoreBreakdown(session_id=old.id, overall_score=20, response_count=1),
        ScoreBreakdown(session_id=latest.id, overall_score=80, response_count=1),
        WeakSkillMemory(user_id=test_user.id, skill_name="graphs", weakness_count=3),
        WeakSkillMemory(user_id=test_user.id, skill_name="tries", weakness_count=1),
    ])
    db.commit()

    # 80 * 0.6 - 2 * 1.5 + 10 (hard) + 0 (2 sessions)
    assert update_readiness_index(db, test_user.id) == 55.0
    assert update_readiness_index(db, test_user.id) == 55.0
    assert db.query(ReadinessIndex).count() == 1
    assert get_readiness_score(db, test_user.id) == 55.0


def test_failure_returns_previous_score(db, test_user, monkeypatch):
    db.add(ReadinessIndex(user_id=test_user.id, readiness_score=42.5))
    db.commit()

    def failing_commit():
        raise SQLAlchemyError("locked")

    monkeypatch.setattr(db, "commit", failing_commit)
    score = update_readiness_index(db, test_user.id)
    monkeypatch.undo()

    assert score == 42.5
    assert get_readiness_score(db, test_user.id) == 42.5


def test_get_readiness_without_row(db, test_user):
    assert get_readiness_score(db, test_user.id) == 0
