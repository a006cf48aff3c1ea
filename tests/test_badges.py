"""
Tests for badge awarding.
"""
from datetime import datetime

from interview_coach.db.models.badge import Badge
from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.models.readiness_index import ReadinessIndex
from interview_coach.db.models.score_breakdown import ScoreBreakdown
from interview_coach.services.badge_service import evaluate_and_award_badges, get_user_badges


def _names(badges):
    return [badge.badge_name for badge in badges]


def test_no_badges_for_new_user(db, test_user):
    assert evaluate_and_award_badges(db, test_user.id) == []
    assert get_user_badges(db, test_user.id) == []


def test_score_badges_awarded_once(db, test_user, interview_session):
    db.add(ScoreBreakdown(session_id=interview_session.id, technical_average=88, communication_average=81))
    db.commit()

    first = evaluate_and_award_badges(db, test_user.id)
    assert _names(first) == ["DSA Master", "Communication Pro"]
    assert all(badge.is_new for badge in first)

    second = evaluate_and_award_badges(db, test_user.id)
    assert _names(second) == ["DSA Master", "Communication Pro"]
    assert not any(badge.is_new for badge in second)
    assert db.query(Badge).count() == 2


def test_readiness_and_consistency_badges(db, test_user):
    db.add(ReadinessIndex(user_id=test_user.id, readiness_score=86))
    for _ in range(10):
        db.add(InterviewSession(
            user_id=test_user.id, role="Dev", difficulty="medium", mode="normal", completed_at=datetime.utcnow()
        ))
    db.commit()

    badges = evaluate_and_award_badges(db, test_user.id)

    assert _names(badges) == ["Interview Ready", "Consistent Performer"]
    stored = get_user_badges(db, test_user.id)
    assert sorted(_names(stored)) == ["Consistent Performer", "Interview Ready"]
    assert stored[0].description


def test_badges_are_never_revoked(db, test_user, interview_session):
    breakdown = ScoreBreakdown(session_id=interview_session.id, technical_average=90)
    db.add(breakdown)
    db.commit()
    evaluate_and_award_badges(db, test_user.id)

    breakdown.technical_average = 10
    db.commit()

    assert _names(evaluate_and_award_badges(db, test_user.id)) == ["DSA Master"]
