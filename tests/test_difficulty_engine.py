"""
Tests for the difficulty state machine, adaptive step and question selection.
"""
import random

import pytest

from interview_coach.core.constants import DIFFICULTY_LEVELS, DIFFICULTY_RECOMMENDATIONS
from interview_coach.db.models.question import Question
from interview_coach.db.models.question_bank import QuestionBankItem
from interview_coach.services.adaptive_service import process_adaptive_step
from interview_coach.services.difficulty_engine import next_difficulty
from interview_coach.services.question_selector import select_next_question


@pytest.mark.parametrize("current,recommendation,expected", [
    ("easy", "increase", "medium"),
    ("medium", "increase", "hard"),
    ("hard", "increase", "hard"),
    ("hard", "decrease", "medium"),
    ("medium", "decrease", "easy"),
    ("easy", "decrease", "easy"),
])
def test_transitions(current, recommendation, expected):
    assert next_difficulty(current, recommendation) == expected


def test_at_most_one_step_and_maintain_is_identity():
    for current in DIFFICULTY_LEVELS:
        assert next_difficulty(current, "maintain") == current
        for recommendation in DIFFICULTY_RECOMMENDATIONS:
            step = DIFFICULTY_LEVELS.index(next_difficulty(current, recommendation)) - DIFFICULTY_LEVELS.index(current)
            assert abs(step) <= 1


def test_unknown_inputs():
    assert next_difficulty("legendary", "maintain") == "medium"
    assert next_difficulty("legendary", "increase") == "hard"
    assert next_difficulty("easy", "skip") == "easy"
    assert next_difficulty(None, None) == "medium"


@pytest.fixture
def question_bank(db):
    items = [
        QuestionBankItem(text="Explain Big-O of binary search.", difficulty="hard", category="algorithms"),
        QuestionBankItem(text="Design a cache eviction policy.", difficulty="hard", category="caching"),
        QuestionBankItem(text="What is an index?", difficulty="medium", category="databases"),
    ]
    db.add_all(items)
    db.commit()
    return items


def test_selector_prefers_weak_topic_category(db, question_bank):
    chosen = select_next_question(db, "hard", weak_topics=["Caching"], rng=random.Random(1))
    assert chosen.text == "Design a cache eviction policy."


def test_selector_excludes_asked_questions(db, question_bank):
    chosen = select_next_question(
        db, "hard", weak_topics=["caching"], exclude_texts=["Design a cache eviction policy."]
    )
    assert chosen.text == "Explain Big-O of binary search."


def test_selector_returns_none_when_exhausted(db, question_bank):
    assert select_next_question(db, "easy") is None


def test_adaptive_step_persists_difficulty(db, interview_session, question_bank):
    db.add(Question(session_id=interview_session.id, text="Design a cache eviction policy.", difficulty="medium"))
    db.commit()

    result = process_adaptive_step(db, interview_session.id, interview_session.user_id, "medium", "increase", ["caching"])

    assert result.next_difficulty == "hard"
    assert result.next_question.text == "Explain Big-O of binary search."
    db.refresh(interview_session)
    assert interview_session.difficulty == "hard"


def test_adaptive_step_ownership_mismatch(db, interview_session, other_user):
    result = process_adaptive_step(db, interview_session.id, other_user.id, "medium", "increase", [])
    assert result.next_difficulty == "medium"
    assert result.next_question is None
    db.refresh(interview_session)
    assert interview_session.difficulty == "medium"


def test_adaptive_step_selector_failure_keeps_difficulty(db, interview_session):
    def broken_selector(db, session, difficulty, weak_topics):
        raise RuntimeError("bank offline")

    result = process_adaptive_step(
        db, interview_session.id, interview_session.user_id, "medium", "decrease", [], selector=broken_selector
    )
    assert result.next_difficulty == "easy"
    assert result.next_question is None
