"""
Next-question selection from the shared question bank.
"""
import logging
import random
from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.db.models.question import Question
from interview_coach.db.models.question_bank import QuestionBankItem
from interview_coach.schemas.progress import SelectedQuestion
from interview_coach.services.weak_skill_memory import normalize_topic, normalize_topics

logger = logging.getLogger(__name__)


def select_next_question(
    db: Session,
    difficulty: str,
    weak_topics: Optional[Iterable[str]] = None,
    exclude_texts: Optional[Iterable[str]] = None,
    rng: Optional[random.Random] = None,
) -> Optional[SelectedQuestion]:
    """
    Pick a bank question at the given difficulty.

    Questions whose category matches a weak topic are preferred; texts already
    asked are skipped. Returns None when nothing is left.
    """
    excluded = {text.strip() for text in (exclude_texts or []) if text}
    candidates: List[QuestionBankItem] = [
        item for item in db.query(QuestionBankItem).filter(QuestionBankItem.difficulty == difficulty).all()
        if item.text.strip() not in excluded
    ]
    if not candidates:
        logger.info(f"No unused bank questions at difficulty={difficulty}")
        return None

    focus = set(normalize_topics(weak_topics))
    preferred = [item for item in candidates if normalize_topic(item.category) in focus]

    chosen = (rng or random).choice(preferred or candidates)
    return SelectedQuestion.model_validate(chosen)


def default_question_selector(
    db: Session,
    session: InterviewSession,
    difficulty: str,
    weak_topics: List[str],
) -> Optional[SelectedQuestion]:
    """Selector used by the adaptive step: excludes questions already asked in the session."""
    asked = [text for (text,) in db.query(Question.text).filter(Question.session_id == session.id).all()]
    return select_next_question(db, difficulty, weak_topics, exclude_texts=asked)
