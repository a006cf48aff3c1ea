"""
Shared fixtures: in-memory database, users, sessions and a scriptable scoring backend.
"""
import json
import pytest
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from interview_coach.db.base import Base
import interview_coach.db.models  # noqa: F401
from interview_coach.db.models.user import User
from interview_coach.db.models.interview_session import InterviewSession
from interview_coach.llm.provider import LLMProvider, LLMResponse
from interview_coach.llm.router import PROVIDER_FACTORIES, ModelCallConfig


# Setup in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


VALID_EVALUATION = {
    "technical_score": 72,
    "communication_score": 64.5,
    "confidence_score": 70,
    "logic_score": 68,
    "depth_score": 55,
    "difficulty_recommendation": "increase",
    "weak_topics": ["Caching", "  Load   Balancing "],
    "strengths": ["Clear structure"],
    "feedback": "Good overview, but the failure modes were not covered.",
    "ideal_answer": "Describe the cache layer, eviction and invalidation, then the trade-offs.",
    "improvement_tip": "Always name one failure mode and how you would detect it.",
}


@pytest.fixture
def session_factory():
    """Session factory bound to the in-memory test engine."""
    return TestSessionLocal


@pytest.fixture
def valid_evaluation():
    return dict(VALID_EVALUATION)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=test_engine)
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user(db):
    """Create a test user."""
    user = User(full_name="Test User", email="test@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_user(db):
    user = User(full_name="Other User", email="other@example.com")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def interview_session(db, test_user):
    """Create a medium-difficulty session for the test user."""
    session = InterviewSession(
        user_id=test_user.id,
        role="Backend Engineer",
        category="system design",
        difficulty="medium",
        mode="normal",
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


class FakeProvider(LLMProvider):
    """Returns scripted content, or raises the scripted error."""

    name = "fake"

    def __init__(self, content: str = "", error: Optional[Exception] = None):
        self.content = content
        self.error = error
        self.prompts = []

    def complete(self, prompt, model=None, temperature=0.2, max_tokens=None, **kwargs):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return LLMResponse(content=self.content, tokens_in=120, tokens_out=80, model=model or "fake-model")


@pytest.fixture
def fake_backend(monkeypatch):
    """
    Register a "fake" provider and return (provider, config).

    Set provider.content / provider.error in the test to script the backend.
    """
    provider = FakeProvider(content=json.dumps(VALID_EVALUATION))
    monkeypatch.setitem(PROVIDER_FACTORIES, "fake", lambda call_config: provider)
    return provider, ModelCallConfig(provider="fake")
