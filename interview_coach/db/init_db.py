import logging

from interview_coach.db.session import engine
from interview_coach.db.base import Base
import interview_coach.db.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)


def init_db(bind=None):
    """Create all tables that do not exist yet (development / tests)."""
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ensured")
