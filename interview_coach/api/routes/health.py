"""
Health check endpoint for deployment monitoring.
"""
from fastapi import APIRouter
from datetime import datetime
from sqlalchemy import text

from interview_coach.core.config import LLM_PROVIDER
from interview_coach.db import session as db_session

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_check():
    """
    Returns 200 with "healthy" when the database answers, "degraded" otherwise.
    """
    status = "healthy"

    try:
        db = db_session.SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
        db_status = "connected"
    except Exception as e:
        db_status = f"error: {str(e)}"
        status = "degraded"

    return {
        "status": status,
        "timestamp": datetime.utcnow().isoformat(),
        "database": db_status,
        "scoring_provider": LLM_PROVIDER,
        "version": "1.0.0",
    }
