from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ✅ Import All API Routes
from interview_coach.api.routes import health, sessions, progress

# ✅ Import Core Services
from interview_coach.core import config
from interview_coach.core.logging_config import setup_logging, sanitize_log_data
from interview_coach.db.init_db import init_db
from interview_coach.db.migrate import run_migrations

logger = logging.getLogger(__name__)


# ============================================
# ✅ STARTUP: LOGGING + SCHEMA
# ============================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(config.LOG_LEVEL)
    logger.info(
        "Starting Interview Coach engine: %s",
        sanitize_log_data({
            "database_url": config.DATABASE_URL,
            "llm_provider": config.LLM_PROVIDER,
            "openai_api_key": config.OPENAI_API_KEY,
            "run_migrations": config.RUN_MIGRATIONS,
        }),
    )
    if config.RUN_MIGRATIONS:
        run_migrations()
    else:
        init_db()
    yield


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Interview Coach Engine", lifespan=lifespan)

# ✅ CORS: only the configured frontends
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Authorization", "Content-Type"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(health.router)
app.include_router(sessions.router)
app.include_router(progress.router)


@app.get("/")
def root():
    return {"status": "Interview Coach engine running"}
