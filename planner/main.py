"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from planner.config import get_session_secret, get_settings
from planner.infrastructure.database import engine, Base
from planner.core.logging import configure_logging
from planner.core.middleware import setup_middleware
from planner.core.exceptions import register_exception_handlers

# Import all models so SQLAlchemy knows about them
import planner.domain.models  # noqa: F401

from planner.interfaces.api.auth import router as auth_router
from planner.interfaces.api.categories import router as categories_router
from planner.interfaces.api.tasks import router as tasks_router

settings = get_settings()

configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Planner API...", env=settings.ENVIRONMENT)

    if not settings.SESSION_SECRET:
        # Raises in production; elsewhere sessions will not survive a restart
        get_session_secret()
        logger.warning("SESSION_SECRET not set, using an ephemeral secret")

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    if settings.SCHEDULER_ENABLED:
        from planner.scheduler.jobs import start_scheduler
        start_scheduler()

    yield

    if settings.SCHEDULER_ENABLED:
        from planner.scheduler.jobs import stop_scheduler
        stop_scheduler()
    logger.info("Planner API stopped")


app = FastAPI(
    title="Planner",
    description="Personal task calendar API — categories, dated tasks, session auth",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)
register_exception_handlers(app)

# CORS is added last so it wraps every other middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(categories_router)
app.include_router(tasks_router)


@app.get("/")
def root():
    return {
        "name": "Planner",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
