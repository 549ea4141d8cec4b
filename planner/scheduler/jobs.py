"""APScheduler jobs — periodic purge of expired login sessions."""

import structlog
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from planner.config import get_settings
from planner.infrastructure.database import SessionLocal
from planner.infrastructure.session_store import SQLAlchemySessionStore

settings = get_settings()
logger = structlog.get_logger(__name__)

scheduler = AsyncIOScheduler(timezone="UTC")


def purge_expired_sessions_job() -> int:
    """Delete session rows whose fixed lifetime has ended."""
    db = SessionLocal()
    try:
        purged = SQLAlchemySessionStore(db).purge_expired()
        logger.info("Expired sessions purged", count=purged)
        return purged
    except Exception:
        logger.exception("Session purge job failed")
        db.rollback()
        return 0
    finally:
        db.close()


def start_scheduler():
    """Start the APScheduler with the session purge job."""
    scheduler.add_job(
        purge_expired_sessions_job,
        trigger=IntervalTrigger(minutes=settings.SESSION_PURGE_INTERVAL_MINUTES),
        id="purge_expired_sessions",
        name=f"Session purge (every {settings.SESSION_PURGE_INTERVAL_MINUTES} mins)",
        replace_existing=True,
    )
    scheduler.start()
    logger.info("Scheduler started", purge_interval_minutes=settings.SESSION_PURGE_INTERVAL_MINUTES)


def stop_scheduler():
    """Stop the scheduler gracefully."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
