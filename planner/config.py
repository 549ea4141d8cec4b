"""Planner Backend — Configuration via pydantic-settings."""

import secrets
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./planner.db"

    # Sessions
    SESSION_SECRET: Optional[str] = None
    SESSION_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "planner_session"
    SESSION_TTL_DAYS: int = 7
    SESSION_PURGE_INTERVAL_MINUTES: int = 60

    # Passwords
    BCRYPT_ROUNDS: int = 12
    PASSWORD_MIN_LENGTH: int = 6

    # Frontend (CORS)
    FRONTEND_ORIGIN: str = "http://localhost:5173"

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    SCHEDULER_ENABLED: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()


@lru_cache
def get_session_secret() -> str:
    """Secret used to sign session cookies.

    Outside production a random per-process secret is generated when none is
    configured; every session cookie becomes invalid when the process restarts.
    """
    settings = get_settings()
    if settings.SESSION_SECRET:
        return settings.SESSION_SECRET
    if settings.is_production:
        raise RuntimeError("SESSION_SECRET must be set in production")
    return "dev-secret-" + secrets.token_urlsafe(32)
