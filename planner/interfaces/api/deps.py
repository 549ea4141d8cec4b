"""FastAPI dependencies for session cookie auth."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.dependencies.models import Dependant
from fastapi.security import APIKeyCookie
from fastapi.routing import APIRoute
from sqlalchemy.orm import Session

from planner.config import get_settings
from planner.infrastructure.database import get_db
from planner.application.services.auth_service import resolve_session
from planner.core.exceptions import UnauthorizedException
from planner.domain.models.user import User
from planner.infrastructure.session_store import SQLAlchemySessionStore
from planner.interfaces.deps import get_session_store

settings = get_settings()

session_cookie = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)


def get_current_user(
    token: Optional[str] = Depends(session_cookie),
    db: Session = Depends(get_db),
    store: SQLAlchemySessionStore = Depends(get_session_store),
) -> User:
    """Resolve the session cookie to a user, or respond 401."""
    return resolve_session(db, store, token)


def _depends_on_current_user(dependant: Dependant) -> bool:
    return any(
        sub.call is get_current_user or _depends_on_current_user(sub)
        for sub in dependant.dependencies
    )


def route_requires_session(route) -> bool:
    """True when the route resolves ``get_current_user`` anywhere in its dependency tree."""
    return isinstance(route, APIRoute) and _depends_on_current_user(route.dependant)


def has_valid_session(request: Request) -> bool:
    """Check the request's session cookie outside of dependency injection.

    Used by the validation error handler, which runs before the route's
    dependencies would have been solved.
    """
    provider = request.app.dependency_overrides.get(get_db, get_db)
    db_gen = provider()
    db = next(db_gen)
    try:
        resolve_session(db, SQLAlchemySessionStore(db), request.cookies.get(settings.SESSION_COOKIE_NAME))
        return True
    except UnauthorizedException:
        return False
    finally:
        db_gen.close()
