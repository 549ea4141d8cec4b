"""
Server-side session store backed by the 'sessions' table.
"""

import secrets
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from planner.domain.models.session import UserSession
from planner.infrastructure.database import utcnow


class SQLAlchemySessionStore:
    """Maps opaque session ids to user ids with a fixed expiry."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, user_id: str, expires_at: datetime) -> UserSession:
        user_session = UserSession(
            id=secrets.token_urlsafe(32),
            user_id=user_id,
            expires_at=expires_at,
        )
        self.db.add(user_session)
        self.db.commit()
        return user_session

    def get_active(self, session_id: str) -> Optional[UserSession]:
        # Expiry is compared in SQL; SQLite hands back naive datetimes.
        return (
            self.db.query(UserSession)
            .filter(UserSession.id == session_id, UserSession.expires_at > utcnow())
            .first()
        )

    def delete(self, session_id: str) -> bool:
        deleted = self.db.query(UserSession).filter(UserSession.id == session_id).delete(synchronize_session=False)
        self.db.commit()
        return deleted > 0

    def purge_expired(self) -> int:
        purged = (
            self.db.query(UserSession)
            .filter(UserSession.expires_at <= utcnow())
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return purged
