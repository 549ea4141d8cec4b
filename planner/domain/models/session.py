"""Server-side login sessions — maps to the 'sessions' table."""

from sqlalchemy import Column, String, DateTime, ForeignKey

from planner.infrastructure.database import Base, utcnow


class UserSession(Base):
    __tablename__ = "sessions"

    id = Column(String(64), primary_key=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)

    def __repr__(self):
        return f"<UserSession user={self.user_id} expires={self.expires_at}>"
