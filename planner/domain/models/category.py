"""Category domain model — user-owned task labels."""

import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from planner.infrastructure.database import Base, utcnow


class Category(Base):
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    emoji = Column(String(16), nullable=False)
    color = Column(String(100), nullable=False)  # CSS class tokens, e.g. "bg-blue-100 text-blue-700"
    created_at = Column(DateTime(timezone=True), default=utcnow, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="categories")

    def __repr__(self):
        return f"<Category {self.emoji} {self.name}>"
