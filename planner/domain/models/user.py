"""User domain model — maps to the 'users' table."""

import uuid

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from planner.infrastructure.database import Base, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(200), nullable=True)
    last_name = Column(String(200), nullable=True)
    profile_image_url = Column(String(500), nullable=True)
    # Set once, by whichever request wins the default-category provisioning race
    categories_provisioned_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    categories = relationship("Category", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)
    tasks = relationship("Task", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<User {self.email}>"
