"""
SQLAlchemy Implementation of Category Repository.
"""

from typing import List

import structlog
from sqlalchemy.orm import Session

from planner.domain.models.category import Category
from planner.domain.models.task import Task
from planner.domain.models.user import User
from planner.domain.repositories.category_repository import CategoryRepository
from planner.infrastructure.database import utcnow
from planner.infrastructure.repositories.base_repository import SQLAlchemyScopedRepository

logger = structlog.get_logger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "work", "emoji": "💼", "color": "bg-blue-100 text-blue-700"},
    {"name": "personal", "emoji": "🏠", "color": "bg-green-100 text-green-700"},
    {"name": "health", "emoji": "💪", "color": "bg-purple-100 text-purple-700"},
    {"name": "urgent", "emoji": "🔥", "color": "bg-red-100 text-red-700"},
]


class SQLAlchemyCategoryRepository(SQLAlchemyScopedRepository[Category], CategoryRepository):
    """Category repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, Category)

    def delete_owned(self, id: str, owner_id: str) -> bool:
        """Delete a category and detach it from the owner's tasks in one transaction."""
        category = self.get_owned(id, owner_id)
        if category is None:
            return False

        try:
            detached = (
                self.db.query(Task)
                .filter(Task.category_id == id, Task.user_id == owner_id)
                .update({Task.category_id: None, Task.updated_at: utcnow()}, synchronize_session=False)
            )
            self.db.query(Category).filter(Category.id == id).delete(synchronize_session=False)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Category deleted", category_id=id, user_id=owner_id, tasks_detached=detached)
        return True

    def provision_defaults(self, owner_id: str) -> List[Category]:
        """Create the starter categories exactly once per user.

        The conditional update on ``users.categories_provisioned_at`` is the
        guard: of any number of concurrent callers only one matches the row.
        """
        try:
            claimed = (
                self.db.query(User)
                .filter(User.id == owner_id, User.categories_provisioned_at.is_(None))
                .update({User.categories_provisioned_at: utcnow()}, synchronize_session=False)
            )
            if not claimed:
                self.db.rollback()
                return []

            created = [Category(user_id=owner_id, **fields) for fields in DEFAULT_CATEGORIES]
            self.db.add_all(created)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        logger.info("Default categories provisioned", user_id=owner_id, count=len(created))
        return created
