"""
SQLAlchemy Implementation of Task Repository.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy import not_
from sqlalchemy.orm import Session

from planner.domain.models.task import Task
from planner.domain.repositories.task_repository import TaskRepository
from planner.infrastructure.database import utcnow
from planner.infrastructure.repositories.base_repository import SQLAlchemyScopedRepository


class SQLAlchemyTaskRepository(SQLAlchemyScopedRepository[Task], TaskRepository):
    """Task repository implementation using SQLAlchemy."""

    def __init__(self, db: Session):
        super().__init__(db, Task)

    def list_for_date(self, owner_id: str, day: date) -> List[Task]:
        return (
            self._scoped(owner_id)
            .filter(Task.date == day)
            .order_by(Task.created_at.desc())
            .all()
        )

    def toggle_completed(self, id: str, owner_id: str) -> Optional[Task]:
        # NOT is evaluated by the database under the row lock, so concurrent
        # toggles serialize instead of overwriting each other's reads.
        flipped = (
            self._scoped(owner_id)
            .filter(Task.id == id)
            .update(
                {Task.completed: not_(Task.completed), Task.updated_at: utcnow()},
                synchronize_session=False,
            )
        )
        self.db.commit()
        if not flipped:
            return None
        return self._scoped(owner_id).filter(Task.id == id).populate_existing().first()
