"""
API Dependencies — repositories and the session store, one per request.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from planner.infrastructure.database import get_db
from planner.domain.repositories.category_repository import CategoryRepository
from planner.domain.repositories.task_repository import TaskRepository
from planner.infrastructure.repositories.category_repository import SQLAlchemyCategoryRepository
from planner.infrastructure.repositories.task_repository import SQLAlchemyTaskRepository
from planner.infrastructure.session_store import SQLAlchemySessionStore


def get_category_repository(db: Session = Depends(get_db)) -> CategoryRepository:
    """Get category repository instance."""
    return SQLAlchemyCategoryRepository(db)


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    """Get task repository instance."""
    return SQLAlchemyTaskRepository(db)


def get_session_store(db: Session = Depends(get_db)) -> SQLAlchemySessionStore:
    """Get session store instance."""
    return SQLAlchemySessionStore(db)
