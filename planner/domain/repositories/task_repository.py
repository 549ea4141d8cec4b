"""
Task Repository Interface.
"""

from datetime import date
from typing import List, Optional

from planner.domain.repositories.base import ScopedRepository
from planner.domain.models.task import Task


class TaskRepository(ScopedRepository[Task]):
    """Interface for Task-specific operations."""

    def list_for_date(self, owner_id: str, day: date) -> List[Task]:
        """List the owner's tasks for one calendar date, newest first."""
        ...

    def toggle_completed(self, id: str, owner_id: str) -> Optional[Task]:
        """Atomically flip the completed flag of an owned task."""
        ...
