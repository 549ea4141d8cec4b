"""Import every model so Base.metadata knows about all tables."""

from planner.domain.models.user import User
from planner.domain.models.category import Category
from planner.domain.models.task import Task
from planner.domain.models.session import UserSession

__all__ = ["User", "Category", "Task", "UserSession"]
