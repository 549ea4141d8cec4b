"""
Category Repository Interface.
"""

from typing import List

from planner.domain.repositories.base import ScopedRepository
from planner.domain.models.category import Category


class CategoryRepository(ScopedRepository[Category]):
    """Interface for Category-specific operations."""

    def provision_defaults(self, owner_id: str) -> List[Category]:
        """Create the starter categories once per user; returns [] if already done."""
        ...
