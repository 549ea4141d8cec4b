"""
Scoped Repository Interface.
Every operation takes the owner's id; rows owned by anyone else are invisible.
"""

from typing import Any, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class ScopedRepository(Protocol[T]):
    """Interface for owner-scoped CRUD operations."""

    def list_for_owner(self, owner_id: str) -> List[T]:
        """List the owner's entities, newest first."""
        ...

    def get_owned(self, id: str, owner_id: str) -> Optional[T]:
        """Get an entity by ID if, and only if, it belongs to the owner."""
        ...

    def create(self, owner_id: str, obj_in: Any) -> T:
        """Create a new entity for the owner."""
        ...

    def update_owned(self, id: str, owner_id: str, obj_in: Any) -> Optional[T]:
        """Apply a partial update; None when absent or owned by someone else."""
        ...

    def delete_owned(self, id: str, owner_id: str) -> bool:
        """Delete an owned entity; returns whether a row was removed."""
        ...
