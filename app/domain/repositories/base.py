"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations."""

    def list_all(self) -> List[T]:
        """List every entity, ordered by id."""
        ...

    def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    def exists_by_id(self, id: int) -> bool:
        ...

    def save(self, obj: T) -> T:
        """Insert or update an entity; returns it with its id populated."""
        ...

    def delete(self, obj: T) -> None:
        ...

    def delete_by_id(self, id: int) -> None:
        ...
