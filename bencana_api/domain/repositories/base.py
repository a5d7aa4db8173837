"""
Base Repository Interface.
Defines the standard contract for data access operations.
"""

from typing import TypeVar, List, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic async CRUD operations."""

    async def get_by_id(self, id: int) -> Optional[T]:
        """Get a single entity by ID."""
        ...

    async def list(self, skip: int = 0, limit: Optional[int] = None) -> List[T]:
        """List entities, optionally paginated."""
        ...

    async def create(self, obj_in: Any) -> T:
        """Create a new entity."""
        ...
