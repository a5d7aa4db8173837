"""
Disaster Report Repository Interface.
"""

from typing import Any

from bencana_api.domain.repositories.base import BaseRepository
from bencana_api.domain.models.bencana import BencanaGunung
from bencana_api.domain.schemas.bencana import BencanaStats


class BencanaRepository(BaseRepository[BencanaGunung]):
    """Interface for disaster-report specific operations."""

    async def replace(self, id: int, obj_in: Any) -> int:
        """Overwrite all mutable fields of a row. Returns rows matched."""
        ...

    async def delete(self, id: int) -> int:
        """Delete a row by ID. Returns rows deleted."""
        ...

    async def get_stats(self) -> BencanaStats:
        """Count reports per activity status."""
        ...
