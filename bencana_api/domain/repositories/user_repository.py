"""
User Repository Interface.
"""

from typing import Optional

from bencana_api.domain.repositories.base import BaseRepository
from bencana_api.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for credential lookups."""

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by login email."""
        ...
