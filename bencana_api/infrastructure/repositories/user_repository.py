"""
SQLAlchemy Implementation of the User Repository.
"""

from typing import Optional

from sqlalchemy import select

from bencana_api.domain.models.user import User
from bencana_api.domain.repositories.user_repository import UserRepository
from bencana_api.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    async def get_by_email(self, email: str) -> Optional[User]:
        async with self._store_call("get_by_email"):
            result = await self.db.execute(select(User).where(User.email == email))
            return result.scalars().first()
