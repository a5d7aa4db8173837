"""
API Dependencies.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bencana_api.domain.models.bencana import BencanaGunung
from bencana_api.domain.models.user import User
from bencana_api.domain.repositories.bencana_repository import BencanaRepository
from bencana_api.domain.repositories.user_repository import UserRepository
from bencana_api.infrastructure.database import get_db
from bencana_api.infrastructure.repositories.bencana_repository import SQLAlchemyBencanaRepository
from bencana_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository


def get_bencana_repository(db: AsyncSession = Depends(get_db)) -> BencanaRepository:
    """Get disaster report repository instance."""
    return SQLAlchemyBencanaRepository(db, BencanaGunung)


def get_user_repository(db: AsyncSession = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)
