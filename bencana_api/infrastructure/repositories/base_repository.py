"""
SQLAlchemy implementation of the Base Repository.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, List, Optional, Type, TypeVar

import structlog
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bencana_api.core.exceptions import StoreFailure
from bencana_api.domain.repositories.base import BaseRepository
from bencana_api.infrastructure.database import Base

ModelType = TypeVar("ModelType", bound=Base)

logger = structlog.get_logger(__name__)

# Integer primary keys are at most signed 64-bit; drivers reject larger values outright
ID_MIN, ID_MAX = -(2**63), 2**63 - 1


def storable_id(id: int) -> bool:
    return ID_MIN <= id <= ID_MAX


class SQLAlchemyRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic async repository implementation for SQLAlchemy models."""

    def __init__(self, db: AsyncSession, model: Type[ModelType]):
        self.db = db
        self.model = model

    @asynccontextmanager
    async def _store_call(self, operation: str) -> AsyncIterator[None]:
        """Run one statement; database errors surface as StoreFailure with the driver's text."""
        try:
            yield
        except SQLAlchemyError as exc:
            await self.db.rollback()
            message = str(getattr(exc, "orig", None) or exc)
            logger.error(
                "Store operation failed",
                table=self.model.__tablename__,
                operation=operation,
                error=message,
            )
            raise StoreFailure(message) from exc

    async def get_by_id(self, id: int) -> Optional[ModelType]:
        if not storable_id(id):
            return None
        async with self._store_call("get_by_id"):
            return await self.db.get(self.model, id)

    async def list(self, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        query = select(self.model)
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        async with self._store_call("list"):
            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def create(self, obj_in: Any) -> ModelType:
        if hasattr(obj_in, "model_dump"):
            obj_data = obj_in.model_dump()
        else:
            obj_data = dict(obj_in)

        db_obj = self.model(**obj_data)
        async with self._store_call("create"):
            self.db.add(db_obj)
            await self.db.commit()
            await self.db.refresh(db_obj)
        return db_obj
