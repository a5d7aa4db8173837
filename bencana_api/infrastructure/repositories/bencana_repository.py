"""
SQLAlchemy Implementation of the Disaster Report Repository.
"""

from typing import Any

from sqlalchemy import case, delete, func, select, update

from bencana_api.domain.models.bencana import BencanaGunung
from bencana_api.domain.repositories.bencana_repository import BencanaRepository
from bencana_api.domain.schemas.bencana import BencanaStats
from bencana_api.infrastructure.repositories.base_repository import SQLAlchemyRepository, storable_id


def _count_status(value: str):
    return func.coalesce(
        func.sum(case((BencanaGunung.status_aktivitas == value, 1), else_=0)), 0
    )


class SQLAlchemyBencanaRepository(SQLAlchemyRepository[BencanaGunung], BencanaRepository):
    """Disaster report repository implementation using SQLAlchemy."""

    async def replace(self, id: int, obj_in: Any) -> int:
        if not storable_id(id):
            return 0
        values = obj_in.model_dump() if hasattr(obj_in, "model_dump") else dict(obj_in)
        statement = (
            update(BencanaGunung)
            .where(BencanaGunung.id == id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        async with self._store_call("replace"):
            result = await self.db.execute(statement)
            await self.db.commit()
        return result.rowcount

    async def delete(self, id: int) -> int:
        if not storable_id(id):
            return 0
        statement = (
            delete(BencanaGunung)
            .where(BencanaGunung.id == id)
            .execution_options(synchronize_session=False)
        )
        async with self._store_call("delete"):
            result = await self.db.execute(statement)
            await self.db.commit()
        return result.rowcount

    async def get_stats(self) -> BencanaStats:
        statement = select(
            func.count(BencanaGunung.id).label("total"),
            _count_status("Normal").label("normal"),
            _count_status("Waspada").label("waspada"),
            _count_status("Siaga").label("siaga"),
            _count_status("Awas").label("awas"),
        )
        async with self._store_call("get_stats"):
            row = (await self.db.execute(statement)).one()
        return BencanaStats(**{key: int(value or 0) for key, value in row._mapping.items()})
