"""Repository tests against the in-memory store, below the HTTP layer."""

import pytest
from sqlalchemy import func, select

from bencana_api.core.exceptions import StoreFailure
from bencana_api.domain.models.bencana import BencanaGunung
from bencana_api.domain.models.user import User
from bencana_api.domain.schemas.bencana import BencanaCreate
from bencana_api.infrastructure.repositories.bencana_repository import SQLAlchemyBencanaRepository
from bencana_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from conftest import MERAPI

HUGE_ID = 10**23


async def test_duplicate_email_insert_is_rejected_by_unique_constraint(app):
    """A registration that slips past the email check still cannot create a second row."""
    user = {"name": "Budi", "email": "budi@example.com", "password_hash": "x"}
    async with app.state.sessionmaker() as session:
        repo = SQLAlchemyUserRepository(session, User)
        await repo.create(user)

        with pytest.raises(StoreFailure) as excinfo:
            await repo.create({**user, "name": "Budi Kedua"})
        assert excinfo.value.status_code == 500
        assert "UNIQUE" in excinfo.value.message

        # the failed insert was rolled back; the session is usable again
        count = (await session.execute(select(func.count(User.id)))).scalar_one()
    assert count == 1


async def test_out_of_range_ids_never_reach_the_store(app):
    async with app.state.sessionmaker() as session:
        repo = SQLAlchemyBencanaRepository(session, BencanaGunung)
        await repo.create(BencanaCreate(**MERAPI))

        assert await repo.get_by_id(HUGE_ID) is None
        assert await repo.get_by_id(-HUGE_ID) is None
        assert await repo.replace(HUGE_ID, BencanaCreate(**MERAPI)) == 0
        assert await repo.delete(HUGE_ID) == 0
        assert len(await repo.list()) == 1


async def test_replace_and_delete_report_matched_rows(app):
    async with app.state.sessionmaker() as session:
        repo = SQLAlchemyBencanaRepository(session, BencanaGunung)
        report = await repo.create(BencanaCreate(**MERAPI))

        assert await repo.replace(report.id, BencanaCreate(**{**MERAPI, "status_aktivitas": "Awas"})) == 1
        assert await repo.delete(report.id) == 1
        assert await repo.delete(report.id) == 0
