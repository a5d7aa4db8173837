"""Disaster report service — business logic for report CRUD and stats."""

from typing import List, Optional

import structlog

from bencana_api.core.exceptions import EntityNotFoundException
from bencana_api.domain.models.bencana import BencanaGunung
from bencana_api.domain.repositories.bencana_repository import BencanaRepository
from bencana_api.domain.schemas.bencana import (
    BencanaCreate,
    BencanaRead,
    BencanaStats,
    BencanaUpdate,
)

logger = structlog.get_logger(__name__)


async def list_reports(
    repo: BencanaRepository, page: Optional[int] = None, limit: Optional[int] = None
) -> List[BencanaGunung]:
    """All reports in store order; paged only when page or limit is given."""
    if page is None and limit is None:
        return await repo.list()

    limit = limit or 10
    page = page or 1
    return await repo.list(skip=(page - 1) * limit, limit=limit)


async def get_report(repo: BencanaRepository, id: int) -> BencanaGunung:
    report = await repo.get_by_id(id)
    if report is None:
        raise EntityNotFoundException("Data not found")
    return report


async def create_report(repo: BencanaRepository, body: BencanaCreate) -> BencanaGunung:
    report = await repo.create(body)
    logger.info("Report created", id=report.id, nama_gunung=report.nama_gunung)
    return report


async def update_report(repo: BencanaRepository, id: int, body: BencanaUpdate) -> BencanaRead:
    """Replace all fields of a report and echo the submitted data.

    A missing id is not reported: the response echoes the payload whether
    or not a row was matched.
    """
    matched = await repo.replace(id, body)
    if not matched:
        logger.warning("Update matched no report", id=id)
    else:
        logger.info("Report updated", id=id)
    return BencanaRead(id=id, **body.model_dump())


async def delete_report(repo: BencanaRepository, id: int) -> None:
    """Delete a report. Succeeds whether or not the row existed."""
    deleted = await repo.delete(id)
    if not deleted:
        logger.warning("Delete matched no report", id=id)
    else:
        logger.info("Report deleted", id=id)


async def get_report_stats(repo: BencanaRepository) -> BencanaStats:
    return await repo.get_stats()
