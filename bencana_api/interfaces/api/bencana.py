"""Disaster report API routes — list, get, create, update, delete, stats."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from bencana_api.application.services.bencana_service import (
    create_report,
    delete_report,
    get_report,
    get_report_stats,
    list_reports,
    update_report,
)
from bencana_api.core.exceptions import EntityNotFoundException
from bencana_api.core.validation import ValidationRoute, parse_integer
from bencana_api.domain.repositories.bencana_repository import BencanaRepository
from bencana_api.domain.schemas.bencana import (
    BencanaCreate,
    BencanaId,
    BencanaRead,
    BencanaStats,
    BencanaUpdate,
)
from bencana_api.domain.schemas.common import MessageResponse
from bencana_api.interfaces.deps import get_bencana_repository

router = APIRouter(prefix="/api/bencana", tags=["Bencana"], route_class=ValidationRoute)


@router.get("", response_model=List[BencanaRead])
async def list_bencana(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    repo: BencanaRepository = Depends(get_bencana_repository),
):
    reports = await list_reports(repo, page=page, limit=limit)
    return [BencanaRead.model_validate(r) for r in reports]


@router.get("/stats", response_model=BencanaStats)
async def bencana_stats(repo: BencanaRepository = Depends(get_bencana_repository)):
    """Report counts per activity status."""
    return await get_report_stats(repo)


@router.get("/{id}", response_model=BencanaRead)
async def get_bencana(id: str, repo: BencanaRepository = Depends(get_bencana_repository)):
    report_id = parse_integer(id)
    # A non-numeric id can never match a row
    if report_id is None:
        raise EntityNotFoundException("Data not found")
    report = await get_report(repo, report_id)
    return BencanaRead.model_validate(report)


@router.post("", response_model=BencanaRead, status_code=status.HTTP_201_CREATED)
async def create_bencana(
    body: BencanaCreate,
    repo: BencanaRepository = Depends(get_bencana_repository),
):
    report = await create_report(repo, body)
    return BencanaRead.model_validate(report)


@router.put("/{id}", response_model=BencanaRead)
async def update_bencana(
    id: BencanaId,
    body: BencanaUpdate,
    repo: BencanaRepository = Depends(get_bencana_repository),
):
    return await update_report(repo, id, body)


@router.delete("/{id}", response_model=MessageResponse)
async def delete_bencana(id: BencanaId, repo: BencanaRepository = Depends(get_bencana_repository)):
    await delete_report(repo, id)
    return MessageResponse(message="Data deleted successfully")
