"""Routy spolků / Club API routes."""

import io

from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.database import get_db
from spolky.models.user import User
from spolky.schemas.audit import AuditLogRead
from spolky.schemas.club import ClubCreate, ClubDetail, ClubRead, ClubUpdate, StatutesRead, StatutesUpdate
from spolky.schemas.user import ActingUser
from spolky.services.club_service import ClubService
from spolky.services.export_service import ExportService
from spolky.api.deps import ALL_ROLES, AUDIT_READER_ROLES, EDITOR_ROLES, acting_user, require_roles

router = APIRouter()


@router.get("/", response_model=list[ClubRead])
async def list_clubs(
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*ALL_ROLES)),
):
    """Seznam všech spolků / List all clubs."""
    return await ClubService(db).list_clubs()


@router.get("/{club_id}", response_model=ClubRead)
async def get_club(
    club_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*ALL_ROLES)),
):
    """Detail spolku / Get club by ID."""
    return await ClubService(db).get_club(club_id)


@router.post("/", response_model=ClubDetail, status_code=status.HTTP_201_CREATED)
async def create_club(
    data: ClubCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    actor: ActingUser = Depends(acting_user(*EDITOR_ROLES)),
):
    """Založit spolek / Create a club."""
    club = await ClubService(db).create_club(actor, data)
    response.headers["Location"] = f"/api/clubs/{club.id}"
    return club


@router.put("/{club_id}", status_code=status.HTTP_200_OK)
async def update_club(
    club_id: int,
    data: ClubUpdate,
    db: AsyncSession = Depends(get_db),
    actor: ActingUser = Depends(acting_user(*EDITOR_ROLES)),
):
    """Změnit údaje spolku, zapíše audit ClubUpdated / Update a club, audited as ClubUpdated."""
    await ClubService(db).update_club(club_id, actor, data)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{club_id}/change-request", response_model=AuditLogRead, status_code=status.HTTP_201_CREATED)
async def create_change_request(
    club_id: int,
    data: ClubUpdate,
    response: Response,
    db: AsyncSession = Depends(get_db),
    actor: ActingUser = Depends(acting_user(*EDITOR_ROLES)),
):
    """Návrh změny údajů spolku (jen audit) / Club change-request (audit only)."""
    entry = await ClubService(db).create_change_request(club_id, actor, data)
    response.headers["Location"] = f"/api/audit/statutes?clubId={club_id}"
    return entry


@router.post("/{club_id}/statutes", status_code=status.HTTP_204_NO_CONTENT)
async def update_statutes(
    club_id: int,
    data: StatutesUpdate,
    db: AsyncSession = Depends(get_db),
    actor: ActingUser = Depends(acting_user(*EDITOR_ROLES)),
):
    """Nahrát stanovy spolku / Upload club statutes."""
    await ClubService(db).update_statutes(club_id, actor, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{club_id}/statutes", response_model=StatutesRead)
async def get_statutes(
    club_id: int,
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*ALL_ROLES)),
):
    """Stanovy a datum poslední aktualizace / Statutes and their last update."""
    return await ClubService(db).get_club(club_id)


@router.get("/{club_id}/export")
async def export_club(
    club_id: int,
    format: str = Query("json", pattern="^(json|csv|xlsx)$"),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*AUDIT_READER_ROLES)),
):
    """Export údajů spolku / Export club data as JSON, CSV or XLSX."""
    club = await ClubService(db).get_club(club_id)
    content, media_type, filename = ExportService.export_club(club, format)
    return StreamingResponse(
        io.BytesIO(content),
        media_type=media_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
