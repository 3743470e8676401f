"""Routy auditu / Audit log API routes."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.database import get_db
from spolky.models.user import Role, User
from spolky.schemas.audit import AuditLogPage, AuditLogRead
from spolky.services.audit_query import AuditQueryService
from spolky.api.deps import AUDIT_READER_ROLES, require_roles

router = APIRouter()


@router.get("/statutes", response_model=list[AuditLogRead])
async def list_statutes_audit(
    club_id: int | None = Query(default=None, alias="clubId"),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(*AUDIT_READER_ROLES)),
):
    """Audit změn stanov a návrhů změn / Statutes updates and change-requests, newest first."""
    return await AuditQueryService(db).list_audit(club_id)


@router.get("/", response_model=AuditLogPage)
async def list_audit_logs(
    club_id: int | None = Query(default=None),
    action: str | None = Query(default=None),
    limit: int = Query(default=100, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    db: AsyncSession = Depends(get_db),
    user: User = Depends(require_roles(Role.ADMIN)),
):
    """Všechny auditní záznamy (jen admin) / Every audit entry (admin only)."""
    total, items = await AuditQueryService(db).list_all(club_id=club_id, action=action, limit=limit, offset=offset)
    return AuditLogPage(total=total, items=[AuditLogRead.model_validate(i) for i in items])
