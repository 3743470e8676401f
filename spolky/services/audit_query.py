"""
Dotazy na audit / Audit queries.
Nejnovější první, shodné časy podle pořadí vložení.
Newest first; equal timestamps fall back to insertion order.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.models.audit import AuditAction, AuditLog

# Výpis stanov zahrnuje jen tyto akce / The statutes listing covers only these actions
GOVERNANCE_ACTIONS = (AuditAction.CLUB_CHANGE_REQUEST.value, AuditAction.STATUTES_UPDATED.value)

_ORDERING = (AuditLog.changed_at.desc(), AuditLog.id.asc())


class AuditQueryService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_audit(self, club_id: int | None = None) -> list[AuditLog]:
        """Návrhy změn a změny stanov / Change-requests and statutes updates."""
        query = select(AuditLog).where(AuditLog.action.in_(GOVERNANCE_ACTIONS))
        if club_id is not None:
            query = query.where(AuditLog.club_id == club_id)
        result = await self.session.execute(query.order_by(*_ORDERING))
        return list(result.scalars().all())

    async def list_all(
        self,
        club_id: int | None = None,
        action: str | None = None,
        limit: int = 100,
        offset: int = 0,
    ) -> tuple[int, list[AuditLog]]:
        """Všechny akce se stránkováním / Every action kind, paginated."""
        query = select(AuditLog)
        count_query = select(func.count(AuditLog.id))

        if club_id is not None:
            query = query.where(AuditLog.club_id == club_id)
            count_query = count_query.where(AuditLog.club_id == club_id)
        if action:
            query = query.where(AuditLog.action == action)
            count_query = count_query.where(AuditLog.action == action)

        total = await self.session.scalar(count_query) or 0
        result = await self.session.execute(query.order_by(*_ORDERING).offset(offset).limit(limit))
        return total, list(result.scalars().all())
