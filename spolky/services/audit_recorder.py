"""
Zapisovač auditu / Audit recorder.
Serializuje snímky před a po změně a připojí jeden záznam do audit_logs.
Serialises before/after snapshots and appends exactly one audit_logs row.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.errors import AuditWriteError
from spolky.models.audit import AuditAction, AuditLog
from spolky.schemas.audit import serialize_snapshot
from spolky.utils.clock import utcnow

logger = logging.getLogger("spolky.audit")


class AuditRecorder:
    """Připojuje auditní záznamy, nikdy je nemění / Appends audit entries, never updates them."""

    def __init__(self, session: AsyncSession, clock: Callable[[], datetime] = utcnow):
        self.session = session
        self.clock = clock

    async def record(
        self,
        acting_user_id: str,
        club_id: int,
        action: AuditAction,
        original: BaseModel,
        new: BaseModel,
    ) -> AuditLog:
        """Uložit jeden záznam / Persist one entry.

        changed_at je vždy čas serveru / changed_at always comes from the server clock.
        Raises AuditWriteError when the store rejects the insert.
        """
        entry = AuditLog(
            user_id=acting_user_id,
            club_id=club_id,
            action=action.value,
            changed_at=self.clock(),
            original_data=serialize_snapshot(original),
            new_data=serialize_snapshot(new),
        )
        self.session.add(entry)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise AuditWriteError(f"Audit log write failed for club {club_id}") from exc

        logger.info("Audit %s club=%s user=%s entry=%s", action.value, club_id, acting_user_id, entry.id)
        return entry
