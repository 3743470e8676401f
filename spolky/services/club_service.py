"""
Služba změn spolku / Club mutation service.
Načtení, validace, snímek před změnou, změna, snímek po změně, audit.
Load, validate, snapshot before, mutate, snapshot after, audit.

Každá změna řídících údajů spolku (název, IČO, adresa, kontakty, stanovy,
předseda) zanechá v audit_logs právě jeden záznam. Návrh změny (change-request)
spolek nemění, pouze zapíše záznam.

Every mutation of club governance data leaves exactly one audit_logs entry.
A change-request never touches the club row; it only appends an entry.
"""

import logging

from pydantic import BaseModel
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.config import settings
from spolky.errors import AuditWriteError, NotFoundError, ValidationError
from spolky.models.audit import AuditAction, AuditLog
from spolky.models.club import Club
from spolky.models.user import User
from spolky.schemas.audit import (
    ChangeRequestOriginalSnapshot,
    ClubProposalSnapshot,
    ClubUpdateOriginalSnapshot,
    StatutesSnapshot,
)
from spolky.schemas.club import ClubCreate, ClubUpdate, StatutesUpdate
from spolky.schemas.user import ActingUser
from spolky.services.audit_recorder import AuditRecorder
from spolky.utils.clock import as_naive_utc, utcnow

logger = logging.getLogger("spolky.clubs")

NAME_MAX_LENGTH = 200


def _validate_name(name: str | None) -> str:
    if name is None or not name.strip() or len(name) > NAME_MAX_LENGTH:
        raise ValidationError(f"Name is required and must be <= {NAME_MAX_LENGTH} characters.")
    return name


def _is_name_collision(exc: IntegrityError) -> bool:
    # SQLite: "UNIQUE constraint failed: clubs.name", PostgreSQL: "clubs_name_key"
    message = str(exc.orig)
    return "clubs.name" in message or "clubs_name_key" in message


def _proposal_snapshot(data: ClubUpdate) -> ClubProposalSnapshot:
    return ClubProposalSnapshot(
        name=data.name,
        registration_number=data.registration_number,
        address=data.address,
        email=data.email,
        phone=data.phone,
        guidelines=data.guidelines,
        chairman_username=data.chairman_username,
    )


class ClubService:
    """Orchestrace změn spolku v jedné jednotce práce / Club mutations within one unit of work."""

    def __init__(
        self,
        session: AsyncSession,
        recorder: AuditRecorder | None = None,
        atomic_audit: bool | None = None,
    ):
        self.session = session
        self.recorder = recorder or AuditRecorder(session)
        self.atomic_audit = settings.AUDIT_ATOMIC if atomic_audit is None else atomic_audit

    # --- Čtení / Reads ---

    async def list_clubs(self) -> list[Club]:
        result = await self.session.execute(select(Club).order_by(Club.id))
        return list(result.scalars().all())

    async def get_club(self, club_id: int) -> Club:
        """Spolek i s předsedou / Club with its chairman loaded."""
        club = await self.session.get(Club, club_id)
        if club is None:
            raise NotFoundError("Club not found")
        return club

    async def _name_taken(self, name: str, exclude_id: int | None = None) -> bool:
        query = select(func.count(Club.id)).where(Club.name == name)
        if exclude_id is not None:
            query = query.where(Club.id != exclude_id)
        return bool(await self.session.scalar(query))

    # --- Změny / Mutations ---

    async def create_club(self, actor: ActingUser, data: ClubCreate) -> Club:
        """Založit spolek, bez auditu / Create a club; creation is not audited."""
        name = _validate_name(data.name)
        if await self._name_taken(name):
            raise ValidationError("Club with this name already exists.")

        club = Club(
            name=name,
            registration_number=data.registration_number,
            address=data.address,
            email=data.email,
            phone=data.phone,
            guidelines=data.guidelines,
            created_at=utcnow(),
            chairman_id=actor.id,
        )
        self.session.add(club)
        await self._flush()
        await self.session.refresh(club, ["chairman"])
        logger.info("Club %s created by %s", club.id, actor.id)
        return club

    async def update_club(self, club_id: int, actor: ActingUser, data: ClubUpdate) -> Club:
        """Přímá změna údajů spolku s auditem ClubUpdated / Direct update audited as ClubUpdated."""
        club = await self.get_club(club_id)
        name = _validate_name(data.name)

        # Validace před jakoukoli změnou / Validate before any mutation
        new_chairman: User | None = None
        if data.chairman_username:
            result = await self.session.execute(select(User).where(User.username == data.chairman_username))
            new_chairman = result.scalar_one_or_none()
            if new_chairman is None:
                raise ValidationError("Chairman not found")
        if name != club.name and await self._name_taken(name, exclude_id=club.id):
            raise ValidationError("Club with this name already exists.")

        original = ClubUpdateOriginalSnapshot(
            name=club.name,
            registration_number=club.registration_number,
            address=club.address,
            email=club.email,
            phone=club.phone,
            guidelines=club.guidelines,
            guidelines_updated_at=club.guidelines_updated_at,
            chairman_username=club.chairman_username,
        )

        if data.guidelines != club.guidelines:
            club.guidelines_updated_at = utcnow()
        club.name = name
        club.registration_number = data.registration_number
        club.address = data.address
        club.email = data.email
        club.phone = data.phone
        club.guidelines = data.guidelines
        if new_chairman is not None:
            club.chairman_id = new_chairman.id
            club.chairman = new_chairman

        new = _proposal_snapshot(data)
        await self._flush_mutation()
        await self._audit(actor, club.id, AuditAction.CLUB_UPDATED, original, new)
        return club

    async def create_change_request(self, club_id: int, actor: ActingUser, proposed: ClubUpdate) -> AuditLog:
        """Zapsat návrh změny bez úpravy spolku / Record a proposal without touching the club."""
        club = await self.get_club(club_id)

        original = ChangeRequestOriginalSnapshot(
            name=club.name,
            registration_number=club.registration_number,
            email=club.email,
            phone=club.phone,
            guidelines=club.guidelines,
            guidelines_updated_at=club.guidelines_updated_at,
            chairman_username=club.chairman_username,
        )
        new = _proposal_snapshot(proposed)

        # Čistý zápis auditu, proto vždy v jedné transakci /
        # Pure audit append, so it is always part of the request's transaction
        return await self.recorder.record(actor.id, club.id, AuditAction.CLUB_CHANGE_REQUEST, original, new)

    async def update_statutes(self, club_id: int, actor: ActingUser, data: StatutesUpdate) -> Club:
        """Nahrát stanovy / Upload statutes (guidelines)."""
        club = await self.get_club(club_id)

        original = StatutesSnapshot(
            guidelines=club.guidelines,
            guidelines_updated_at=club.guidelines_updated_at,
        )

        club.guidelines = data.guidelines
        club.guidelines_updated_at = as_naive_utc(data.updated_at) or utcnow()

        new = StatutesSnapshot(
            guidelines=club.guidelines,
            guidelines_updated_at=club.guidelines_updated_at,
        )
        await self._flush_mutation()
        await self._audit(actor, club.id, AuditAction.STATUTES_UPDATED, original, new)
        return club

    # --- Interní / Internals ---

    async def _flush(self) -> None:
        """Zapsat změny, porušení omezení je chyba vstupu / Flush; a constraint violation is a bad request."""
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            if _is_name_collision(exc):
                raise ValidationError("Club with this name already exists.") from exc
            raise ValidationError("Constraint violation") from exc

    async def _flush_mutation(self) -> None:
        """Zapsat změnu spolku; chyba úložiště zruší celou jednotku práce /
        Write the club change; a storage failure aborts the whole unit of work."""
        await self._flush()
        if not self.atomic_audit:
            await self.session.commit()

    async def _audit(
        self,
        actor: ActingUser,
        club_id: int,
        action: AuditAction,
        original: BaseModel,
        new: BaseModel,
    ) -> AuditLog | None:
        if self.atomic_audit:
            return await self.recorder.record(actor.id, club_id, action, original, new)

        # Režim bez vazby: změna už je potvrzená, chyba auditu se jen zaloguje /
        # Decoupled mode: the mutation is already committed, an audit failure is only logged
        try:
            entry = await self.recorder.record(actor.id, club_id, action, original, new)
        except AuditWriteError:
            logger.exception("Audit %s for club %s by %s was not written", action.value, club_id, actor.id)
            await self.session.rollback()
            return None
        await self.session.commit()
        return entry
