"""
Schémata auditu / Audit schemas.
Snímky mají pevnou sadu polí pro každou akci; serializují se do JSON.
Snapshots carry a fixed field set per action and serialise to JSON.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


# --- Snímky / Snapshots ---
class StatutesSnapshot(BaseModel):
    """StatutesUpdated: původní i nový stav / original and new state."""
    guidelines: str | None
    guidelines_updated_at: datetime | None


class ClubProposalSnapshot(BaseModel):
    """Nový stav pro ClubUpdated a návrh pro ClubChangeRequest / New or proposed club state."""
    name: str | None
    registration_number: str | None
    address: str | None
    email: str | None
    phone: str | None
    guidelines: str | None
    chairman_username: str | None


class ClubUpdateOriginalSnapshot(BaseModel):
    """ClubUpdated: stav před změnou / state before the update."""
    name: str
    registration_number: str | None
    address: str | None
    email: str | None
    phone: str | None
    guidelines: str | None
    guidelines_updated_at: datetime | None
    chairman_username: str | None


class ChangeRequestOriginalSnapshot(BaseModel):
    """ClubChangeRequest: stav před návrhem (bez adresy) / state before the proposal (no address)."""
    name: str
    registration_number: str | None
    email: str | None
    phone: str | None
    guidelines: str | None
    guidelines_updated_at: datetime | None
    chairman_username: str | None


Snapshot = StatutesSnapshot | ClubProposalSnapshot | ClubUpdateOriginalSnapshot | ChangeRequestOriginalSnapshot


def serialize_snapshot(snapshot: BaseModel) -> str:
    """Snímek do JSON textu / Snapshot to JSON text."""
    return snapshot.model_dump_json()


# --- Čtení / Read ---
class AuditLogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    club_id: int
    user_id: str
    action: str
    changed_at: datetime
    original_data: str | None
    new_data: str | None


class AuditLogPage(BaseModel):
    total: int
    items: list[AuditLogRead]
