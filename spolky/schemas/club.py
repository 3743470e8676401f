"""Schémata spolku / Club schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr


class ClubBase(BaseModel):
    # Název kontroluje služba (400) / Name is checked by the service (400)
    name: str | None = None
    registration_number: str | None = None
    address: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    guidelines: str | None = None


class ClubCreate(ClubBase):
    pass


class ClubUpdate(ClubBase):
    """Přímá změna i návrh změny / Used for direct updates and change-requests."""
    chairman_username: str | None = None


class ClubRead(BaseModel):
    """Projekce pro výpis / Listing projection."""
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    registration_number: str | None
    address: str | None
    email: str | None
    phone: str | None
    created_at: datetime | None
    guidelines_updated_at: datetime | None
    chairman_username: str | None


class ClubDetail(ClubRead):
    """Plná projekce po vytvoření / Full projection returned on creation."""
    guidelines: str | None
    chairman_id: str | None


class StatutesUpdate(BaseModel):
    guidelines: str | None = None
    updated_at: datetime | None = None


class StatutesRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    guidelines: str | None
    guidelines_updated_at: datetime | None
