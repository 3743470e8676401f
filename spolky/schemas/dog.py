"""Schémata psa / Dog schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class DogCreate(BaseModel):
    name: str | None = None
    breed: str | None = None
    gender: str | None = None
    date_of_birth: datetime | None = None
    owners_name: str | None = None
    owners_phone: str | None = None


class DogRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    breed: str | None
    gender: str | None
    date_of_birth: datetime | None
    owners_name: str | None
    owners_phone: str | None
