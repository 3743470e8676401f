"""Schémata výstav a výsledků / Exhibition and result schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class ExhibitionCreate(BaseModel):
    name: str | None = None
    date: datetime
    place: str | None = None
    club_id: int
    description: str | None = None


class ExhibitionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    name: str
    date: datetime
    place: str | None
    club_id: int
    description: str | None


class ExhibitionResultCreate(BaseModel):
    dog_id: int
    location: str | None = None
    description: str | None = None
    score: str | None = None


class ExhibitionResultRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    exhibition_id: int
    dog_id: int
    location: str | None
    description: str | None
    score: str | None
