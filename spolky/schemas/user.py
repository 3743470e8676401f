"""
Schémata uživatele / User schemas.
Registrace, čtení a identita aktéra / Registration, read models and acting identity.
"""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from spolky.models.user import Role


class UserRegister(BaseModel):
    username: str = Field(min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(min_length=6, max_length=200)
    name: str = Field(default="", max_length=100)
    surname: str = Field(default="", max_length=100)
    phone: str | None = None
    role: Role = Role.PUBLIC


class UserRead(BaseModel):
    id: str
    username: str
    name: str
    surname: str
    email: str
    role: Role
    is_active: bool
    created_at: datetime | None
    model_config = {"from_attributes": True}


@dataclass(frozen=True)
class ActingUser:
    """Kdo změnu provádí, určeno jednou na hranici požadavku /
    Who performs a mutation, resolved once at the request boundary."""
    id: str
    username: str
