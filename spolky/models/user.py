"""
Model uživatele a role / User and Role models.
Identita je řetězec (uuid4) / Identity is a stable string (uuid4).
"""

import enum
import uuid
from datetime import datetime

from sqlalchemy import Boolean, DateTime, Enum, String, func
from sqlalchemy.orm import Mapped, mapped_column

from spolky.database import Base


class Role(str, enum.Enum):
    """Úroveň oprávnění / Access-control tier."""
    ADMIN = "Admin"
    CHAIRMAN = "Chairman"
    READ_ONLY = "ReadOnly"
    PUBLIC = "Public"


def _new_user_id() -> str:
    return str(uuid.uuid4())


class User(Base):
    """Uživatel aplikace / Application user."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_user_id)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    surname: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(150), unique=True, nullable=False)
    phone: Mapped[str | None] = mapped_column(String(30))
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[Role] = mapped_column(Enum(Role), nullable=False, default=Role.PUBLIC)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<User {self.username}>"
