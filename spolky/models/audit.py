"""Model auditního záznamu / Audit log model."""

import enum
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from spolky.database import Base


class AuditAction(str, enum.Enum):
    """Druh změny / Kind of governance change."""
    CLUB_UPDATED = "ClubUpdated"
    CLUB_CHANGE_REQUEST = "ClubChangeRequest"
    STATUTES_UPDATED = "StatutesUpdated"


class AuditLog(Base):
    """Záznam je pouze připojován, nikdy měněn / Append-only entry."""

    __tablename__ = "audit_logs"
    __table_args__ = (
        Index("ix_audit_logs_club_changed", "club_id", "changed_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    # Bez ondelete: uživatele s historií nelze smazat / No ondelete: users with history cannot be deleted
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), nullable=False)
    club_id: Mapped[int] = mapped_column(ForeignKey("clubs.id"), nullable=False)
    action: Mapped[str] = mapped_column(String(50), nullable=False)
    changed_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    original_data: Mapped[str | None] = mapped_column(Text)  # JSON
    new_data: Mapped[str | None] = mapped_column(Text)  # JSON

    def __repr__(self) -> str:
        return f"<AuditLog {self.action} club:{self.club_id}>"
