"""Model spolku / Club (spolek) model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spolky.database import Base


class Club(Base):
    __tablename__ = "clubs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    registration_number: Mapped[str | None] = mapped_column(String(20))  # IČO
    address: Mapped[str | None] = mapped_column(String(300))
    email: Mapped[str | None] = mapped_column(String(150))
    phone: Mapped[str | None] = mapped_column(String(30))
    created_at: Mapped[datetime | None] = mapped_column(DateTime)
    guidelines: Mapped[str | None] = mapped_column(Text)  # stanovy / statutes
    guidelines_updated_at: Mapped[datetime | None] = mapped_column(DateTime)
    # Smazání předsedy vynuluje odkaz / Deleting the chairman clears the reference
    chairman_id: Mapped[str | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"))

    # Relations
    chairman: Mapped["User | None"] = relationship(lazy="selectin")
    exhibitions: Mapped[list["Exhibition"]] = relationship(back_populates="club")

    @property
    def chairman_username(self) -> str | None:
        return self.chairman.username if self.chairman else None

    def __repr__(self) -> str:
        return f"<Club {self.name}>"
