"""Modely výstavy a výsledku / Exhibition and exhibition result models."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spolky.database import Base


class Exhibition(Base):
    """Výstava pořádaná spolkem / Exhibition organised by a club."""

    __tablename__ = "exhibitions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), unique=True, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    place: Mapped[str | None] = mapped_column(String(200))
    club_id: Mapped[int] = mapped_column(ForeignKey("clubs.id"), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    created_by_id: Mapped[str | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"))

    # Relations
    club: Mapped["Club"] = relationship(back_populates="exhibitions")
    results: Mapped[list["ExhibitionResult"]] = relationship(
        back_populates="exhibition", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Exhibition {self.name}>"


class ExhibitionResult(Base):
    """Výsledek psa na výstavě / Dog's result at an exhibition."""

    __tablename__ = "exhibition_results"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    exhibition_id: Mapped[int] = mapped_column(ForeignKey("exhibitions.id", ondelete="CASCADE"), nullable=False)
    dog_id: Mapped[int] = mapped_column(ForeignKey("dogs.id"), nullable=False)
    location: Mapped[str | None] = mapped_column(String(200))
    description: Mapped[str | None] = mapped_column(Text)
    score: Mapped[str | None] = mapped_column(String(50))
    created_by_id: Mapped[str | None] = mapped_column(ForeignKey("users.id", ondelete="SET NULL"))

    # Relations
    exhibition: Mapped["Exhibition"] = relationship(back_populates="results")
    dog: Mapped["Dog"] = relationship(back_populates="results")
