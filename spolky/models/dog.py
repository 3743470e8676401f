"""Model psa / Dog model."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from spolky.database import Base


class Dog(Base):
    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    breed: Mapped[str | None] = mapped_column(String(100))
    gender: Mapped[str | None] = mapped_column(String(20))
    date_of_birth: Mapped[datetime | None] = mapped_column(DateTime)
    owners_name: Mapped[str | None] = mapped_column(String(200))
    owners_phone: Mapped[str | None] = mapped_column(String(30))

    # Relations
    results: Mapped[list["ExhibitionResult"]] = relationship(back_populates="dog")

    def __repr__(self) -> str:
        return f"<Dog {self.name}>"
