"""Country ORM — master data for the country picker."""

from sqlalchemy import Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizcard.db.base import Base


class Country(Base):
    __tablename__ = "countries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(150), nullable=True)
    status: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)
    deleted: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)

    states: Mapped[list["State"]] = relationship(
        "State", back_populates="country", cascade="all, delete-orphan",
    )
