"""State ORM — master data scoped by country."""

from sqlalchemy import ForeignKey, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizcard.db.base import Base


class State(Base):
    __tablename__ = "states"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    country_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("countries.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(150), nullable=True)
    status: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)
    deleted: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)

    country: Mapped["Country"] = relationship("Country", back_populates="states")
    cities: Mapped[list["City"]] = relationship(
        "City", back_populates="state", cascade="all, delete-orphan",
    )
