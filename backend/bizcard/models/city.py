"""City ORM — master data scoped by state."""

from sqlalchemy import ForeignKey, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bizcard.db.base import Base


class City(Base):
    __tablename__ = "cities"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    state_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("states.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(150), nullable=True)
    status: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=1)
    deleted: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)

    state: Mapped["State"] = relationship("State", back_populates="cities")
