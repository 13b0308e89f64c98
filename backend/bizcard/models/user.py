"""User ORM — account row carrying the per-account unique token.

Invariants:
    - user_id is an auto-incrementing integer, immutable once assigned
    - unique_token is compared byte-for-byte on every authenticated request
    - unique_token is overwritten only by explicit rotation (logout)

Design Decisions:
    - Column names kept from the legacy schema (created_dts, deleted as int flag)
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, SmallInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from bizcard.db.base import Base


class User(Base):
    """Mobile app account."""
    __tablename__ = "users"

    user_id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    mobile: Mapped[str | None] = mapped_column(String(20), nullable=True, index=True)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    company_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    designation: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    unique_token: Mapped[str | None] = mapped_column(
        String(64), nullable=True, index=True,
    )
    fcm_token: Mapped[str | None] = mapped_column(String(512), nullable=True)
    status: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    deleted: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=0)
    created_dts: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
