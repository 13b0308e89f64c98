"""SQL User Lookup — UserLookup implementation over the users table.

Invariants:
    - One SELECT per get_by_id call, no caching
    - Soft-deleted rows (deleted != 0) are invisible
    - SQLAlchemy failures surface as DatabaseError, whatever session they ran on
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bizcard.core.domain_types import UserId
from bizcard.core.errors import DatabaseError
from bizcard.models.user import User

logger = logging.getLogger(__name__)


class SqlUserLookup:
    """Fetches live user rows through the request's AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def get_by_id(self, user_id: UserId) -> User | None:
        try:
            result = await self._db.execute(
                select(User).where(User.user_id == user_id, User.deleted == 0),
            )
        except SQLAlchemyError as e:
            logger.error(f"User lookup query failed: {e}")
            raise DatabaseError("User lookup failed", "query") from e
        return result.scalar_one_or_none()

    async def get_by_mobile(self, mobile: str) -> User | None:
        try:
            result = await self._db.execute(
                select(User)
                .where(User.mobile == mobile, User.deleted == 0)
                .order_by(User.user_id)
                .limit(1),
            )
        except SQLAlchemyError as e:
            logger.error(f"User lookup by mobile failed: {e}")
            raise DatabaseError("User lookup failed", "query") from e
        return result.scalar_one_or_none()

    async def get_by_unique_token(self, unique_token: str) -> list[User]:
        try:
            result = await self._db.execute(
                select(User).where(
                    User.unique_token == unique_token, User.deleted == 0,
                ),
            )
        except SQLAlchemyError as e:
            logger.error(f"User lookup by token failed: {e}")
            raise DatabaseError("User lookup failed", "query") from e
        return list(result.scalars().all())
