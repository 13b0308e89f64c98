"""Unique Token Lifecycle — issuance at onboarding and rotation on logout.

Invariants:
    - Tokens are 32 lowercase hex chars (same shape as the tokens already in the table)
    - rotate_token commits before returning: the old token stops authenticating immediately
    - Tokens are never logged
    - One live account per mobile: onboarding reuses the existing row and its token

Design Decisions:
    - secrets.token_hex over the legacy md5(mobile + timestamp): same format,
      not derivable from the phone number
"""

import logging
import secrets

from sqlalchemy.ext.asyncio import AsyncSession

from bizcard.infrastructure.user_repository import SqlUserLookup
from bizcard.models.user import User

logger = logging.getLogger(__name__)

TOKEN_BYTES = 16


def generate_unique_token() -> str:
    return secrets.token_hex(TOKEN_BYTES)


async def issue_user(db: AsyncSession, mobile: str) -> User:
    """Create an account row with a freshly minted token."""
    user = User(mobile=mobile, unique_token=generate_unique_token())
    db.add(user)
    await db.commit()
    await db.refresh(user)
    logger.info("Issued unique token for new user", extra={"user_id": user.user_id})
    return user


async def rotate_token(
    db: AsyncSession, user: User, clear_push_token: bool = False,
) -> str:
    """Overwrite the user's token. Optionally drop the push token (logout)."""
    user.unique_token = generate_unique_token()
    if clear_push_token:
        user.fcm_token = None
    await db.commit()
    logger.info("Rotated unique token", extra={"user_id": user.user_id})
    return user.unique_token


async def onboard_mobile(db: AsyncSession, mobile: str) -> tuple[User, bool]:
    """Return the live account for this mobile, creating it on first contact.

    The bool is True when a new row was issued. An existing row keeps its
    token; a legacy row with no token gets one minted.
    """
    existing = await SqlUserLookup(db).get_by_mobile(mobile)
    if existing is None:
        return await issue_user(db, mobile), True
    if existing.unique_token is None:
        await rotate_token(db, existing)
    return existing, False
