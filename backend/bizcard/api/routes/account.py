"""Account Routes — onboarding, logout (token rotation) and QR-code contact lookup.

Invariants:
    - sendOtp is unauthenticated and returns the credentials every other route checks
    - logout and QR lookup accept the anonymous caller (user_id "0")
    - Logout rotates unique_token: the presented token stops working immediately
    - QR lookup never returns another user's unique_token or numeric id
"""

import logging
import re

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bizcard.api.dependencies import (
    CurrentUser, get_id_codec, optional_user, read_request_params,
)
from bizcard.api.envelope import (
    data_envelope, echo_identity, failure_response, php_envelope,
)
from bizcard.core.id_codec import IdCodec
from bizcard.infrastructure.database import get_db
from bizcard.infrastructure.user_repository import SqlUserLookup
from bizcard.models.user import User
from bizcard.services.unique_token import onboard_mobile, rotate_token

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["account"])

_MOBILE_RE = re.compile(r"\+?[0-9]{6,15}")


def _public_profile(user: User, codec: IdCodec) -> dict:
    return {
        "user_id": codec.encode(user.user_id),
        "full_name": user.full_name or "",
        "company_name": user.company_name or "",
        "designation": user.designation or "",
        "mobile": user.mobile or "",
        "email": user.email or "",
    }


@router.post("/sendOtp")
async def send_otp(
    params: dict[str, str] = Depends(read_request_params),
    codec: IdCodec = Depends(get_id_codec),
    db: AsyncSession = Depends(get_db),
):
    """Issue (or re-issue) credentials for a mobile number.

    The verification code itself is delivered by the SMS provider, outside
    this service.
    """
    mobile = params.get("mobile", "").strip()
    if not mobile:
        return failure_response("Mobile number is required", rcode=400)
    if not _MOBILE_RE.fullmatch(mobile):
        return failure_response("Invalid mobile number", rcode=400)
    user, created = await onboard_mobile(db, mobile)
    logger.info(
        "Onboarded new user" if created else "Re-issued credentials",
        extra={"user_id": user.user_id},
    )
    identity = echo_identity(codec, user.user_id, user.unique_token)
    return php_envelope(identity, message="OTP sent successfully")


@router.post("/logout")
async def logout(
    current: CurrentUser = Depends(optional_user),
    db: AsyncSession = Depends(get_db),
):
    """Invalidate the caller's token and push registration."""
    if current.anonymous:
        return data_envelope("Logged out")
    await rotate_token(db, current.user, clear_push_token=True)
    logger.info("User logged out", extra={"user_id": current.user_id})
    return data_envelope("Logged out successfully")


@router.api_route("/getUserDetailByQrCode", methods=["GET", "POST"])
async def get_user_detail_by_qr_code(
    current: CurrentUser = Depends(optional_user),
    params: dict[str, str] = Depends(read_request_params),
    codec: IdCodec = Depends(get_id_codec),
    db: AsyncSession = Depends(get_db),
):
    """Resolve a scanned QR payload (a unique token) to a public profile."""
    qr_code_token = params.get("qr_code_token", "")
    if not qr_code_token:
        return failure_response("qr_code_token is required")
    users = await SqlUserLookup(db).get_by_unique_token(qr_code_token)
    return data_envelope(
        "Success", {"data": [_public_profile(u, codec) for u in users]},
    )
