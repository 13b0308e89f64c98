"""Master Data Routes — country/state/city lists for the mobile pickers.

Invariants:
    - GET and POST both accepted (clients send either)
    - Auth runs before parameter checks; failures use the legacy 200 envelope
    - Response echoes the encoded user_id and the caller's token
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bizcard.api.dependencies import (
    CurrentUser, get_id_codec, read_request_params, require_user,
)
from bizcard.api.envelope import echo_identity, failure_response, php_envelope
from bizcard.core.id_codec import IdCodec
from bizcard.infrastructure.database import get_db
from bizcard.services.master_data import list_cities, list_countries, list_states

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["master-data"])

_METHODS = ["GET", "POST"]


def _parse_parent_id(params: dict[str, str], name: str) -> int | None:
    raw = params.get(name, "").strip()
    if not (raw.isascii() and raw.isdecimal()):
        return None
    try:
        return int(raw)
    except ValueError:
        # Past the interpreter's int-string conversion limit
        return None


@router.api_route("/getCountryList", methods=_METHODS)
async def get_country_list(
    current: CurrentUser = Depends(require_user),
    codec: IdCodec = Depends(get_id_codec),
    db: AsyncSession = Depends(get_db),
):
    countries = await list_countries(db)
    identity = echo_identity(codec, current.user_id, current.token)
    return php_envelope({**identity, "country_list": countries})


@router.api_route("/getStateList", methods=_METHODS)
async def get_state_list(
    current: CurrentUser = Depends(require_user),
    codec: IdCodec = Depends(get_id_codec),
    params: dict[str, str] = Depends(read_request_params),
    db: AsyncSession = Depends(get_db),
):
    if not params.get("country_id"):
        return failure_response("country_id is required")
    country_id = _parse_parent_id(params, "country_id")
    if country_id is None:
        return failure_response("Invalid country_id")
    states = await list_states(db, country_id)
    identity = echo_identity(codec, current.user_id, current.token)
    return php_envelope({**identity, "state_list": states})


@router.api_route("/getCityList", methods=_METHODS)
async def get_city_list(
    current: CurrentUser = Depends(require_user),
    codec: IdCodec = Depends(get_id_codec),
    params: dict[str, str] = Depends(read_request_params),
    db: AsyncSession = Depends(get_db),
):
    if not params.get("state_id"):
        return failure_response("state_id is required")
    state_id = _parse_parent_id(params, "state_id")
    if state_id is None:
        return failure_response("Invalid state_id")
    cities = await list_cities(db, state_id)
    message = (
        "City list retrieved successfully" if cities
        else "No cities found for this state"
    )
    identity = echo_identity(codec, current.user_id, current.token)
    return php_envelope({**identity, "city_list": cities}, message=message)
