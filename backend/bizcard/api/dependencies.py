"""Request Dependencies — credential extraction and the single auth interceptor.

Invariants:
    - user_id/token read from query string AND body; body wins on conflict
    - Body may be JSON object or form; anything else contributes nothing
    - One Authenticator per request, bound to the request's DB session
    - Rejections raise AuthenticationError (rendered as legacy 200 envelope by
      api/error_handlers.py); routes only ever see a CurrentUser

Design Decisions:
    - Merged params cached on request.state: several dependencies read them per request
    - The codec lives on app.state (built once at import from settings) and is
      reached through get_id_codec so tests can override it
"""

import logging
from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from bizcard.core.authenticator import Authenticated, AuthResult, Authenticator
from bizcard.core.domain_types import UserId
from bizcard.core.errors import AuthenticationError, ErrorContext
from bizcard.core.id_codec import IdCodec
from bizcard.infrastructure.database import get_db
from bizcard.infrastructure.user_repository import SqlUserLookup
from bizcard.models.user import User

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


@dataclass(frozen=True)
class Credentials:
    user_id: str
    token: str


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller as handed to route handlers."""
    user_id: UserId
    token: str
    user: User | None
    anonymous: bool = False


def _as_str(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


async def _read_body(request: Request) -> dict[str, str]:
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            logger.warning(
                "Ignoring unparsable JSON body", extra={"path": request.url.path},
            )
            return {}
        if not isinstance(body, dict):
            return {}
        return {k: _as_str(v) for k, v in body.items() if v is not None}
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        # UploadFile values are not credentials
        return {k: v for k, v in form.items() if isinstance(v, str)}
    return {}


async def read_request_params(request: Request) -> dict[str, str]:
    """Query params overlaid by body fields (body takes precedence)."""
    cached = getattr(request.state, "merged_params", None)
    if cached is not None:
        return cached
    params = dict(request.query_params)
    params.update(await _read_body(request))
    request.state.merged_params = params
    return params


async def get_credentials(
    params: dict[str, str] = Depends(read_request_params),
) -> Credentials:
    return Credentials(
        user_id=params.get("user_id", ""), token=params.get("token", ""),
    )


def get_id_codec(request: Request) -> IdCodec:
    return request.app.state.id_codec


async def get_authenticator(
    codec: IdCodec = Depends(get_id_codec),
    db: AsyncSession = Depends(get_db),
) -> Authenticator:
    return Authenticator(codec, SqlUserLookup(db))


def _to_current_user(
    result: AuthResult, credentials: Credentials, request: Request,
) -> CurrentUser:
    if not isinstance(result, Authenticated):
        raise AuthenticationError(
            result.failure, ErrorContext(path=request.url.path),
        )
    if result.anonymous:
        return CurrentUser(
            user_id=result.user_id, token="", user=None, anonymous=True,
        )
    return CurrentUser(
        user_id=result.user_id,
        token=credentials.token,
        user=result.user,
    )


async def require_user(
    request: Request,
    credentials: Credentials = Depends(get_credentials),
    authenticator: Authenticator = Depends(get_authenticator),
) -> CurrentUser:
    """Authenticated caller or AuthenticationError."""
    result = await authenticator.authenticate(credentials.user_id, credentials.token)
    return _to_current_user(result, credentials, request)


async def optional_user(
    request: Request,
    credentials: Credentials = Depends(get_credentials),
    authenticator: Authenticator = Depends(get_authenticator),
) -> CurrentUser:
    """Authenticated caller, the anonymous caller ("0"), or AuthenticationError."""
    result = await authenticator.authenticate_optional(
        credentials.user_id, credentials.token,
    )
    return _to_current_user(result, credentials, request)
