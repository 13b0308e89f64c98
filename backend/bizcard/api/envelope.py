"""Response Envelopes — the JSON shapes the mobile clients were built against.

Invariants:
    - Two success shapes only: php_envelope (status/rcode/message/...) and
      data_envelope (status/message/data)
    - Every AuthFailure kind is delivered as HTTP 200 with status: false;
      the kinds differ only in message text
    - Echoed identities always carry the encoded id, never the numeric key

Design Decisions:
    - Message table mirrors the strings clients already match on
      ("Not A Valid User", "Token Mismatch Exception")
"""

from fastapi import status
from fastapi.responses import JSONResponse

from bizcard.core.domain_types import AuthFailure
from bizcard.core.id_codec import IdCodec

AUTH_FAILURE_MESSAGES: dict[AuthFailure, str] = {
    AuthFailure.MISSING_CREDENTIALS: "Token Mismatch Exception",
    AuthFailure.INVALID_USER: "Not A Valid User",
    AuthFailure.TOKEN_MISMATCH: "Token Mismatch Exception",
}

LEGACY_FAILURE_RCODE = 500


def php_envelope(
    data: dict | None = None, message: str | None = None, rcode: int = 200,
) -> dict:
    """{status, rcode, [message], **data} — the shape of the PHP-era endpoints."""
    body: dict = {"status": True, "rcode": rcode}
    if message is not None:
        body["message"] = message
    body.update(data or {})
    return body


def data_envelope(message: str, data: dict | list | None = None) -> dict:
    return {"status": True, "message": message, "data": data if data is not None else {}}


def failure_envelope(message: str, rcode: int = LEGACY_FAILURE_RCODE) -> dict:
    return {"status": False, "rcode": rcode, "message": message}


def failure_response(message: str, rcode: int = LEGACY_FAILURE_RCODE) -> JSONResponse:
    """Legacy failure body, always transported as HTTP 200."""
    return JSONResponse(
        status_code=status.HTTP_200_OK, content=failure_envelope(message, rcode),
    )


def auth_failure_envelope(failure: AuthFailure) -> dict:
    return failure_envelope(AUTH_FAILURE_MESSAGES[failure])


def auth_failure_response(failure: AuthFailure) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_200_OK, content=auth_failure_envelope(failure),
    )


def echo_identity(codec: IdCodec, user_id: int, token: str) -> dict:
    """{user_id, unique_token} as echoed back by authenticated endpoints."""
    return {"user_id": codec.encode(user_id), "unique_token": token}
