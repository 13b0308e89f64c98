"""Token Authenticator — verifies a request's (encoded user_id, token) pair.

Invariants:
    - Exactly one UserLookup.get_by_id call per authenticate(); zero for the anonymous id
    - Failures are returned as Rejected(kind), never raised
    - Storage faults are the exception: raised as StorageUnavailableError
    - Token comparison is exact and case-sensitive; a NULL stored token never matches
    - No retries and no caching across requests

Design Decisions:
    - Result objects over exceptions: every caller branches on the failure kind, and
      the kind decides the legacy message, not the HTTP status
    - Decode failure folds into INVALID_USER (same outcome as an unknown id)
    - Empty presented token is MISSING_CREDENTIALS and short-circuits before the lookup
"""

import hmac
import logging
from dataclasses import dataclass

from bizcard.core.domain_types import ANONYMOUS_USER_ID, AuthFailure, AuthState, UserId
from bizcard.core.errors import DatabaseError, StorageUnavailableError
from bizcard.core.id_codec import IdCodec
from bizcard.core.repository_protocols import UserLookup, UserRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Authenticated:
    """Terminal AUTHENTICATED state — carries the numeric id and the loaded row."""
    user_id: UserId
    user: UserRecord | None = None
    anonymous: bool = False
    state: AuthState = AuthState.AUTHENTICATED


@dataclass(frozen=True)
class Rejected:
    """Terminal REJECTED state — carries why."""
    failure: AuthFailure
    state: AuthState = AuthState.REJECTED


AuthResult = Authenticated | Rejected

ANONYMOUS = Authenticated(user_id=UserId(0), user=None, anonymous=True)


def check_token(user: UserRecord, presented_token: str) -> AuthFailure | None:
    """Pure comparison step. Returns the failure kind, or None when the token matches."""
    stored = user.unique_token
    if stored is None:
        return AuthFailure.TOKEN_MISMATCH
    # Exact byte equality, constant time. JSON may carry lone surrogates
    if not hmac.compare_digest(
        stored.encode("utf-8", "surrogatepass"),
        presented_token.encode("utf-8", "surrogatepass"),
    ):
        return AuthFailure.TOKEN_MISMATCH
    return None


class Authenticator:
    """Composes the ID codec and a user lookup into the per-request auth check."""

    def __init__(self, codec: IdCodec, users: UserLookup):
        self._codec = codec
        self._users = users

    async def authenticate(
        self, encoded_user_id: str | None, presented_token: str | None,
    ) -> AuthResult:
        """START → DECODING → LOOKING_UP → COMPARING → AUTHENTICATED | REJECTED."""
        if not encoded_user_id or not presented_token:
            return self._reject(AuthFailure.MISSING_CREDENTIALS, AuthState.START)

        user_id = self._codec.decode(encoded_user_id)
        if user_id is None:
            return self._reject(AuthFailure.INVALID_USER, AuthState.DECODING)

        user = await self._lookup(user_id)
        if user is None:
            return self._reject(AuthFailure.INVALID_USER, AuthState.LOOKING_UP)

        failure = check_token(user, presented_token)
        if failure is not None:
            return self._reject(failure, AuthState.COMPARING, user_id)

        return Authenticated(user_id=user_id, user=user)

    async def authenticate_optional(
        self, encoded_user_id: str | None, presented_token: str | None,
    ) -> AuthResult:
        """Like authenticate(), but the literal "0" is the anonymous caller."""
        if encoded_user_id == ANONYMOUS_USER_ID:
            return ANONYMOUS
        return await self.authenticate(encoded_user_id, presented_token)

    async def _lookup(self, user_id: UserId) -> UserRecord | None:
        try:
            return await self._users.get_by_id(user_id)
        except DatabaseError as e:
            logger.error(
                f"User lookup failed during authentication: {e}",
                extra={"error_code": "STORAGE_UNAVAILABLE"},
            )
            raise StorageUnavailableError("User store unavailable") from e

    @staticmethod
    def _reject(
        failure: AuthFailure, at: AuthState, user_id: UserId | None = None,
    ) -> Rejected:
        logger.info(
            f"Authentication rejected at {at.value}: {failure.value}",
            extra={"auth_failure": failure.value, "user_id": user_id},
        )
        return Rejected(failure=failure)
