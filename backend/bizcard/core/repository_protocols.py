"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the Authenticator awaits exactly one call
"""

from typing import Protocol

from bizcard.core.domain_types import UserId


class UserRecord(Protocol):
    """Structural contract for a user row as seen by the authenticator.

    Avoids coupling core to the ORM model while giving mypy
    real type information (unlike Any).
    """
    user_id: int
    unique_token: str | None


class UserLookup(Protocol):
    """Contract for fetching a user row by numeric id — implemented by shell.

    Storage faults must surface as DatabaseError; the Authenticator maps only
    that to StorageUnavailableError.
    """
    async def get_by_id(self, user_id: UserId) -> UserRecord | None: ...
