"""Domain Types — identity types and auth enums shared across the codebase.

Invariants:
    - UserId wraps the numeric primary key — never expose it to clients unencoded
    - EncodedId is the only form of an id that crosses the HTTP boundary
    - AuthFailure has exactly three members; storage faults are exceptions, not results

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
EncodedId = NewType("EncodedId", str)

# Literal user_id the mobile clients send when nobody is signed in
ANONYMOUS_USER_ID = "0"


# ─── Enums ───────────────────────────────────────────────────────

class AuthFailure(str, Enum):
    """Why a request's (user_id, token) pair was rejected."""
    MISSING_CREDENTIALS = "missing_credentials"
    INVALID_USER = "invalid_user"
    TOKEN_MISMATCH = "token_mismatch"


class AuthState(str, Enum):
    """Per-request authentication states (never persisted)."""
    START = "start"
    DECODING = "decoding"
    LOOKING_UP = "looking_up"
    COMPARING = "comparing"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"
