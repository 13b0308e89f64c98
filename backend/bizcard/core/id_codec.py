"""ID Codec — reversible obfuscation of numeric primary keys into client-facing strings.

Invariants:
    - encode is deterministic and collision-free for a given secret
    - encode accepts positive ints only; anything else raises InvalidInputError
    - decode NEVER raises: every malformed, foreign, or non-positive input yields None
    - decode(encode(i)) == i for every positive i
    - The secret is injected by constructor, never read from module globals

Design Decisions:
    - hashids for the default scheme: keyed by salt, URL-safe alphabet, and decode
      re-encodes its result so strings from another salt fail closed
    - LegacyBase64IdCodec kept for ids already issued by the previous backend
      (URL-safe base64 of the decimal string). Not keyed, so only use it while
      old clients are still in circulation
    - Obfuscation only; access control lives in the Authenticator
"""

import base64
import binascii
import logging
from typing import Protocol

from hashids import Hashids

from bizcard.core.domain_types import EncodedId, UserId
from bizcard.core.errors import InvalidInputError

logger = logging.getLogger(__name__)


class IdCodec(Protocol):
    """Structural contract shared by every codec implementation."""
    def encode(self, id: int) -> EncodedId: ...
    def decode(self, value: str | None) -> UserId | None: ...


def _require_positive_int(id: object) -> int:
    # bool is an int subclass; True would silently encode as 1
    if isinstance(id, bool) or not isinstance(id, int):
        raise InvalidInputError(
            f"id must be a positive integer, got {type(id).__name__}", "id",
        )
    if id <= 0:
        raise InvalidInputError(f"id must be positive, got {id}", "id")
    return id


class HashidsIdCodec:
    """Salted hashids codec. Same secret ⇒ same strings across restarts."""

    def __init__(self, secret: str, min_length: int = 8):
        if not secret:
            raise ValueError("id codec secret must not be empty")
        self._hashids = Hashids(salt=secret, min_length=min_length)

    def encode(self, id: int) -> EncodedId:
        return EncodedId(self._hashids.encode(_require_positive_int(id)))

    def decode(self, value: str | None) -> UserId | None:
        if not value or not isinstance(value, str):
            return None
        try:
            numbers = self._hashids.decode(value)
        except (ValueError, IndexError):
            logger.debug("hashids rejected malformed identifier")
            return None
        if len(numbers) != 1 or numbers[0] <= 0:
            return None
        return UserId(numbers[0])


class LegacyBase64IdCodec:
    """URL-safe base64 of the decimal id, as issued by the previous backend."""

    def encode(self, id: int) -> EncodedId:
        raw = str(_require_positive_int(id)).encode("ascii")
        encoded = base64.b64encode(raw).decode("ascii")
        return EncodedId(encoded.replace("+", "-").replace("/", "_"))

    def decode(self, value: str | None) -> UserId | None:
        if not value or not isinstance(value, str):
            return None
        standard = value.replace("-", "+").replace("_", "/")
        try:
            text = base64.b64decode(standard, validate=True).decode("ascii")
        except (binascii.Error, ValueError):
            return None
        if not (text.isascii() and text.isdecimal()) or text.startswith("0"):
            return None
        try:
            number = int(text)
        except ValueError:
            # Past the interpreter's int-string conversion limit
            return None
        # Reject non-canonical spellings (e.g. altered padding bits)
        if self.encode(number) != value:
            return None
        return UserId(number)


def build_id_codec(
    scheme: str, secret: str, min_length: int = 8,
) -> HashidsIdCodec | LegacyBase64IdCodec:
    """Build the configured codec. Unknown schemes fail at startup."""
    if scheme == "hashids":
        return HashidsIdCodec(secret, min_length=min_length)
    if scheme == "base64":
        logger.warning("Using unkeyed legacy base64 id codec")
        return LegacyBase64IdCodec()
    raise ValueError(f"Unknown id codec scheme: {scheme!r}")
