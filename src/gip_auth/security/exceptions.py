"""
Typed failures raised by the token codec.

Every exception carries a ``kind`` fixed at the point of detection, so callers
can classify a failure without looking at its message.
"""
from enum import Enum


class TokenFailure(str, Enum):
    """Kinds of failure the token codec can report."""
    SIGNING_FAILURE = "SIGNING_FAILURE"
    MALFORMED_TOKEN = "MALFORMED_TOKEN"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"
    PAYLOAD_DECODE_FAILURE = "PAYLOAD_DECODE_FAILURE"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    MISSING_UID_CLAIM = "MISSING_UID_CLAIM"


class TokenError(Exception):
    """Base exception for token codec errors."""
    kind: TokenFailure

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class SigningFailure(TokenError):
    """Token could not be signed (unusable secret or unserializable claims)."""
    kind = TokenFailure.SIGNING_FAILURE


class MalformedTokenError(TokenError):
    """Token is empty or not made of three non-empty segments."""
    kind = TokenFailure.MALFORMED_TOKEN


class SignatureMismatchError(TokenError):
    """Token signature does not match its header and payload."""
    kind = TokenFailure.SIGNATURE_MISMATCH


class PayloadDecodeError(TokenError):
    """Token payload could not be decoded into a claim set."""
    kind = TokenFailure.PAYLOAD_DECODE_FAILURE


class TokenExpiredError(TokenError):
    """Token has expired."""
    kind = TokenFailure.TOKEN_EXPIRED


class MissingUidClaimError(TokenError):
    """Token verified but carries no 'uid' claim."""
    kind = TokenFailure.MISSING_UID_CLAIM
