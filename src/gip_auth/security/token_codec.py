"""
Token codec for signing, verifying, and decoding compact HS256 tokens.

Wire format::

    b64url(header) . b64url(claims) . b64url(hex(HMAC-SHA256(secret, header.claims)))

The signature segment is the base64url encoding of the *hex text* of the
HMAC digest, not of the raw digest bytes. All base64url segments are
unpadded.
"""
import hmac
import json
import math
import time
from typing import Any, Dict, Mapping, Optional, Union

from jwt.algorithms import HMACAlgorithm
from jwt.api_jws import PyJWS
from jwt.exceptions import InvalidKeyError
from jwt.utils import base64url_decode, base64url_encode, force_bytes

from .exceptions import (
    SigningFailure,
    MalformedTokenError,
    SignatureMismatchError,
    PayloadDecodeError,
    TokenExpiredError,
    MissingUidClaimError,
)

ALGORITHM = "HS256"

# Claims are always rendered in this order so the same claim set produces
# the same token bytes.
CLAIM_ORDER = ("uid", "app_id", "exp", "iat")

Secret = Union[str, bytes]


class HexHMACAlgorithm(HMACAlgorithm):
    """
    HMAC-SHA256 whose signature is the lowercase hex digest as ASCII bytes.
    """

    def __init__(self):
        super().__init__(HMACAlgorithm.SHA256)

    def prepare_key(self, key: Secret) -> bytes:
        key_bytes = force_bytes(key)
        if not key_bytes:
            raise InvalidKeyError("HMAC secret must not be empty")
        return key_bytes

    def sign(self, msg: bytes, key: bytes) -> bytes:
        return hmac.new(key, msg, self.hash_alg).hexdigest().encode("ascii")

    def check_key_length(self, key: bytes) -> None:
        # The key is the raw application secret; its length is fixed by the issuer.
        return None

    def verify(self, msg: bytes, key: bytes, sig: bytes) -> bool:
        return hmac.compare_digest(sig, self.sign(msg, key))


# Configured once at import and never mutated afterwards.
_algorithm = HexHMACAlgorithm()
_jws = PyJWS(algorithms=[])
_jws.register_algorithm(ALGORITHM, _algorithm)


def current_timestamp() -> int:
    """Current Unix time in whole seconds."""
    return int(time.time())


def build_claims(
    uid: str,
    app_id: str,
    lifetime_seconds: int,
    now: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Build a fresh claim set expiring ``lifetime_seconds`` after ``now``.

    Args:
        uid: User ID
        app_id: Issuing application ID
        lifetime_seconds: Token lifetime, a positive integer
        now: Issued-at time in Unix seconds (default: current time)

    Returns:
        Claim set with keys in canonical order

    Raises:
        ValueError: If lifetime_seconds is not a positive integer
    """
    if isinstance(lifetime_seconds, bool) or not isinstance(lifetime_seconds, int):
        raise ValueError("lifetime_seconds must be an integer")
    if lifetime_seconds <= 0:
        raise ValueError("lifetime_seconds must be positive")

    issued_at = current_timestamp() if now is None else now
    return {
        "uid": uid,
        "app_id": app_id,
        "exp": issued_at + lifetime_seconds,
        "iat": issued_at,
    }


def _serialize_claims(claims: Mapping[str, Any]) -> bytes:
    ordered = {key: claims[key] for key in CLAIM_ORDER if key in claims}
    ordered.update((key, value) for key, value in claims.items() if key not in ordered)
    return json.dumps(ordered, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def sign(claims: Mapping[str, Any], secret: Secret) -> str:
    """
    Sign a claim set and return the compact token.

    Args:
        claims: Claim set, normally produced by ``build_claims``
        secret: Application secret used as the HMAC key

    Returns:
        Token string ``header.payload.signature``

    Raises:
        SigningFailure: If the secret is unusable or the claims cannot be serialized
    """
    if not isinstance(claims, Mapping):
        raise SigningFailure("Claims must be a mapping")

    try:
        payload = _serialize_claims(claims)
        return _jws.encode(payload, secret, algorithm=ALGORITHM)
    except (InvalidKeyError, TypeError, ValueError) as e:
        raise SigningFailure(f"Failed to generate token: {e}") from e


def _expected_signature(signing_input: str, secret: Secret) -> bytes:
    try:
        key = _algorithm.prepare_key(secret)
    except (InvalidKeyError, TypeError) as e:
        raise SignatureMismatchError("Token cannot be verified with this secret") from e
    return base64url_encode(_algorithm.sign(signing_input.encode("utf-8"), key))


def _decode_claims(payload_segment: str) -> Dict[str, Any]:
    try:
        claims = json.loads(base64url_decode(payload_segment))
    except ValueError as e:
        raise PayloadDecodeError("Failed to decode token payload") from e

    if not isinstance(claims, dict):
        raise PayloadDecodeError("Token payload is not a JSON object")

    exp = claims.get("exp")
    if exp is not None:
        if isinstance(exp, bool) or not isinstance(exp, (int, float)):
            raise PayloadDecodeError("Token 'exp' claim is not a number")
        if not math.isfinite(exp):
            raise PayloadDecodeError("Token 'exp' claim is not finite")

    return claims


def verify(token: Optional[str], secret: Secret, now: Optional[int] = None) -> Dict[str, Any]:
    """
    Verify a token and return its claims.

    Checks run in a fixed order: structure, signature, payload decoding,
    expiry. A token without an 'exp' claim never expires.

    Args:
        token: Token string, possibly malformed
        secret: Application secret the token was signed with
        now: Current Unix time in seconds (default: current time)

    Returns:
        Decoded claim mapping

    Raises:
        MalformedTokenError: If the token is empty or not three non-empty segments
        SignatureMismatchError: If the signature does not match
        PayloadDecodeError: If the payload is not a valid claim set
        TokenExpiredError: If the token has expired
    """
    if not isinstance(token, str) or not token.strip():
        raise MalformedTokenError("Token is null or empty")

    segments = token.split(".")
    if len(segments) != 3 or not all(segments):
        raise MalformedTokenError("Invalid token format")

    header_segment, payload_segment, signature_segment = segments

    expected = _expected_signature(f"{header_segment}.{payload_segment}", secret)
    if not hmac.compare_digest(expected, signature_segment.encode("utf-8")):
        raise SignatureMismatchError("Invalid token signature")

    claims = _decode_claims(payload_segment)

    exp = claims.get("exp")
    if exp is not None:
        if now is None:
            now = current_timestamp()
        if now > exp:
            raise TokenExpiredError("Token has expired")

    return claims


def extract_uid(token: Optional[str], secret: Secret, now: Optional[int] = None) -> str:
    """
    Verify a token and return its 'uid' claim as a string.

    Raises:
        MissingUidClaimError: If the verified claims carry no 'uid'
        TokenError: Any failure raised by ``verify``
    """
    claims = verify(token, secret, now=now)
    uid = claims.get("uid")
    if uid is None:
        raise MissingUidClaimError("UID not found in token")
    return str(uid)
