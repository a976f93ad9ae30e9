"""
Token codec with typed failures.

Example usage:
    from gip_auth.security import build_claims, sign, verify, TokenExpiredError

    token = sign(build_claims("user123", "my-app", 3600), "app-secret")

    try:
        claims = verify(token, "app-secret")
        print(f"User ID: {claims['uid']}")
    except TokenExpiredError:
        print("Token has expired")
"""

from .exceptions import (
    TokenFailure,
    TokenError,
    SigningFailure,
    MalformedTokenError,
    SignatureMismatchError,
    PayloadDecodeError,
    TokenExpiredError,
    MissingUidClaimError,
)
from .token_codec import (
    build_claims,
    current_timestamp,
    extract_uid,
    sign,
    verify,
)

__all__ = [
    "TokenFailure",
    "TokenError",
    "SigningFailure",
    "MalformedTokenError",
    "SignatureMismatchError",
    "PayloadDecodeError",
    "TokenExpiredError",
    "MissingUidClaimError",
    "build_claims",
    "current_timestamp",
    "extract_uid",
    "sign",
    "verify",
]
