"""
GIP authentication: short-lived signed codes and server-to-server tokens.

Example usage:
    from gip_auth import GIPAuth, ErrorCode

    auth = GIPAuth(app_id="my-app", app_secret="my-secret")

    code_result = auth.get_code("user123")
    uid_result = auth.get_uid_by_code(code_result.code)
    if uid_result.success:
        print(f"User ID: {uid_result.uid}")
    elif uid_result.error_code == ErrorCode.TOKEN_EXPIRED:
        print("Code has expired")
"""

from .auth import GIPAuth, get_gip_auth
from .config import GIPAuthConfig
from .constants import ErrorCode
from .exceptions import GIPAuthError, ConfigurationError
from .schemas import BaseResult, CodeResult, SSTokenResult, UidResult

__version__ = "1.0.0"

__all__ = [
    "GIPAuth",
    "get_gip_auth",
    "GIPAuthConfig",
    "ErrorCode",
    "GIPAuthError",
    "ConfigurationError",
    "BaseResult",
    "CodeResult",
    "SSTokenResult",
    "UidResult",
]
