"""
GIPAuth: issues authentication codes and SSTokens and resolves user IDs from them.
"""
import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Dict, Optional, Tuple

from gip_auth.config.auth_config import (
    DEFAULT_CODE_EXPIRE_SECONDS,
    DEFAULT_SSTOKEN_EXPIRE_SECONDS,
    GIPAuthConfig,
)
from gip_auth.constants import ErrorCode
from gip_auth.exceptions import ConfigurationError
from gip_auth.schemas import CodeResult, SSTokenResult, UidResult
from gip_auth.security.exceptions import SigningFailure, TokenError, TokenFailure
from gip_auth.security.token_codec import (
    build_claims,
    extract_uid,
    sign,
    verify,
)

logger = logging.getLogger(__name__)

FAILURE_ERROR_CODES: Dict[TokenFailure, ErrorCode] = {
    TokenFailure.SIGNING_FAILURE: ErrorCode.TOKEN_CREATION_FAILED,
    TokenFailure.MALFORMED_TOKEN: ErrorCode.TOKEN_INVALID,
    TokenFailure.SIGNATURE_MISMATCH: ErrorCode.TOKEN_VERIFICATION_FAILED,
    TokenFailure.PAYLOAD_DECODE_FAILURE: ErrorCode.TOKEN_DECODING_FAILED,
    TokenFailure.TOKEN_EXPIRED: ErrorCode.TOKEN_EXPIRED,
    TokenFailure.MISSING_UID_CLAIM: ErrorCode.TOKEN_VERIFICATION_FAILED,
}


def _is_blank(value: Optional[str]) -> bool:
    return not isinstance(value, str) or not value.strip()


def _is_positive_seconds(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class GIPAuth:
    """
    Issues and validates codes and SSTokens for one application.

    Codes and SSTokens share the same token format; they differ only in their
    default lifetimes. Operations never raise: failures are reported through
    the ``success``/``error_code`` fields of the returned result.
    """

    def __init__(
        self,
        app_id: str,
        app_secret: str,
        code_expire_seconds: int = DEFAULT_CODE_EXPIRE_SECONDS,
        sstoken_expire_seconds: int = DEFAULT_SSTOKEN_EXPIRE_SECONDS,
    ):
        """
        Initialize GIPAuth.

        Args:
            app_id: Application ID written into every token
            app_secret: Application secret used to sign and verify tokens
            code_expire_seconds: Default code lifetime (default: 3600)
            sstoken_expire_seconds: Default SSToken lifetime (default: 7200)

        Raises:
            ConfigurationError: If app_id or app_secret is empty, or a lifetime is not positive
        """
        if _is_blank(app_id):
            raise ConfigurationError("App ID cannot be null or empty")
        if _is_blank(app_secret):
            raise ConfigurationError("App Secret cannot be null or empty")
        if not _is_positive_seconds(code_expire_seconds):
            raise ConfigurationError("Code expire seconds must be a positive integer")
        if not _is_positive_seconds(sstoken_expire_seconds):
            raise ConfigurationError("SSToken expire seconds must be a positive integer")

        self._app_id = app_id.strip()
        self._app_secret = app_secret.strip()
        self.code_expire_seconds = code_expire_seconds
        self.sstoken_expire_seconds = sstoken_expire_seconds

        logger.info("GIPAuth initialized for app %s", self._app_id)

    @classmethod
    def from_config(cls, config: GIPAuthConfig) -> "GIPAuth":
        """Create a GIPAuth from a loaded configuration."""
        return cls(
            app_id=config.app_id,
            app_secret=config.app_secret.get_secret_value(),
            code_expire_seconds=config.code_expire_seconds,
            sstoken_expire_seconds=config.sstoken_expire_seconds,
        )

    @property
    def app_id(self) -> str:
        return self._app_id

    def _validate_issue_args(self, uid: Optional[str], expire_seconds) -> Optional[str]:
        if _is_blank(uid):
            return "User ID cannot be null or empty"
        if not _is_positive_seconds(expire_seconds):
            return "Expire seconds must be positive"
        return None

    def _issue(self, uid: str, expire_seconds: int) -> Tuple[str, datetime]:
        claims = build_claims(uid, self._app_id, expire_seconds)
        token = sign(claims, self._app_secret)
        return token, datetime.fromtimestamp(claims["exp"], tz=timezone.utc)

    def get_code(self, uid: Optional[str], expire_seconds: Optional[int] = None) -> CodeResult:
        """
        Generate an authentication code for a user.

        Args:
            uid: User ID
            expire_seconds: Code lifetime in seconds (default: code_expire_seconds)

        Returns:
            CodeResult with the code and its expiration time, or an error
        """
        if expire_seconds is None:
            expire_seconds = self.code_expire_seconds

        invalid = self._validate_issue_args(uid, expire_seconds)
        if invalid:
            return CodeResult.error(ErrorCode.INVALID_ARGUMENT, invalid)

        try:
            code, expire_date = self._issue(uid.strip(), expire_seconds)
        except SigningFailure as e:
            logger.error("Code generation failed: %s", e.message)
            return CodeResult.error(ErrorCode.TOKEN_CREATION_FAILED, e.message)
        except Exception as e:
            logger.error(f"Unexpected error generating code: {e}", exc_info=True)
            return CodeResult.error(ErrorCode.UNKNOWN_ERROR, f"Failed to generate code: {e}")

        return CodeResult.ok(code, expire_date)

    def get_sstoken(self, uid: Optional[str], expire_seconds: Optional[int] = None) -> SSTokenResult:
        """
        Generate a server-to-server token for a user.

        Args:
            uid: User ID
            expire_seconds: Token lifetime in seconds (default: sstoken_expire_seconds)

        Returns:
            SSTokenResult with the token and its expiration time, or an error
        """
        if expire_seconds is None:
            expire_seconds = self.sstoken_expire_seconds

        invalid = self._validate_issue_args(uid, expire_seconds)
        if invalid:
            return SSTokenResult.error(ErrorCode.INVALID_ARGUMENT, invalid)

        try:
            token, expire_date = self._issue(uid.strip(), expire_seconds)
        except SigningFailure as e:
            logger.error("SSToken generation failed: %s", e.message)
            return SSTokenResult.error(ErrorCode.TOKEN_CREATION_FAILED, e.message)
        except Exception as e:
            logger.error(f"Unexpected error generating SSToken: {e}", exc_info=True)
            return SSTokenResult.error(ErrorCode.UNKNOWN_ERROR, f"Failed to generate SSToken: {e}")

        return SSTokenResult.ok(token, expire_date)

    def _resolve_uid(self, token: Optional[str], label: str) -> UidResult:
        if _is_blank(token):
            return UidResult.error(ErrorCode.TOKEN_INVALID, f"{label} cannot be null or empty")

        try:
            uid = extract_uid(token.strip(), self._app_secret)
        except TokenError as e:
            # Never log the token itself.
            logger.warning("%s rejected: %s", label, e.kind.value)
            return UidResult.error(FAILURE_ERROR_CODES[e.kind], e.message)
        except Exception as e:
            logger.error(f"Unexpected error resolving UID from {label}: {e}", exc_info=True)
            return UidResult.error(ErrorCode.UNKNOWN_ERROR, f"Failed to get UID by {label}: {e}")

        return UidResult.ok(uid)

    def get_uid_by_code(self, code: Optional[str]) -> UidResult:
        """
        Resolve the user ID carried by an authentication code.

        Args:
            code: Authentication code

        Returns:
            UidResult with the user ID, or an error classified by failure kind
        """
        return self._resolve_uid(code, "Code")

    def get_uid_by_sstoken(self, ss_token: Optional[str]) -> UidResult:
        """Resolve the user ID carried by an SSToken."""
        return self._resolve_uid(ss_token, "SSToken")

    def is_token_expired(self, token: Optional[str]) -> bool:
        """
        Check whether a code or SSToken is no longer usable.

        Returns True for empty input and for any token that fails verification,
        whether it is expired, mis-signed or unparsable.
        """
        if _is_blank(token):
            return True

        try:
            verify(token.strip(), self._app_secret)
        except TokenError as e:
            logger.debug("Token treated as expired: %s", e.kind.value)
            return True
        return False

    def __repr__(self) -> str:
        return f"GIPAuth(app_id={self._app_id!r})"


@lru_cache()
def get_gip_auth() -> GIPAuth:
    """
    Get a cached GIPAuth instance loaded from gip_auth.yaml or the environment.
    """
    config = GIPAuthConfig.from_yaml()
    return GIPAuth.from_config(config)
