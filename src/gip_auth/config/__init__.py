from .auth_config import (
    DEFAULT_CODE_EXPIRE_SECONDS,
    DEFAULT_SSTOKEN_EXPIRE_SECONDS,
    GIPAuthConfig,
)

__all__ = [
    "DEFAULT_CODE_EXPIRE_SECONDS",
    "DEFAULT_SSTOKEN_EXPIRE_SECONDS",
    "GIPAuthConfig",
]
