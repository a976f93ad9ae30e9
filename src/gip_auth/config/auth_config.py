"""GIPAuth configuration from environment variables or a YAML file."""
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from gip_auth.exceptions import ConfigurationError

DEFAULT_CODE_EXPIRE_SECONDS = 3600
DEFAULT_SSTOKEN_EXPIRE_SECONDS = 7200


class GIPAuthConfig(BaseModel):
    """
    Application identity and token lifetimes.

    Keys (environment variables or YAML):
        GIP_APP_ID: Application ID
        GIP_APP_SECRET: Application secret used as the HMAC key
        GIP_CODE_EXPIRE_SECONDS: Default code lifetime (default: 3600)
        GIP_SSTOKEN_EXPIRE_SECONDS: Default SSToken lifetime (default: 7200)
    """
    model_config = ConfigDict(
        str_strip_whitespace=True,
    )

    app_id: str = Field(..., min_length=1, description="Application ID")
    app_secret: SecretStr = Field(..., description="Application secret")
    code_expire_seconds: int = Field(
        default=DEFAULT_CODE_EXPIRE_SECONDS,
        gt=0,
        description="Default authentication code lifetime in seconds"
    )
    sstoken_expire_seconds: int = Field(
        default=DEFAULT_SSTOKEN_EXPIRE_SECONDS,
        gt=0,
        description="Default SSToken lifetime in seconds"
    )

    @classmethod
    def _from_mapping(cls, data: Dict[str, Any]) -> "GIPAuthConfig":
        app_id = data.get("GIP_APP_ID")
        app_secret = data.get("GIP_APP_SECRET")

        if not app_id:
            raise ConfigurationError("GIP_APP_ID is required")
        if not app_secret:
            raise ConfigurationError("GIP_APP_SECRET is required")

        values = {"app_id": str(app_id), "app_secret": str(app_secret)}
        if data.get("GIP_CODE_EXPIRE_SECONDS") is not None:
            values["code_expire_seconds"] = data["GIP_CODE_EXPIRE_SECONDS"]
        if data.get("GIP_SSTOKEN_EXPIRE_SECONDS") is not None:
            values["sstoken_expire_seconds"] = data["GIP_SSTOKEN_EXPIRE_SECONDS"]

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid GIPAuth configuration: {e}") from e

    @classmethod
    def from_env(cls) -> "GIPAuthConfig":
        """
        Load configuration from environment variables, reading a .env file first.

        Returns:
            GIPAuthConfig instance

        Raises:
            ConfigurationError: If the app ID or secret is missing, or a value is invalid
        """
        load_dotenv()

        keys = (
            "GIP_APP_ID",
            "GIP_APP_SECRET",
            "GIP_CODE_EXPIRE_SECONDS",
            "GIP_SSTOKEN_EXPIRE_SECONDS",
        )
        return cls._from_mapping({key: os.getenv(key) for key in keys})

    @classmethod
    def from_yaml(cls, config_path: Optional[str] = None) -> "GIPAuthConfig":
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML file. If None, uses GIP_CONFIG_PATH env var
                        or defaults to ./gip_auth.yaml

        Returns:
            GIPAuthConfig instance; falls back to ``from_env`` when the file does not exist

        Raises:
            ConfigurationError: If the file cannot be parsed or holds invalid values
        """
        if config_path is None:
            config_path = os.getenv("GIP_CONFIG_PATH", "gip_auth.yaml")

        if not os.path.exists(config_path):
            return cls.from_env()

        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigurationError(f"Failed to read {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"{config_path} must contain a mapping")

        return cls._from_mapping(config_data)
