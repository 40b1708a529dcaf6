"""Settings management using Pydantic for type validation and configuration."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..api.fetcher import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)

ENV_PREFIX = "HOLIDAYCAL_"

PROVINCE_CODES = (
    "AB", "BC", "MB", "NB", "NL", "NS", "NT", "NU", "ON", "PE", "QC", "SK", "YT",
)

DEFAULT_PROVINCE = "BC"


def default_config_file() -> Path:
    """Path of the user configuration file."""
    return Path.home() / ".config" / "holidaycal" / "config.yaml"


class HolidayCalSettings(BaseSettings):
    """Application settings with environment variable and YAML file support."""

    # Private attributes
    _explicit_args: set = PrivateAttr(default_factory=set)

    province: str = Field(default=DEFAULT_PROVINCE, description="Default province code")
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL, description="Base URL of the holiday provider API"
    )
    request_timeout: float = Field(default=10.0, description="HTTP timeout in seconds")
    color: Optional[bool] = Field(
        default=None, description="Colorize holiday and today lines (None: only on a terminal)"
    )
    log_level: str = Field(
        default="WARNING",
        description="Log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    config_file: Optional[Path] = Field(default=None, description="YAML configuration file")

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    @field_validator("province")
    @classmethod
    def _normalize_province(cls, value: str) -> str:
        code = value.strip().upper()
        if code not in PROVINCE_CODES:
            raise ValueError(
                f"Unknown province code '{value}'. Use one of: {', '.join(PROVINCE_CODES)}"
            )
        return code

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper()

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)

        # Fields given as kwargs or read from the environment or .env file
        self._explicit_args = set(self.model_fields_set)

        # Load YAML configuration after basic initialization
        self._load_yaml_config()

    def _find_config_file(self) -> Optional[Path]:
        """Find the YAML configuration file, if any."""
        if self.config_file is not None:
            if not self.config_file.exists():
                logger.warning(f"Config file {self.config_file} does not exist, ignoring it")
                return None
            return self.config_file

        user_config = default_config_file()
        if user_config.exists():
            return user_config

        return None

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if it exists.

        Values from the file only fill fields that were not given explicitly
        or through the environment.
        """
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                return
            if not isinstance(config_data, dict):
                raise ValueError("top-level YAML value must be a mapping")

            for name in ("province", "api_base_url", "request_timeout", "color", "log_level"):
                if name in config_data and name not in self._explicit_args:
                    setattr(self, name, config_data[name])

            logger.debug(f"Loaded configuration from {config_file}")

        except Exception as e:
            # Don't fail if YAML loading fails, just continue with defaults/env vars
            logger.warning(f"Could not load YAML config from {config_file}: {e}")


# Global settings management
_settings_instance: Optional[HolidayCalSettings] = None


def get_settings(**overrides: Any) -> HolidayCalSettings:
    """Get the global settings instance, creating it lazily if needed.

    Args:
        **overrides: Explicit values used when the instance is first created

    Returns:
        HolidayCalSettings: The global settings instance
    """
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = HolidayCalSettings(**overrides)
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
