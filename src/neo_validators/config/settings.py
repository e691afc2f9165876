"""Validator settings.

Environment-driven defaults shared by every validator instance. Values are
read once per process; validators copy what they need at initialization.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import SupportedLocales, ValidationDefaults


class ValidatorSettings(BaseSettings):
    """Settings for neo-validators, overridable with NEO_VALIDATORS_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_VALIDATORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Bounds substituted for non-positive configuration
    default_max_size_mb: int = Field(default=ValidationDefaults.MAX_SIZE_IN_MB)
    default_max_file_count: int = Field(default=ValidationDefaults.MAX_FILE_COUNT)
    default_max_total_size_mb: int = Field(default=ValidationDefaults.MAX_TOTAL_SIZE_IN_MB)

    # Date handling
    reference_time_zone: str = Field(default="UTC")

    # Messages
    default_locale: str = Field(default=SupportedLocales.EN_US)

    # Content sniffing
    sniff_header_bytes: int = Field(default=2048)

    @field_validator(
        "default_max_size_mb",
        "default_max_file_count",
        "default_max_total_size_mb",
        "sniff_header_bytes",
    )
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Defaults must themselves be usable bounds."""
        if v <= 0:
            raise ValueError("must be a positive integer")
        return v

    @field_validator("reference_time_zone")
    @classmethod
    def validate_time_zone(cls, v: str) -> str:
        """Validate that the reference zone exists in the tz database."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

@lru_cache()
def get_settings() -> ValidatorSettings:
    """Get cached validator settings."""
    return ValidatorSettings()
