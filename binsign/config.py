"""Configuration management with Pydantic settings."""

from __future__ import annotations

import logging

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_COMPRESSION_LEVEL = -7
MAX_COMPRESSION_LEVEL = 22
DEFAULT_COMPRESSION_LEVEL = 22

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class Settings(BaseSettings):
    """binsign configuration settings.

    Precedence: CLI flag > environment variable > .env file > defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="BINSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    compression_level: int = Field(
        default=DEFAULT_COMPRESSION_LEVEL,
        ge=MIN_COMPRESSION_LEVEL,
        le=MAX_COMPRESSION_LEVEL,
        description="Default zstd compression level used when signing",
    )

    sign_suffix: str = Field(
        default=".sig",
        min_length=1,
        description="Suffix appended to the input path when no bundle path is given",
    )

    verify_suffix: str = Field(
        default=".ver",
        min_length=1,
        description="Suffix appended to the bundle path when no output path is given",
    )

    hash_threads: int = Field(
        default=-1,
        ge=-1,
        description="Worker threads for BLAKE3 hashing (-1 = automatic, 1 = single-threaded)",
    )

    log_level: str = Field(
        default="WARNING",
        validation_alias=AliasChoices("BINSIGN_LOG_LEVEL", "LOG_LEVEL", "log_level"),
        description="Root log level (DEBUG, INFO, WARNING, ERROR)",
    )

    verbose: bool = Field(
        default=False,
        description="Force INFO logging regardless of log_level",
    )

    @field_validator("hash_threads")
    @classmethod
    def _reject_zero_threads(cls, value: int) -> int:
        if value == 0:
            raise ValueError("hash_threads must be -1 (automatic) or a positive integer")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def get_log_level(self) -> int:
        """Return the effective numeric log level."""
        if self.verbose:
            return min(logging.INFO, logging.getLevelName(self.log_level))
        return logging.getLevelName(self.log_level)


def configure_logging(settings: Settings) -> None:
    """Configure root logging from ``settings``.

    A stderr handler is installed only if the root logger has none; the level
    is always applied so ``--verbose`` takes effect on repeated invocations.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)
    root.setLevel(settings.get_log_level())


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance (useful for testing)."""
    global _settings
    _settings = settings
