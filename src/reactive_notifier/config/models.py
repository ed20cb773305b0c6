"""Settings models for notification channels."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class HandlerErrorPolicy(str, Enum):
    """What a channel does when a subscriber's handler raises."""

    LOG = "log"
    PROPAGATE = "propagate"


class DuplicateKeyPolicy(str, Enum):
    """How group factories treat a key that appears more than once."""

    OVERWRITE = "overwrite"
    WARN = "warn"
    REJECT = "reject"


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
        frozen=False,
    )


class NotifierSettings(BaseConfig):
    """Behaviour switches shared by every channel built with these settings."""

    handler_errors: HandlerErrorPolicy = Field(
        default=HandlerErrorPolicy.LOG,
        description="Log and continue, or raise out of notify(), when a handler fails",
    )
    duplicate_keys: DuplicateKeyPolicy = Field(
        default=DuplicateKeyPolicy.WARN,
        description="Treatment of repeated keys in channel group factories",
    )
    strict_states: bool = Field(
        default=False,
        description="Reject statuses outside the declared states on custom channels",
    )
    log_level: str = Field(
        default="INFO",
        description="Level passed to configure_logging",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Invalid log level: {v}")
        return level


_default_settings: NotifierSettings | None = None


def get_default_settings() -> NotifierSettings:
    """Get the settings used by channels constructed without explicit settings."""
    global _default_settings
    if _default_settings is None:
        _default_settings = NotifierSettings()
    return _default_settings


def set_default_settings(settings: NotifierSettings | None) -> None:
    """Replace the process-wide default settings.

    Args:
        settings: New defaults, or None to restore the built-in defaults
    """
    global _default_settings
    _default_settings = settings
