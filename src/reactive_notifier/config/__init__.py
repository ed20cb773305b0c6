"""Configuration for notification channels."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
    EnvLoadError,
    handle_config_error,
)
from .loader import DEFAULT_ENV_PREFIX, EnvLoader, YamlLoader, load_settings
from .models import (
    DuplicateKeyPolicy,
    HandlerErrorPolicy,
    NotifierSettings,
    get_default_settings,
    set_default_settings,
)

__all__ = [
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigValidationError",
    "EnvLoadError",
    "handle_config_error",
    # Loading
    "DEFAULT_ENV_PREFIX",
    "EnvLoader",
    "YamlLoader",
    "load_settings",
    # Models
    "DuplicateKeyPolicy",
    "HandlerErrorPolicy",
    "NotifierSettings",
    "get_default_settings",
    "set_default_settings",
]
