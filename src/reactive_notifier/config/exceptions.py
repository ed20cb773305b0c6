"""Error handling for the configuration system."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from ..exceptions import NotifierError

logger = logging.getLogger(__name__)


class ConfigError(NotifierError):
    """Base exception for all configuration-related errors."""


class ConfigLoadError(ConfigError):
    """Exception raised when a configuration file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigLoadError.

        Args:
            message: Error message
            file_path: Path to the configuration file that failed to load
            context: Additional context information
        """
        full_context = context or {}
        if file_path is not None:
            full_context["file_path"] = file_path

        super().__init__(message, full_context)
        self.file_path: str | None = file_path


class EnvLoadError(ConfigError):
    """Exception raised when environment variable loading fails."""

    def __init__(
        self,
        message: str,
        env_var: str | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible config error context
    ) -> None:
        """Initialize EnvLoadError.

        Args:
            message: Error message
            env_var: Environment variable name that caused the error
            context: Additional context information
        """
        full_context = context or {}
        if env_var is not None:
            full_context["env_var"] = env_var

        super().__init__(message, full_context)
        self.env_var: str | None = env_var


class ConfigValidationError(ConfigError):
    """Exception raised when settings fail validation."""

    def __init__(
        self,
        message: str,
        pydantic_error: ValidationError | None = None,
        context: dict[str, Any] | None = None,  # pyright: ignore[reportAny] # Flexible config error context
    ) -> None:
        """Initialize ConfigValidationError.

        Args:
            message: Error message
            pydantic_error: Original Pydantic ValidationError
            context: Additional context information
        """
        full_context = context or {}
        if pydantic_error is not None:
            full_context["validation_errors"] = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                    "input": err.get("input"),
                }
                for err in pydantic_error.errors()
            ]

        super().__init__(message, full_context)
        self.pydantic_error: ValidationError | None = pydantic_error


def handle_config_error(error: Exception, operation: str) -> ConfigError:
    """Wrap configuration errors with consistent error types.

    Args:
        error: Original exception
        operation: Description of the operation that failed

    Returns:
        Wrapped ConfigError instance
    """
    logger.debug(f"Configuration error during {operation}: {error}", exc_info=True)

    if isinstance(error, ConfigError):
        return error

    if isinstance(error, ValidationError):
        return ConfigValidationError(
            f"Configuration validation failed during {operation}",
            pydantic_error=error,
        )

    wrapped_error = ConfigError(
        f"Configuration error during {operation}: {error}",
        context={"operation": operation, "original_error_type": type(error).__name__},
    )
    wrapped_error.__cause__ = error
    return wrapped_error
