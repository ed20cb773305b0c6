"""Exception hierarchy for the notification channels."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError


class NotifierError(Exception):
    """Base exception for all notifier errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:  # pyright: ignore[reportAny] # Flexible error context
        """Initialize NotifierError.

        Args:
            message: Error message
            context: Additional context information for debugging
        """
        super().__init__(message)
        self.context: dict[str, Any] = context or {}  # pyright: ignore[reportAny] # Flexible error context


class NotificationHandlerError(NotifierError):
    """Exception raised when a subscriber's handler fails."""

    def __init__(
        self,
        message: str,
        original_error: Exception | None = None,
        subscription_id: str | None = None,
    ) -> None:
        """Initialize handler error.

        Args:
            message: Error message
            original_error: The exception raised by the handler
            subscription_id: ID of the subscription whose handler failed
        """
        context: dict[str, Any] = {}  # pyright: ignore[reportAny]
        if subscription_id is not None:
            context["subscription_id"] = subscription_id
        if original_error is not None:
            context["original_error_type"] = type(original_error).__name__

        super().__init__(message, context)
        self.original_error: Exception | None = original_error
        self.subscription_id: str | None = subscription_id


class MessageValidationError(NotifierError):
    """Exception raised when input cannot be coerced into a message model."""

    def __init__(self, message: str, pydantic_error: ValidationError | None = None) -> None:
        """Initialize MessageValidationError.

        Args:
            message: Error message
            pydantic_error: Original Pydantic ValidationError
        """
        context: dict[str, Any] = {}  # pyright: ignore[reportAny]
        if pydantic_error is not None:
            context["validation_errors"] = [
                {
                    "field": ".".join(str(loc) for loc in err["loc"]),
                    "message": err["msg"],
                    "type": err["type"],
                }
                for err in pydantic_error.errors()
            ]

        super().__init__(message, context)
        self.pydantic_error: ValidationError | None = pydantic_error


class UnknownStatusError(NotifierError):
    """Exception raised in strict mode for a status outside the declared states."""

    def __init__(self, status: object, states: Iterable[str]) -> None:
        """Initialize UnknownStatusError.

        Args:
            status: The rejected status value
            states: The declared states of the channel
        """
        declared = tuple(states)
        super().__init__(
            f"Status {status!r} is not one of the declared states {list(declared)}",
            {"status": status, "states": declared},
        )
        self.status: object = status
        self.states: tuple[str, ...] = declared


class DuplicateKeyError(NotifierError):
    """Exception raised when a channel group is built with a repeated key."""

    def __init__(self, key: str) -> None:
        """Initialize DuplicateKeyError.

        Args:
            key: The repeated group key
        """
        super().__init__(f"Duplicate channel group key: {key!r}", {"key": key})
        self.key: str = key
