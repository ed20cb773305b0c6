"""Test suite for notifier exceptions."""

from __future__ import annotations

from pydantic import ValidationError

from reactive_notifier.exceptions import (
    DuplicateKeyError,
    MessageValidationError,
    NotificationHandlerError,
    NotifierError,
    UnknownStatusError,
)
from reactive_notifier.models import NotifyMessage


class TestNotifierErrors:
    """Test cases for the exception hierarchy."""

    def test_all_derive_from_notifier_error(self) -> None:
        """Test every error shares the base class."""
        for error_type in (DuplicateKeyError, MessageValidationError, NotificationHandlerError, UnknownStatusError):
            assert issubclass(error_type, NotifierError)

    def test_handler_error_context(self) -> None:
        """Test the original error and subscription are recorded."""
        original = ValueError("bad")
        error = NotificationHandlerError("failed", original_error=original, subscription_id="sub-1")

        assert error.original_error is original
        assert error.context == {"subscription_id": "sub-1", "original_error_type": "ValueError"}

    def test_message_validation_error_context(self) -> None:
        """Test pydantic details are flattened into the context."""
        try:
            _ = NotifyMessage.model_validate({"status": "PAUSED"})
        except ValidationError as e:
            error = MessageValidationError("invalid", pydantic_error=e)
        else:
            raise AssertionError("validation unexpectedly succeeded")

        assert error.context["validation_errors"][0]["field"] == "status"

    def test_unknown_status_error(self) -> None:
        """Test the rejected status and declared states are kept."""
        error = UnknownStatusError("UNKNOWN", ["A", "B"])

        assert error.status == "UNKNOWN"
        assert error.states == ("A", "B")
        assert "UNKNOWN" in str(error)

    def test_duplicate_key_error(self) -> None:
        """Test the repeated key is kept."""
        error = DuplicateKeyError("task_notifier")
        assert error.key == "task_notifier"
        assert error.context == {"key": "task_notifier"}
