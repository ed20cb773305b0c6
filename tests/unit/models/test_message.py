"""Test suite for message models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from reactive_notifier.models import CustomNotifyMessage, NotifyMessage, NotifyStatus


class TestNotifyStatus:
    """Test cases for the lifecycle status enumeration."""

    def test_exactly_four_states(self) -> None:
        """Test the closed set of states."""
        assert [s.value for s in NotifyStatus] == ["SUCCESS", "FAILURE", "IN_PROGRESS", "IDLE"]

    def test_states_compare_equal_to_labels(self) -> None:
        """Test members equal their string labels."""
        assert NotifyStatus.IN_PROGRESS == "IN_PROGRESS"
        assert NotifyStatus("IDLE") is NotifyStatus.IDLE


class TestNotifyMessage:
    """Test cases for fixed-state messages."""

    def test_status_label_validated_into_enum(self) -> None:
        """Test a string status becomes the enum member."""
        message = NotifyMessage(status="SUCCESS", task_id="1")  # pyright: ignore[reportArgumentType]
        assert message.status is NotifyStatus.SUCCESS

    def test_status_required(self) -> None:
        """Test a message cannot be built without a status."""
        with pytest.raises(ValidationError):
            _ = NotifyMessage()  # pyright: ignore[reportCallIssue]

    def test_status_outside_domain_rejected(self) -> None:
        """Test validation rejects unknown statuses."""
        with pytest.raises(ValidationError):
            _ = NotifyMessage(status="PAUSED")  # pyright: ignore[reportArgumentType]

    def test_extra_fields_kept_as_payload(self) -> None:
        """Test open payload fields are readable as attributes and via payload."""
        message = NotifyMessage(status=NotifyStatus.FAILURE, task_id="7", attempts=3)

        assert message.task_id == "7"  # pyright: ignore[reportAttributeAccessIssue]
        assert message.payload == {"task_id": "7", "attempts": 3}

    def test_messages_are_immutable(self) -> None:
        """Test fields cannot be reassigned."""
        message = NotifyMessage(status=NotifyStatus.IDLE, task_id="1")
        with pytest.raises(ValidationError):
            message.status = NotifyStatus.SUCCESS  # pyright: ignore[reportAttributeAccessIssue]

    def test_equality_by_value(self) -> None:
        """Test messages with equal fields are equal."""
        first = NotifyMessage(status=NotifyStatus.IDLE, task_id="1")
        second = NotifyMessage(status=NotifyStatus.IDLE, task_id="1")
        assert first == second

    def test_typed_subclass(self) -> None:
        """Test subclasses declare payload fields."""

        class TaskNotification(NotifyMessage):
            task_id: str

        message = TaskNotification(status=NotifyStatus.SUCCESS, task_id="1")
        assert message.task_id == "1"
        with pytest.raises(ValidationError):
            _ = TaskNotification(status=NotifyStatus.SUCCESS)  # pyright: ignore[reportCallIssue]

    def test_str(self) -> None:
        """Test the string form names the status."""
        message = NotifyMessage(status=NotifyStatus.SUCCESS, task_id="1")
        assert "status='SUCCESS'" in str(message)
        assert "task_id" in str(message)


class TestCustomNotifyMessage:
    """Test cases for custom-state messages."""

    def test_any_label_accepted(self) -> None:
        """Test the status may be any string."""
        message = CustomNotifyMessage(status="LOADING", message="Fetching data...")
        assert message.status == "LOADING"
        assert message.payload == {"message": "Fetching data..."}

    def test_status_must_be_string(self) -> None:
        """Test non-string statuses are rejected."""
        with pytest.raises(ValidationError):
            _ = CustomNotifyMessage(status=None)  # pyright: ignore[reportArgumentType]
        with pytest.raises(ValidationError):
            _ = CustomNotifyMessage(status=3)  # pyright: ignore[reportArgumentType]
