"""Test suite for message builders and predicates."""

from __future__ import annotations

from typing import Callable

import pytest
from pydantic import BaseModel

from reactive_notifier.exceptions import MessageValidationError
from reactive_notifier.models import NotifyFactory, NotifyMessage, NotifyState, NotifyStatus

PREDICATES: dict[NotifyStatus, Callable[[NotifyMessage], bool]] = {
    NotifyStatus.SUCCESS: NotifyState.is_success,
    NotifyStatus.FAILURE: NotifyState.is_failure,
    NotifyStatus.IN_PROGRESS: NotifyState.is_in_progress,
    NotifyStatus.IDLE: NotifyState.is_idle,
}


class TaskNotification(NotifyMessage):
    """Message with a typed payload."""

    task_id: str


class TaskPayload(BaseModel):
    """Payload given as a pydantic model."""

    task_id: str
    progress: float = 0.0


class TestNotifyFactory:
    """Test cases for NotifyFactory builders."""

    def test_success_round_trip(self) -> None:
        """Test success() stamps the status and keeps the payload."""
        message = NotifyFactory.success({"taskId": "1"})

        assert message.status is NotifyStatus.SUCCESS
        assert message.taskId == "1"  # pyright: ignore[reportAttributeAccessIssue]
        assert NotifyState.is_success(message) is True
        assert NotifyState.is_failure(message) is False
        assert NotifyState.is_in_progress(message) is False
        assert NotifyState.is_idle(message) is False

    @pytest.mark.parametrize(
        ("build", "status"),
        [
            (NotifyFactory.success, NotifyStatus.SUCCESS),
            (NotifyFactory.failure, NotifyStatus.FAILURE),
            (NotifyFactory.in_progress, NotifyStatus.IN_PROGRESS),
            (NotifyFactory.idle, NotifyStatus.IDLE),
        ],
    )
    def test_each_builder_stamps_its_status(
        self, build: Callable[..., NotifyMessage], status: NotifyStatus
    ) -> None:
        """Test every builder produces its own status."""
        message = build({"task_id": "1"})
        assert message.status is status
        assert message.payload == {"task_id": "1"}

    def test_no_payload(self) -> None:
        """Test builders work without a payload."""
        message = NotifyFactory.idle()
        assert message.status is NotifyStatus.IDLE
        assert message.payload == {}

    def test_stamped_status_wins(self) -> None:
        """Test a status key in the payload cannot override the builder."""
        message = NotifyFactory.failure({"status": "SUCCESS", "reason": "timeout"})
        assert message.status is NotifyStatus.FAILURE
        assert message.payload == {"reason": "timeout"}

    def test_payload_not_mutated(self) -> None:
        """Test the caller's payload mapping is left untouched."""
        payload = {"task_id": "1"}
        _ = NotifyFactory.success(payload)
        assert payload == {"task_id": "1"}

    def test_pydantic_payload(self) -> None:
        """Test a pydantic model is shallow-merged like a mapping."""
        message = NotifyFactory.in_progress(TaskPayload(task_id="5", progress=0.5))
        assert message.payload == {"task_id": "5", "progress": 0.5}

    def test_typed_message(self) -> None:
        """Test builders validate into the requested model."""
        message = NotifyFactory.success({"task_id": "1"}, TaskNotification)
        assert isinstance(message, TaskNotification)
        assert message.task_id == "1"

    def test_typed_message_rejects_bad_payload(self) -> None:
        """Test a payload missing declared fields raises."""
        with pytest.raises(MessageValidationError) as exc_info:
            _ = NotifyFactory.success({"other": 1}, TaskNotification)

        assert exc_info.value.context["validation_errors"][0]["field"] == "task_id"


class TestNotifyState:
    """Test cases for status predicates."""

    @pytest.mark.parametrize("status", list(NotifyStatus))
    def test_exactly_one_predicate_holds(self, status: NotifyStatus) -> None:
        """Test predicates partition the four states."""
        message = NotifyMessage(status=status)
        results = {s: predicate(message) for s, predicate in PREDICATES.items()}
        assert results == {s: s is status for s in NotifyStatus}

    def test_unrecognized_status_matches_nothing(self) -> None:
        """Test no predicate holds for an out-of-domain status."""
        message = NotifyMessage.model_construct(status="PAUSED")
        assert not any(predicate(message) for predicate in PREDICATES.values())
