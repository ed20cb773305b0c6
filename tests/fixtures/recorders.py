"""Recording handlers for notification tests."""

from __future__ import annotations

from typing import Callable

from reactive_notifier.models import StatusMessage


class CallRecorder:
    """Records handler invocations in the order they happen."""

    def __init__(self) -> None:
        """Initialize recorder."""
        self.calls: list[tuple[str, StatusMessage]] = []

    def handler(self, label: str) -> Callable[[StatusMessage], None]:
        """Build a handler that records ``label`` with each message."""

        def record(message: StatusMessage) -> None:
            self.calls.append((label, message))

        return record

    @property
    def labels(self) -> list[str]:
        """Labels of the recorded calls, in order."""
        return [label for label, _ in self.calls]

    @property
    def messages(self) -> list[StatusMessage]:
        """Messages of the recorded calls, in order."""
        return [message for _, message in self.calls]
