"""Message models for notification channels."""

from __future__ import annotations

from enum import Enum
from typing import override

from pydantic import BaseModel, ConfigDict, Field


class NotifyStatus(str, Enum):
    """Closed set of lifecycle states for fixed-state channels."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    IN_PROGRESS = "IN_PROGRESS"
    IDLE = "IDLE"


class StatusMessage(BaseModel):
    """Immutable status-tagged record with an open set of payload fields.

    Payload fields not declared on the model are kept as extras, so both
    ``StatusMessage(status="X", task_id="1").task_id`` and subclasses that
    declare ``task_id: str`` explicitly are supported.
    """

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        frozen=True,
        extra="allow",
    )

    status: str = Field(
        ...,
        description="Discriminant used to route the message to a handler",
    )

    @property
    def payload(self) -> dict[str, object]:
        """Message fields without the status discriminant."""
        return self.model_dump(exclude={"status"}, warnings=False)

    @override
    def __str__(self) -> str:
        """String representation of the message."""
        status = self.status.value if isinstance(self.status, Enum) else self.status
        return f"{type(self).__name__}(status='{status}', payload={self.payload!r})"


class NotifyMessage(StatusMessage):
    """Message for fixed-state channels.

    Subclass to declare a typed payload::

        class TaskNotification(NotifyMessage):
            task_id: str
    """

    status: NotifyStatus = Field(  # pyright: ignore[reportIncompatibleVariableOverride, reportGeneralTypeIssues]
        ...,
        description="One of the four lifecycle states",
    )


class CustomNotifyMessage(StatusMessage):
    """Message for custom-state channels; status is any caller-declared label."""
