"""Convenience builders and predicates for fixed-state messages."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import MessageValidationError
from .message import NotifyMessage, NotifyStatus

MessageT = TypeVar("MessageT", bound=NotifyMessage)

Payload = Mapping[str, object] | BaseModel | None


def stamp_status(
    status: NotifyStatus,
    data: Payload,
    message_type: type[MessageT],
) -> MessageT:
    """Build a message of ``message_type`` from a payload and a status.

    Payload fields are shallow-merged next to the status. The status is
    applied after the payload fields, so a ``status`` key in the payload is
    discarded rather than overriding the stamped status. This keeps
    ``NotifyFactory.success(data)`` always a ``SUCCESS`` message.

    Args:
        status: Status to stamp onto the message
        data: Mapping or pydantic model holding the payload fields
        message_type: Message model to validate the result into

    Returns:
        Validated, immutable message

    Raises:
        MessageValidationError: If the payload does not fit ``message_type``
    """
    if data is None:
        fields: dict[str, object] = {}
    elif isinstance(data, BaseModel):
        fields = data.model_dump()
    else:
        fields = dict(data)
    fields["status"] = status

    try:
        return message_type.model_validate(fields)
    except ValidationError as e:
        raise MessageValidationError(
            f"Payload does not fit {message_type.__name__} with status {status.value}",
            pydantic_error=e,
        ) from e


class NotifyFactory:
    """Builders that stamp a lifecycle status onto a payload."""

    @staticmethod
    def success(data: Payload = None, message_type: type[MessageT] = NotifyMessage) -> MessageT:  # pyright: ignore[reportAssignmentType]
        """Build a ``SUCCESS`` message."""
        return stamp_status(NotifyStatus.SUCCESS, data, message_type)

    @staticmethod
    def failure(data: Payload = None, message_type: type[MessageT] = NotifyMessage) -> MessageT:  # pyright: ignore[reportAssignmentType]
        """Build a ``FAILURE`` message."""
        return stamp_status(NotifyStatus.FAILURE, data, message_type)

    @staticmethod
    def in_progress(data: Payload = None, message_type: type[MessageT] = NotifyMessage) -> MessageT:  # pyright: ignore[reportAssignmentType]
        """Build an ``IN_PROGRESS`` message."""
        return stamp_status(NotifyStatus.IN_PROGRESS, data, message_type)

    @staticmethod
    def idle(data: Payload = None, message_type: type[MessageT] = NotifyMessage) -> MessageT:  # pyright: ignore[reportAssignmentType]
        """Build an ``IDLE`` message."""
        return stamp_status(NotifyStatus.IDLE, data, message_type)


class NotifyState:
    """Predicates classifying a message by its status."""

    @staticmethod
    def is_success(message: NotifyMessage) -> bool:
        return message.status == NotifyStatus.SUCCESS

    @staticmethod
    def is_failure(message: NotifyMessage) -> bool:
        return message.status == NotifyStatus.FAILURE

    @staticmethod
    def is_in_progress(message: NotifyMessage) -> bool:
        return message.status == NotifyStatus.IN_PROGRESS

    @staticmethod
    def is_idle(message: NotifyMessage) -> bool:
        return message.status == NotifyStatus.IDLE
