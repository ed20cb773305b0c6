"""Routing of one emitted message to the matching callbacks.

The operators built here are stateless: each message is routed on its own,
the catch-all ``notify`` hook first, then the hook selected by the status.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from ..models.message import CustomNotifyMessage, NotifyMessage, NotifyStatus

MessageT = TypeVar("MessageT", bound=NotifyMessage)
CustomMessageT = TypeVar("CustomMessageT", bound=CustomNotifyMessage)


@dataclass(frozen=True)
class NotifyCallbacks(Generic[MessageT]):
    """Optional handlers for the four lifecycle states plus a catch-all."""

    success: Callable[[MessageT], object] | None = None
    failure: Callable[[MessageT], object] | None = None
    in_progress: Callable[[MessageT], object] | None = None
    idle: Callable[[MessageT], object] | None = None
    notify: Callable[[MessageT], object] | None = None


@dataclass(frozen=True)
class CustomCallbacks(Generic[CustomMessageT]):
    """Handlers keyed by custom status label, plus a catch-all.

    The catch-all is kept apart from ``handlers`` so that a state named
    ``"notify"`` is routed like any other state.
    """

    handlers: Mapping[str, Callable[[CustomMessageT], object]] = field(default_factory=dict)
    notify: Callable[[CustomMessageT], object] | None = None


def handle_notify_message(callbacks: NotifyCallbacks[MessageT]) -> Callable[[MessageT], None]:
    """Build the dispatch operator for a fixed-state callback table.

    Args:
        callbacks: Handlers to route to

    Returns:
        Function routing one message to ``callbacks``
    """

    def dispatch(message: MessageT) -> None:
        if callbacks.notify is not None:
            _ = callbacks.notify(message)

        handler: Callable[[MessageT], object] | None
        match message.status:
            case NotifyStatus.SUCCESS:
                handler = callbacks.success
            case NotifyStatus.FAILURE:
                handler = callbacks.failure
            case NotifyStatus.IN_PROGRESS:
                handler = callbacks.in_progress
            case NotifyStatus.IDLE:
                handler = callbacks.idle
            case _:
                # Only reachable through unvalidated construction
                handler = None

        if handler is not None:
            _ = handler(message)

    return dispatch


def handle_custom_notify_message(
    callbacks: CustomCallbacks[CustomMessageT],
) -> Callable[[CustomMessageT], None]:
    """Build the dispatch operator for a custom-state callback table.

    A status with no entry in ``callbacks.handlers`` reaches only the
    catch-all.

    Args:
        callbacks: Handlers to route to

    Returns:
        Function routing one message to ``callbacks``
    """
    handlers = dict(callbacks.handlers)

    def dispatch(message: CustomMessageT) -> None:
        if callbacks.notify is not None:
            _ = callbacks.notify(message)

        handler = handlers.get(message.status)
        if handler is not None:
            _ = handler(message)

    return dispatch
