"""Fixed-state and custom-state notification channels."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Callable, Generic, TypeVar, cast, override

from pydantic import BaseModel, ValidationError

from ..config.models import NotifierSettings, get_default_settings
from ..exceptions import MessageValidationError, UnknownStatusError
from ..models.message import CustomNotifyMessage, NotifyMessage, NotifyStatus, StatusMessage
from ..utils.logging import dispatch_context
from .dispatch import (
    CustomCallbacks,
    NotifyCallbacks,
    handle_custom_notify_message,
    handle_notify_message,
)
from .stream import NotificationStream
from .subject import Subject, Subscription

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=StatusMessage)
MessageT = TypeVar("MessageT", bound=NotifyMessage)
CustomMessageT = TypeVar("CustomMessageT", bound=CustomNotifyMessage)
StatusT = TypeVar("StatusT", bound=str)


def _only_status_invalid(error: ValidationError) -> bool:
    """Check if every error is a present but unrecognized status value."""
    return all(
        detail["loc"] == ("status",) and detail["type"] != "missing"
        for detail in error.errors()
    )


class BaseNotifier(Generic[M]):
    """Shared emit side of both channel flavors.

    A channel owns exactly one broadcast primitive and routes only the
    messages passed to its own :meth:`notify`.
    """

    def __init__(
        self,
        message_type: type[M],
        name: str,
        settings: NotifierSettings | None = None,
    ) -> None:
        """Initialize channel.

        Args:
            message_type: Model used to coerce mapping input
            name: Channel name used in log records
            settings: Behaviour switches (defaults to the process-wide settings)
        """
        self.message_type: type[M] = message_type
        self.name: str = name
        self.settings: NotifierSettings = settings or get_default_settings()
        self._subject: Subject[M] = Subject(self.settings.handler_errors)

    @property
    def subscriber_count(self) -> int:
        """Number of active subscriptions."""
        return self._subject.observer_count

    def notify(self, message: M | Mapping[str, object]) -> None:
        """Broadcast a message to the current subscribers.

        Returns once every subscription registered before the call has run
        its handlers.

        Args:
            message: Message, or a mapping coerced into ``message_type``

        Raises:
            MessageValidationError: If a mapping does not fit ``message_type``
            NotificationHandlerError: If a handler fails and the error policy
                is PROPAGATE
        """
        coerced = self._coerce(message)
        self._check_status(coerced)

        with dispatch_context(self.name) as dispatch_id:
            logger.debug(
                f"Dispatching notification on '{self.name}'",
                extra={
                    'channel': self.name,
                    'dispatch_id': dispatch_id,
                    'observer_count': self._subject.observer_count
                }
            )
            self._subject.next(coerced)

    def emit(self, message: M | Mapping[str, object]) -> None:
        """Alias of :meth:`notify`."""
        self.notify(message)

    def _check_status(self, message: M) -> None:
        """Hook for status validation before broadcasting."""

    def _coerce(self, message: M | Mapping[str, object]) -> M:
        """Return ``message`` as an instance of ``message_type``.

        Instances are passed through untouched, so messages built without
        validation keep whatever status they carry.
        """
        if isinstance(message, self.message_type):
            return message

        if isinstance(message, BaseModel):
            data: Mapping[str, object] = message.model_dump()
        elif isinstance(message, Mapping):
            data = message
        else:
            raise MessageValidationError(
                f"Cannot build {self.message_type.__name__} from {type(message).__name__}"
            )

        try:
            return self._validate(data)
        except ValidationError as e:
            raise MessageValidationError(
                f"Notification for '{self.name}' does not fit {self.message_type.__name__}",
                pydantic_error=e,
            ) from e

    def _validate(self, data: Mapping[str, object]) -> M:
        """Validate mapping input into ``message_type``."""
        return self.message_type.model_validate(data)

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}('{self.name}', "
            f"message_type={self.message_type.__name__}, subscribers={self.subscriber_count})"
        )


class ReactiveNotifier(BaseNotifier[MessageT]):
    """Channel whose messages carry one of the four lifecycle states.

    Example:
        >>> notifier = create_reactive_notifier()
        >>> subscription = notifier.subscribe(success=print)
        >>> notifier.notify(NotifyFactory.success({"message": "done"}))
        >>> subscription.unsubscribe()
    """

    def __init__(
        self,
        message_type: type[MessageT] = NotifyMessage,  # pyright: ignore[reportAssignmentType]
        name: str = "notifier",
        settings: NotifierSettings | None = None,
    ) -> None:
        super().__init__(message_type, name, settings)

    @override
    def _validate(self, data: Mapping[str, object]) -> MessageT:
        """Validate mapping input, keeping a status outside the lifecycle states.

        A present status that is not a ``NotifyStatus`` is kept as given, so
        the message reaches only the catch-all handler. Payload fields are
        still validated.
        """
        try:
            return self.message_type.model_validate(data)
        except ValidationError as e:
            if not _only_status_invalid(e):
                raise

        # Validate the payload under a placeholder, then restore the raw status
        validated = self.message_type.model_validate({**data, "status": NotifyStatus.IDLE})
        return validated.model_copy(update={"status": data["status"]})

    def observe_notifications(
        self,
        callbacks: NotifyCallbacks[MessageT] | None = None,
        **handlers: Callable[[MessageT], object] | None,
    ) -> NotificationStream[MessageT]:
        """Build a stream routing messages to per-status handlers.

        Handlers are given as a ``NotifyCallbacks`` table, as keyword
        arguments (``success``, ``failure``, ``in_progress``, ``idle``,
        ``notify``), or both, keywords taking precedence.

        Args:
            callbacks: Callback table
            **handlers: Individual handlers

        Returns:
            Stream that starts receiving once subscribed
        """
        table: NotifyCallbacks[MessageT] = callbacks or NotifyCallbacks()
        if handlers:
            table = replace(table, **handlers)
        return NotificationStream(self._subject, handle_notify_message(table))

    def subscribe(
        self,
        callbacks: NotifyCallbacks[MessageT] | None = None,
        **handlers: Callable[[MessageT], object] | None,
    ) -> Subscription:
        """Subscribe per-status handlers; see :meth:`observe_notifications`."""
        return self.observe_notifications(callbacks, **handlers).subscribe()


class CustomReactiveNotifier(BaseNotifier[CustomMessageT], Generic[CustomMessageT, StatusT]):
    """Channel whose messages carry caller-declared status labels.

    The declared states type the callback table. They are checked at runtime
    only in strict mode; otherwise a status outside them reaches only the
    catch-all handler.
    """

    def __init__(
        self,
        states: Iterable[StatusT],
        message_type: type[CustomMessageT] = CustomNotifyMessage,  # pyright: ignore[reportAssignmentType]
        name: str = "custom_notifier",
        strict: bool | None = None,
        settings: NotifierSettings | None = None,
    ) -> None:
        """Initialize custom-state channel.

        Args:
            states: Declared status labels
            message_type: Model used to coerce mapping input
            name: Channel name used in log records
            strict: Reject undeclared statuses (defaults to settings.strict_states)
            settings: Behaviour switches

        Raises:
            ValueError: If strict mode is requested with no declared states
        """
        super().__init__(message_type, name, settings)
        self.states: tuple[StatusT, ...] = tuple(states)
        self.strict: bool = self.settings.strict_states if strict is None else strict
        self._state_set: frozenset[str] = frozenset(self.states)

        if self.strict and not self.states:
            raise ValueError(f"Strict channel '{name}' needs at least one declared state")

    def observe_notifications(
        self,
        handlers: CustomCallbacks[CustomMessageT] | Mapping[StatusT, Callable[[CustomMessageT], object]] | None = None,
        *,
        notify: Callable[[CustomMessageT], object] | None = None,
    ) -> NotificationStream[CustomMessageT]:
        """Build a stream routing messages to handlers keyed by status.

        Args:
            handlers: ``CustomCallbacks`` table, or a mapping of status to handler
            notify: Catch-all handler, called first for every message

        Returns:
            Stream that starts receiving once subscribed

        Raises:
            UnknownStatusError: In strict mode, for a key outside the declared states
        """
        if isinstance(handlers, CustomCallbacks):
            table = cast(CustomCallbacks[CustomMessageT], handlers)
            if notify is not None:
                table = replace(table, notify=notify)
        else:
            table = CustomCallbacks(dict(handlers or {}), notify)

        if self.strict:
            for status in table.handlers:
                if status not in self._state_set:
                    raise UnknownStatusError(status, self.states)

        return NotificationStream(self._subject, handle_custom_notify_message(table))

    def subscribe(
        self,
        handlers: CustomCallbacks[CustomMessageT] | Mapping[StatusT, Callable[[CustomMessageT], object]] | None = None,
        *,
        notify: Callable[[CustomMessageT], object] | None = None,
    ) -> Subscription:
        """Subscribe handlers keyed by status; see :meth:`observe_notifications`."""
        return self.observe_notifications(handlers, notify=notify).subscribe()

    @override
    def _check_status(self, message: CustomMessageT) -> None:
        if self.strict and message.status not in self._state_set:
            raise UnknownStatusError(message.status, self.states)


def create_reactive_notifier(
    message_type: type[MessageT] = NotifyMessage,  # pyright: ignore[reportAssignmentType]
    *,
    name: str = "notifier",
    settings: NotifierSettings | None = None,
) -> ReactiveNotifier[MessageT]:
    """Create a single fixed-state channel.

    Args:
        message_type: Message model, usually a NotifyMessage subclass
            declaring the payload fields
        name: Channel name used in log records
        settings: Behaviour switches

    Returns:
        Empty channel
    """
    return ReactiveNotifier(message_type, name=name, settings=settings)


def create_custom_reactive_notifier(
    states: Iterable[StatusT],
    message_type: type[CustomMessageT] = CustomNotifyMessage,  # pyright: ignore[reportAssignmentType]
    *,
    name: str = "custom_notifier",
    strict: bool | None = None,
    settings: NotifierSettings | None = None,
) -> CustomReactiveNotifier[CustomMessageT, StatusT]:
    """Create a single custom-state channel.

    Args:
        states: Declared status labels
        message_type: Message model, usually a CustomNotifyMessage subclass
        name: Channel name used in log records
        strict: Reject undeclared statuses (defaults to settings.strict_states)
        settings: Behaviour switches

    Returns:
        Empty channel
    """
    return CustomReactiveNotifier(
        states, message_type, name=name, strict=strict, settings=settings
    )
