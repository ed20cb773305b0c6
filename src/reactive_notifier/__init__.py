"""Reactive Notifier - typed in-process publish/subscribe notifications.

Producers push status-tagged messages into a channel; subscribers register
per-status handlers that run synchronously as each message is emitted.
Fixed-state channels use the four ``NotifyStatus`` lifecycle states, custom
channels use caller-declared labels, and group factories build several
independent channels in one call.
"""

from __future__ import annotations

from .config import (
    DuplicateKeyPolicy,
    HandlerErrorPolicy,
    NotifierSettings,
    get_default_settings,
    load_settings,
    set_default_settings,
)
from .core import (
    CustomCallbacks,
    CustomReactiveNotifier,
    NotificationStream,
    NotifierGroup,
    NotifyCallbacks,
    ReactiveNotifier,
    Subject,
    Subscription,
    create_custom_reactive_notifier,
    create_custom_reactive_notifier_group,
    create_reactive_notifier,
    create_reactive_notifier_group,
    handle_custom_notify_message,
    handle_notify_message,
)
from .exceptions import (
    DuplicateKeyError,
    MessageValidationError,
    NotificationHandlerError,
    NotifierError,
    UnknownStatusError,
)
from .models import (
    CustomNotifyMessage,
    NotifyFactory,
    NotifyMessage,
    NotifyState,
    NotifyStatus,
    StatusMessage,
)
from .utils.logging import configure_logging

__all__ = [
    # Channels
    "CustomReactiveNotifier",
    "ReactiveNotifier",
    "create_custom_reactive_notifier",
    "create_reactive_notifier",
    # Groups
    "NotifierGroup",
    "create_custom_reactive_notifier_group",
    "create_reactive_notifier_group",
    # Dispatch
    "CustomCallbacks",
    "NotifyCallbacks",
    "handle_custom_notify_message",
    "handle_notify_message",
    "NotificationStream",
    "Subject",
    "Subscription",
    # Messages
    "CustomNotifyMessage",
    "NotifyFactory",
    "NotifyMessage",
    "NotifyState",
    "NotifyStatus",
    "StatusMessage",
    # Configuration
    "DuplicateKeyPolicy",
    "HandlerErrorPolicy",
    "NotifierSettings",
    "get_default_settings",
    "load_settings",
    "set_default_settings",
    "configure_logging",
    # Errors
    "DuplicateKeyError",
    "MessageValidationError",
    "NotificationHandlerError",
    "NotifierError",
    "UnknownStatusError",
]
