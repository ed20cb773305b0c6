"""Channels, dispatch operators and the broadcast primitive."""

from __future__ import annotations

from .dispatch import (
    CustomCallbacks,
    NotifyCallbacks,
    handle_custom_notify_message,
    handle_notify_message,
)
from .group import (
    NotifierGroup,
    build_group,
    create_custom_reactive_notifier_group,
    create_reactive_notifier_group,
)
from .notifier import (
    BaseNotifier,
    CustomReactiveNotifier,
    ReactiveNotifier,
    create_custom_reactive_notifier,
    create_reactive_notifier,
)
from .stream import NotificationStream
from .subject import Subject, Subscription

__all__ = [
    # Broadcast primitive
    "Subject",
    "Subscription",
    "NotificationStream",
    # Dispatch
    "CustomCallbacks",
    "NotifyCallbacks",
    "handle_custom_notify_message",
    "handle_notify_message",
    # Channels
    "BaseNotifier",
    "CustomReactiveNotifier",
    "ReactiveNotifier",
    "create_custom_reactive_notifier",
    "create_reactive_notifier",
    # Groups
    "NotifierGroup",
    "build_group",
    "create_custom_reactive_notifier_group",
    "create_reactive_notifier_group",
]
