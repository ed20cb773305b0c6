"""Notification streams returned by ``observe_notifications``."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar, override

from .subject import Subject, Subscription

T = TypeVar("T")


class NotificationStream(Generic[T]):
    """A channel's message flow with a dispatch operator attached.

    The stream is inert until :meth:`subscribe` is called; every call then
    registers an independent subscription on the channel.
    """

    def __init__(self, source: Subject[T], operator: Callable[[T], None]) -> None:
        """Initialize notification stream.

        Args:
            source: Broadcast primitive of the owning channel
            operator: Dispatch operator run for each message
        """
        self._source: Subject[T] = source
        self._operator: Callable[[T], None] = operator

    def subscribe(self, on_next: Callable[[T], object] | None = None) -> Subscription:
        """Start receiving messages.

        Args:
            on_next: Optional observer called with each message after the
                dispatch operator has run

        Returns:
            Subscription handle; release it to stop receiving
        """
        operator = self._operator
        if on_next is None:
            return self._source.subscribe(operator)

        def observe(message: T) -> None:
            operator(message)
            _ = on_next(message)

        return self._source.subscribe(observe)

    @override
    def __repr__(self) -> str:
        return f"NotificationStream(observers={self._source.observer_count})"
