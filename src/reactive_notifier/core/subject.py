"""Multicast broadcast primitive backing every notification channel."""

from __future__ import annotations

import logging
import threading
import uuid
from types import TracebackType
from typing import Callable, Generic, TypeVar, override

from ..config.models import HandlerErrorPolicy
from ..exceptions import NotificationHandlerError
from ..utils.logging import log_with_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Handle for a registered observer.

    Releasing the handle stops delivery and drops the reference to the
    observer's callbacks. Release is idempotent. The handle can be used as a
    context manager, which releases it on exit.
    """

    def __init__(self, teardown: Callable[[Subscription], None] | None = None) -> None:
        """Initialize subscription.

        Args:
            teardown: Called once, with this handle, on the first release
        """
        self.subscription_id: str = str(uuid.uuid4())
        self._teardown: Callable[[Subscription], None] | None = teardown
        self._closed: bool = False
        self._lock: threading.Lock = threading.Lock()

    @property
    def closed(self) -> bool:
        """Check if the subscription has been released."""
        return self._closed

    def unsubscribe(self) -> None:
        """Release the subscription."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            teardown, self._teardown = self._teardown, None

        if teardown is not None:
            teardown(self)

    def __enter__(self) -> Subscription:
        """Enter context manager."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit context manager, releasing the subscription."""
        self.unsubscribe()

    @override
    def __repr__(self) -> str:
        state = "closed" if self._closed else "active"
        return f"Subscription('{self.subscription_id}', {state})"


class _Observer(Generic[T]):
    """Pairs an observer callback with its subscription handle."""

    __slots__ = ("on_next", "subscription")

    def __init__(self, on_next: Callable[[T], object], subscription: Subscription) -> None:
        self.on_next: Callable[[T], object] = on_next
        self.subscription: Subscription = subscription


class Subject(Generic[T]):
    """Single-subject multicast channel.

    Values passed to :meth:`next` are delivered synchronously, in
    registration order, to the observers subscribed at the time of the call.
    There is no replay of earlier values.

    The observer list is guarded by a re-entrant lock held for the whole
    delivery, so concurrent producers are serialized while handlers may still
    subscribe, unsubscribe or emit from the delivering thread.
    """

    def __init__(self, error_policy: HandlerErrorPolicy = HandlerErrorPolicy.LOG) -> None:
        """Initialize subject.

        Args:
            error_policy: What to do when an observer raises
        """
        self.error_policy: HandlerErrorPolicy = error_policy
        self._observers: list[_Observer[T]] = []
        self._lock: threading.RLock = threading.RLock()

    @property
    def observer_count(self) -> int:
        """Number of active observers."""
        with self._lock:
            return len(self._observers)

    @property
    def has_observers(self) -> bool:
        """Check if any observer is subscribed."""
        return self.observer_count > 0

    def subscribe(self, on_next: Callable[[T], object]) -> Subscription:
        """Register an observer.

        Each call creates an independent subscription, even for the same
        callback.

        Args:
            on_next: Called with every value emitted after this call

        Returns:
            Subscription handle used to release the observer
        """
        subscription = Subscription(self._remove)
        with self._lock:
            self._observers.append(_Observer(on_next, subscription))
            count = len(self._observers)

        logger.debug(
            f"Registered observer {subscription.subscription_id}",
            extra={
                'subscription_id': subscription.subscription_id,
                'observer_count': count
            }
        )
        return subscription

    def next(self, value: T) -> None:
        """Deliver a value to the current observers.

        Args:
            value: Value to deliver

        Raises:
            NotificationHandlerError: If an observer fails and the error
                policy is PROPAGATE
        """
        with self._lock:
            # Observers added while delivering must not see this value
            snapshot = list(self._observers)

            for observer in snapshot:
                subscription = observer.subscription
                # Released earlier in this same delivery
                if subscription.closed:
                    continue

                try:
                    _ = observer.on_next(value)
                except Exception as e:
                    self._handle_observer_error(subscription, e)

    def _handle_observer_error(self, subscription: Subscription, error: Exception) -> None:
        """Log or raise an observer failure according to the error policy."""
        handler_error = NotificationHandlerError(
            f"Subscription {subscription.subscription_id} failed to handle notification: {error}",
            original_error=error,
            subscription_id=subscription.subscription_id,
        )

        if self.error_policy is HandlerErrorPolicy.PROPAGATE:
            raise handler_error from error

        log_with_context(
            logger,
            logging.ERROR,
            str(handler_error),
            extra={
                'subscription_id': subscription.subscription_id,
                'error': str(error)
            },
            exc_info=error,
        )

    def _remove(self, subscription: Subscription) -> None:
        """Drop the observer owning ``subscription``."""
        with self._lock:
            self._observers = [
                observer for observer in self._observers
                if observer.subscription is not subscription
            ]
            count = len(self._observers)

        logger.debug(
            f"Unregistered observer {subscription.subscription_id}",
            extra={
                'subscription_id': subscription.subscription_id,
                'observer_count': count
            }
        )
