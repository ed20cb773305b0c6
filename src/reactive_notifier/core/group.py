"""Factories building keyed groups of independent channels."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from functools import reduce
from types import MappingProxyType
from typing import Any, Callable, Generic, TypeVar, override

from ..config.models import DuplicateKeyPolicy, NotifierSettings, get_default_settings
from ..exceptions import DuplicateKeyError
from ..models.message import CustomNotifyMessage, NotifyMessage
from .notifier import BaseNotifier, CustomReactiveNotifier, ReactiveNotifier

logger = logging.getLogger(__name__)

N = TypeVar("N", bound="BaseNotifier[Any]")
StatusT = TypeVar("StatusT", bound=str)


class NotifierGroup(Mapping[str, N], Generic[N]):
    """Immutable mapping of keys to independent channels.

    Members are reachable by key (``group["task_notifier"]``) or as
    attributes (``group.task_notifier``). Channels in a group share nothing:
    emitting on one never reaches subscribers of another.

    Keys that name a mapping method (``items``, ``get``, ...) are rejected.
    Keys starting with an underscore are reachable by key only.
    """

    def __init__(self, notifiers: Mapping[str, N]) -> None:
        """Initialize group.

        Args:
            notifiers: Channels keyed by name

        Raises:
            ValueError: If a key shadows a group attribute such as ``items``
        """
        reserved = sorted(key for key in notifiers if key in _RESERVED_NAMES)
        if reserved:
            raise ValueError(
                f"Channel group keys {reserved} clash with {type(self).__name__} attributes"
            )
        self._notifiers: Mapping[str, N] = MappingProxyType(dict(notifiers))

    @override
    def __getitem__(self, key: str) -> N:
        return self._notifiers[key]

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self._notifiers)

    @override
    def __len__(self) -> int:
        return len(self._notifiers)

    def __getattr__(self, name: str) -> N:
        # Only called when normal attribute lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._notifiers[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no channel named '{name}'"
            ) from None

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._notifiers)})"


# Keys that attribute access could never reach
_RESERVED_NAMES: frozenset[str] = frozenset(dir(NotifierGroup))


def build_group(
    keys: Iterable[str],
    build: Callable[[str], N],
    on_duplicate: DuplicateKeyPolicy,
) -> NotifierGroup[N]:
    """Fold ``keys`` into a group, building one channel per key.

    With the OVERWRITE and WARN policies a repeated key is bound to the
    channel built for its last occurrence, at the position of its first.

    Args:
        keys: Group keys, in order
        build: Builds the channel for one key
        on_duplicate: Treatment of repeated keys

    Returns:
        Immutable group

    Raises:
        DuplicateKeyError: If a key repeats and the policy is REJECT
        ValueError: If a key shadows a group attribute
    """

    def add(acc: Mapping[str, N], key: str) -> Mapping[str, N]:
        if key in acc:
            if on_duplicate is DuplicateKeyPolicy.REJECT:
                raise DuplicateKeyError(key)
            if on_duplicate is DuplicateKeyPolicy.WARN:
                logger.warning(
                    f"Duplicate channel group key '{key}'; the later channel replaces the earlier one",
                    extra={'key': key}
                )
        return {**acc, key: build(key)}

    group = NotifierGroup(reduce(add, keys, {}))
    logger.debug(
        f"Built channel group with {len(group)} channels",
        extra={'keys': list(group)}
    )
    return group


def create_reactive_notifier_group(
    keys: Iterable[str],
    message_types: Mapping[str, type[NotifyMessage]] | None = None,
    *,
    settings: NotifierSettings | None = None,
    on_duplicate: DuplicateKeyPolicy | None = None,
) -> NotifierGroup[ReactiveNotifier[NotifyMessage]]:
    """Create one fixed-state channel per key.

    Args:
        keys: Group keys
        message_types: Optional message model per key (NotifyMessage otherwise)
        settings: Behaviour switches shared by every member
        on_duplicate: Treatment of repeated keys (defaults to settings.duplicate_keys)

    Returns:
        Immutable group of independent channels

    Raises:
        DuplicateKeyError: If a key repeats and the policy is REJECT
        ValueError: If a key shadows a group attribute
    """
    resolved = settings or get_default_settings()
    types = message_types or {}

    def build(key: str) -> ReactiveNotifier[NotifyMessage]:
        return ReactiveNotifier(types.get(key, NotifyMessage), name=key, settings=resolved)

    return build_group(keys, build, on_duplicate or resolved.duplicate_keys)


def create_custom_reactive_notifier_group(
    keys: Iterable[str],
    states: Iterable[StatusT],
    message_types: Mapping[str, type[CustomNotifyMessage]] | None = None,
    *,
    strict: bool | None = None,
    settings: NotifierSettings | None = None,
    on_duplicate: DuplicateKeyPolicy | None = None,
) -> NotifierGroup[CustomReactiveNotifier[CustomNotifyMessage, StatusT]]:
    """Create one custom-state channel per key, all sharing the declared states.

    Args:
        keys: Group keys
        states: Declared status labels
        message_types: Optional message model per key (CustomNotifyMessage otherwise)
        strict: Reject undeclared statuses (defaults to settings.strict_states)
        settings: Behaviour switches shared by every member
        on_duplicate: Treatment of repeated keys (defaults to settings.duplicate_keys)

    Returns:
        Immutable group of independent channels

    Raises:
        DuplicateKeyError: If a key repeats and the policy is REJECT
        ValueError: If a key shadows a group attribute
    """
    resolved = settings or get_default_settings()
    types = message_types or {}
    declared = tuple(states)

    def build(key: str) -> CustomReactiveNotifier[CustomNotifyMessage, StatusT]:
        return CustomReactiveNotifier(
            declared,
            types.get(key, CustomNotifyMessage),
            name=key,
            strict=strict,
            settings=resolved,
        )

    return build_group(keys, build, on_duplicate or resolved.duplicate_keys)
