"""Message models, builders and predicates."""

from __future__ import annotations

from .factory import NotifyFactory, NotifyState, stamp_status
from .message import CustomNotifyMessage, NotifyMessage, NotifyStatus, StatusMessage

__all__ = [
    "CustomNotifyMessage",
    "NotifyFactory",
    "NotifyMessage",
    "NotifyState",
    "NotifyStatus",
    "StatusMessage",
    "stamp_status",
]
