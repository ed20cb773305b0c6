"""Utility helpers."""

from __future__ import annotations

from .logging import (
    DispatchContextFilter,
    configure_logging,
    dispatch_context,
    generate_dispatch_id,
    get_channel,
    get_dispatch_id,
    get_logger,
    log_with_context,
)

__all__ = [
    "DispatchContextFilter",
    "configure_logging",
    "dispatch_context",
    "generate_dispatch_id",
    "get_channel",
    "get_dispatch_id",
    "get_logger",
    "log_with_context",
]
