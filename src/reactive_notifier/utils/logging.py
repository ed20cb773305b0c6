"""Logging infrastructure with per-dispatch context tracking.

Every ``notify()`` call runs inside a dispatch context: a fresh dispatch ID
and the channel name are stored in ContextVars for the duration of the
broadcast, so any record logged by the library or by a subscriber's handler
can be traced back to the emission that triggered it.
"""

import contextvars
import logging
import sys
import uuid
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Final, override

from ..config.models import NotifierSettings, get_default_settings

dispatch_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "dispatch_id",
    default=None,
)

channel_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "channel",
    default=None,
)

DEFAULT_LOG_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(channel)s:%(dispatch_id)s] - %(message)s"
)


class DispatchContextFilter(logging.Filter):
    """Logging filter that adds the dispatch ID and channel to log records.

    Records logged outside a dispatch get ``"N/A"`` for both fields.
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add dispatch context to the log record.

        Args:
            record: Log record to enhance

        Returns:
            True to allow the record to be logged
        """
        dispatch_id = dispatch_id_var.get()
        channel = channel_var.get()
        record.dispatch_id = dispatch_id if dispatch_id is not None else "N/A"
        record.channel = channel if channel is not None else "N/A"
        return True


def configure_logging(
    settings: NotifierSettings | None = None,
    *,
    log_level: str | None = None,
    enable_console: bool = True,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> None:
    """Configure root logging with dispatch-aware console output.

    Args:
        settings: Settings whose log_level is applied (defaults to the
            process-wide settings)
        log_level: Logging level overriding the settings (DEBUG, INFO, WARNING, ERROR)
        enable_console: Enable console output handler
        log_format: Format string; may reference %(dispatch_id)s and %(channel)s

    Example:
        >>> configure_logging(load_settings("notifier.yaml"))
        >>> notifier.notify(NotifyFactory.success({"task_id": "1"}))
    """
    root_logger = logging.getLogger()

    if log_level is None:
        log_level = (settings or get_default_settings()).log_level
    level = getattr(logging, log_level.upper(), logging.INFO)
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(log_format))
        console_handler.addFilter(DispatchContextFilter())
        root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__ from calling module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def generate_dispatch_id() -> str:
    """Generate a new dispatch ID."""
    return uuid.uuid4().hex[:12]


def get_dispatch_id() -> str | None:
    """Get the ID of the dispatch currently running, if any."""
    return dispatch_id_var.get()


def get_channel() -> str | None:
    """Get the name of the channel currently dispatching, if any."""
    return channel_var.get()


@contextmanager
def dispatch_context(channel: str, dispatch_id: str | None = None) -> Iterator[str]:
    """Run a block as one dispatch of ``channel``.

    Nested dispatches (a handler emitting on another channel) get their own
    ID; the outer context is restored on exit.

    Args:
        channel: Name of the dispatching channel
        dispatch_id: ID to use (generated if None)

    Yields:
        The dispatch ID
    """
    current_id = dispatch_id or generate_dispatch_id()
    id_token = dispatch_id_var.set(current_id)
    channel_token = channel_var.set(channel)
    try:
        yield current_id
    finally:
        channel_var.reset(channel_token)
        dispatch_id_var.reset(id_token)


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    *,
    extra: Mapping[str, object] | None = None,
    exc_info: BaseException | bool | None = None,
) -> None:
    """Log a message with the current dispatch context attached.

    Args:
        logger: Logger instance to use
        level: Logging level (e.g., logging.INFO)
        message: Log message
        extra: Additional context fields to include in log
        exc_info: Exception information to attach, as for Logger.log
    """
    context = dict(extra) if extra else {}

    dispatch_id = get_dispatch_id()
    if dispatch_id:
        context["dispatch_id"] = dispatch_id
    channel = get_channel()
    if channel:
        context["channel"] = channel

    logger.log(level, message, extra=context, exc_info=exc_info)
