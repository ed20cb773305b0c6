"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from reactive_notifier.config.models import set_default_settings
from tests.fixtures.recorders import CallRecorder


@pytest.fixture(autouse=True)
def reset_default_settings() -> Generator[None, None, None]:
    """Restore the built-in default settings around every test."""
    set_default_settings(None)
    yield
    set_default_settings(None)


@pytest.fixture
def recorder() -> CallRecorder:
    """Provide a fresh call recorder."""
    return CallRecorder()


@pytest.fixture
def custom_states() -> list[str]:
    """Declared states used by custom-channel tests."""
    return ["LOADING", "ERROR", "COMPLETED"]
