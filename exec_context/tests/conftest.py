"""Pytest configuration for the context test suite.

Keeps settings isolated between tests: environment overrides applied through
``monkeypatch`` must not leak into the process-wide settings cache.
"""

from __future__ import annotations

from typing import Iterator

import pytest

from exec_context.config import reset_settings_cache
from exec_context.config.env import ENV_VARS


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Clear known env vars and the settings cache around every test."""

    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


@pytest.fixture()
def forward_parent_reason(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Enable reason forwarding on cascades for the duration of a test."""

    monkeypatch.setenv("EXEC_CONTEXT_FORWARD_PARENT_REASON", "1")
    yield
