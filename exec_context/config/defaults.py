"""Centralized defaults for the context layer.

Only constants live here so both the settings loader and tests can refer to
the same values without importing pydantic models.
"""

from __future__ import annotations

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_JSON = True
DEFAULT_FORWARD_PARENT_REASON = False

LOGGER_NAME = "exec_context"

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
    "DEFAULT_FORWARD_PARENT_REASON",
    "LOGGER_NAME",
]
