"""
Normalized abort reason kinds (taxonomy).

Defines the `AbortKind` enumeration used when logging or inspecting why a
signal was triggered. Values are lowercase snake_case and are considered a
stable public contract for logging.
"""
from __future__ import annotations

from enum import Enum


class AbortKind(str, Enum):
    """Enumerated categories of abort reasons."""

    NONE = "none"
    ABORTED = "aborted"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    CUSTOM = "custom"


__all__ = ["AbortKind"]
