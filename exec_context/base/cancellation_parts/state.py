"""Internal state holder for abort signals.

Dataclass tracking whether a signal fired and with which reason. Only the
owning signal mutates it, under the signal's lock.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class State:
    """Internal state for one abort signal."""

    aborted: bool = False
    reason: Any = None


__all__ = ["State"]
