"""
Exception types carried as abort reasons.

``AbortError`` is the reason recorded when a controller is aborted without an
explicit reason (including cascades from a parent). ``ContextTimeoutError`` is
recorded exclusively by ``with_timeout`` when its deadline elapses. Neither is
ever raised by the composition layer itself; they surface only through
``AbortSignal.reason`` or an explicit ``throw_if_aborted()`` call.
"""
from __future__ import annotations

from typing import Any, Optional


class ContextError(Exception):
    """Base class for errors originating from the context layer."""


class AbortError(ContextError):
    """Default abort reason: the operation was aborted.

    Attributes:
        reason: Optional non-exception reason that was wrapped when
            ``throw_if_aborted`` had to turn an arbitrary value into an error.
    """

    name = "AbortError"

    def __init__(self, message: str = "This operation was aborted", *, reason: Any = None) -> None:
        super().__init__(message)
        self.reason = reason


class ContextTimeoutError(ContextError, TimeoutError):
    """Abort reason recorded when a ``with_timeout`` deadline elapses."""

    name = "TimeoutError"

    def __init__(self, timeout_ms: Optional[float] = None) -> None:
        super().__init__("Timeout")
        self.timeout_ms = timeout_ms

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"ContextTimeoutError(timeout_ms={self.timeout_ms!r})"


__all__ = ["ContextError", "AbortError", "ContextTimeoutError"]
