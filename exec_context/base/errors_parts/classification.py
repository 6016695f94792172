"""
Abort reason classification helpers.

Maps the opaque value stored in ``AbortSignal.reason`` to a normalized
:class:`AbortKind` so logs and callers can tell a deadline from a manual or
cascaded abort without inspecting types themselves.
"""
from __future__ import annotations

import asyncio
from typing import Any

from .abort_kind import AbortKind
from .context_errors import AbortError, ContextTimeoutError


def classify_reason(reason: Any) -> AbortKind:
    """Classify an abort reason into a normalized :class:`AbortKind`.

    Precedence:
        1. ``None`` (signal not triggered).
        2. ``ContextTimeoutError`` and other timeout exceptions.
        3. ``asyncio.CancelledError``.
        4. ``AbortError`` (default / cascaded reason).
        5. ``CUSTOM`` for any caller-supplied value.
    """
    if reason is None:
        return AbortKind.NONE
    if isinstance(reason, (ContextTimeoutError, TimeoutError, asyncio.TimeoutError)):
        return AbortKind.TIMEOUT
    if isinstance(reason, asyncio.CancelledError):
        return AbortKind.CANCELLED
    if isinstance(reason, AbortError):
        return AbortKind.ABORTED
    return AbortKind.CUSTOM


__all__ = ["classify_reason"]
