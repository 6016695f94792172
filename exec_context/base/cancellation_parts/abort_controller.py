"""Cancellation controller: the single owner able to trigger a signal."""

from __future__ import annotations

from typing import Any

from ..errors import AbortError, classify_reason
from ..logging import get_logger, log_event
from .abort_signal import AbortSignal

_LOGGER = get_logger(__name__)


class AbortController:
    """Owns one :class:`AbortSignal` and exposes ``abort(reason=None)``.

    ``abort`` is idempotent: the first call records the reason (a fresh
    :class:`AbortError` when none is given) and notifies the signal's
    listeners; later calls are no-ops. The triggered state never resets.
    """

    def __init__(self) -> None:
        self._signal = AbortSignal()

    @property
    def signal(self) -> AbortSignal:
        return self._signal

    def abort(self, reason: Any = None) -> None:
        """Trigger the signal (no-op if it already fired)."""
        if self._signal.aborted:
            return
        if reason is None:
            reason = AbortError()
        if self._signal._trigger(reason):
            log_event(_LOGGER, "abort.trigger", kind=classify_reason(reason).value, reason=repr(reason))

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"AbortController(signal={self._signal!r})"


__all__ = ["AbortController"]
