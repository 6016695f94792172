"""Read-only cancellation signal.

An :class:`AbortSignal` is owned by exactly one :class:`AbortController`.
Downstream code holds the signal only: it can poll ``aborted``/``reason``,
subscribe to the ``"abort"`` event, raise with ``throw_if_aborted`` or
``await wait()``, but it cannot trigger the signal itself.

Listener semantics follow the platform abort-signal contract: listeners run
once, in registration order, synchronously inside the trigger; a listener
added after the signal fired is never invoked, so callers needing "already
fired" delivery must check ``aborted`` first.
"""

from __future__ import annotations

import asyncio
from threading import Lock
from typing import Any, Callable, List

from ..errors import AbortError
from ..logging import get_logger
from .state import State

Listener = Callable[["AbortSignal"], Any]

ABORT_EVENT = "abort"

_LOGGER = get_logger(__name__)


def _check_event(event: str) -> None:
    if event != ABORT_EVENT:
        raise ValueError(f"unsupported event type: {event!r}")


class AbortSignal:
    """Observable cancellation state: a triggered flag plus a stable reason."""

    def __init__(self) -> None:
        self._state = State()
        self._lock = Lock()
        self._listeners: List[Listener] = []

    @property
    def aborted(self) -> bool:  # noqa: D401 - short form
        """Whether the owning controller has been triggered."""
        return self._state.aborted

    @property
    def reason(self) -> Any:  # noqa: D401 - short form
        """Reason recorded at trigger time (``None`` until triggered)."""
        return self._state.reason

    def add_event_listener(self, event: str, listener: Listener) -> None:
        """Register ``listener`` for the abort event (duplicates are ignored)."""
        _check_event(event)
        with self._lock:
            if self._state.aborted or listener in self._listeners:
                return
            self._listeners.append(listener)

    def remove_event_listener(self, event: str, listener: Listener) -> None:
        """Unregister ``listener``; unknown listeners are ignored."""
        _check_event(event)
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def throw_if_aborted(self) -> None:
        """Raise the abort reason if the signal has been triggered.

        Exception reasons are raised as-is; any other value is wrapped in
        :class:`AbortError` with the value on ``.reason``.
        """
        if not self._state.aborted:
            return
        reason = self._state.reason
        if isinstance(reason, BaseException):
            raise reason
        raise AbortError(reason=reason)

    async def wait(self) -> Any:
        """Suspend until the signal is triggered and return its reason."""
        if self._state.aborted:
            return self._state.reason
        loop = asyncio.get_running_loop()
        fired = loop.create_future()

        def _resolve() -> None:
            if not fired.done():
                fired.set_result(None)

        def _on_abort(_signal: AbortSignal) -> None:
            loop.call_soon_threadsafe(_resolve)

        self.add_event_listener(ABORT_EVENT, _on_abort)
        try:
            if not self._state.aborted:
                await fired
        finally:
            self.remove_event_listener(ABORT_EVENT, _on_abort)
        return self._state.reason

    def _trigger(self, reason: Any) -> bool:
        """Record ``reason`` and notify listeners; return False if already fired."""
        with self._lock:
            if self._state.aborted:
                return False
            self._state.aborted = True
            self._state.reason = reason
            listeners = list(self._listeners)
            self._listeners.clear()
        for listener in listeners:
            try:
                listener(self)
            except Exception:
                _LOGGER.exception(
                    "abort listener raised",
                    extra={"event": "abort.listener_error", "listener": getattr(listener, "__qualname__", repr(listener))},
                )
        return True

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return (
            f"AbortSignal(aborted={self._state.aborted}, "
            f"reason={self._state.reason!r}, listeners={len(self._listeners)})"
        )


__all__ = ["AbortSignal", "Listener", "ABORT_EVENT"]
