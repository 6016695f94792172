"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose the controller/signal pair via the canonical
``exec_context.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``AbortController`` is held only by the level that created it.
- ``AbortSignal`` is shared read-only with everything downstream.
- Cancellation is cooperative: triggering never interrupts running work.
"""

from .cancellation_parts.abort_controller import AbortController
from .cancellation_parts.abort_signal import ABORT_EVENT, AbortSignal, Listener

__all__ = ["AbortController", "AbortSignal", "Listener", "ABORT_EVENT"]
