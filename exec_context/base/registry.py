"""Reserved context slots for cancellation plumbing.

The current controller and current signal travel through a context exactly
like user values: through accessor pairs bound to two internally minted keys.
The pair is created once by :func:`init_reserved_slots`, an explicit startup
step run by the package ``__init__``; :func:`reserved_slots` falls back to it
if a caller imports submodules directly.

- ``get_controller(ctx)`` has no default: ``None`` means no controller exists
  at or above ``ctx``.
- ``get_signal(ctx)`` always returns a signal. Without a bound signal it
  returns the bound controller's signal, or a fresh never-triggered one.
"""
from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Optional

from .cancellation import AbortController, AbortSignal
from .context import Context
from .keys import Accessors, KeyOptions, make


@dataclass(frozen=True)
class ReservedSlots:
    """Accessor pairs for the two reserved slots."""

    controller: Accessors[AbortController]
    signal: Accessors[AbortSignal]


_SLOTS: Optional[ReservedSlots] = None
_LOCK = Lock()


def init_reserved_slots() -> ReservedSlots:
    """Mint the reserved keys once per process and return their accessors."""
    global _SLOTS  # noqa: PLW0603 - process-wide registry
    with _LOCK:
        if _SLOTS is not None:
            return _SLOTS
        controller = make(KeyOptions(name="AbortController"))

        def _default_signal(ctx: Optional[Context]) -> AbortSignal:
            bound = controller.get(ctx)
            if bound is not None:
                return bound.signal
            return AbortController().signal

        signal = make(KeyOptions(name="AbortSignal", default=_default_signal))
        _SLOTS = ReservedSlots(controller=controller, signal=signal)
        return _SLOTS


def reserved_slots() -> ReservedSlots:
    return _SLOTS if _SLOTS is not None else init_reserved_slots()


def get_controller(ctx: Optional[Context]) -> Optional[AbortController]:
    """Return the controller bound at or above ``ctx`` (``None`` if absent)."""
    return reserved_slots().controller.get(ctx)


def get_signal(ctx: Optional[Context]) -> AbortSignal:
    """Return the signal for ``ctx``; never ``None``."""
    return reserved_slots().signal.get(ctx)


def with_controller(ctx: Context, controller: AbortController) -> Context:
    return reserved_slots().controller.set(ctx, controller)


def with_signal(ctx: Context, signal: Optional[AbortSignal] = None) -> Context:
    return reserved_slots().signal.set(ctx, signal)


__all__ = [
    "ReservedSlots",
    "init_reserved_slots",
    "reserved_slots",
    "get_controller",
    "get_signal",
    "with_controller",
    "with_signal",
]
