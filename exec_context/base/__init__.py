"""
Context Base Package

Layers, innermost first:
- Keys & store: opaque keys, accessor factory, immutable keyed store
- Context: value handle plus ``todo``/``background``/``compose``
- Cancellation: controller/signal pair and the reserved registry slots
- Composition: ``with_abort`` / ``with_timeout``
"""

from .keys import Accessors, Key, KeyOptions, make, make_accessors
from .store import KeyedStore
from .context import Context, background, compose, todo
from .errors import AbortError, AbortKind, ContextError, ContextTimeoutError, classify_reason
from .cancellation import AbortController, AbortSignal
from .registry import get_controller, get_signal, init_reserved_slots
from .composition import with_abort, with_timeout

__all__ = [
    "Accessors",
    "Key",
    "KeyOptions",
    "make",
    "make_accessors",
    "KeyedStore",
    "Context",
    "background",
    "compose",
    "todo",
    "AbortError",
    "AbortKind",
    "ContextError",
    "ContextTimeoutError",
    "classify_reason",
    "AbortController",
    "AbortSignal",
    "get_controller",
    "get_signal",
    "init_reserved_slots",
    "with_abort",
    "with_timeout",
]
