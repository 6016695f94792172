"""exec_context package

Immutable, composable execution contexts for asyncio code: typed per-call
values plus cooperative cancellation (manual abort or timeout) passed
explicitly down a call tree.

Public API (re-exported):
    - Context values: :class:`Context`, :func:`todo`, :func:`background`,
      :func:`compose`, :func:`make`, :func:`make_accessors`
    - Cancellation: :func:`with_abort`, :func:`with_timeout`,
      :func:`get_signal`, :func:`get_controller`
    - Errors: :class:`AbortError`, :class:`ContextTimeoutError`,
      :class:`ContextError`, :class:`AbortKind`, :func:`classify_reason`

Example::

    get_request_id, with_request_id = make_accessors("request_id")

    async def handler(ctx):
        signal = get_signal(ctx)
        while not signal.aborted:
            ...

    async def main():
        ctx = with_request_id(background(), "r-1")
        task, abort = with_timeout(ctx, 500, handler)
        await task
"""

from .base import (
    AbortController,
    AbortError,
    AbortKind,
    AbortSignal,
    Accessors,
    Context,
    ContextError,
    ContextTimeoutError,
    Key,
    KeyedStore,
    KeyOptions,
    background,
    classify_reason,
    compose,
    get_controller,
    get_signal,
    init_reserved_slots,
    make,
    make_accessors,
    todo,
    with_abort,
    with_timeout,
)
from .config import ContextSettings, get_settings

__version__ = "0.1.0"

init_reserved_slots()

__all__ = [
    "__version__",
    "AbortController",
    "AbortError",
    "AbortKind",
    "AbortSignal",
    "Accessors",
    "Context",
    "ContextError",
    "ContextSettings",
    "ContextTimeoutError",
    "Key",
    "KeyedStore",
    "KeyOptions",
    "background",
    "classify_reason",
    "compose",
    "get_controller",
    "get_settings",
    "get_signal",
    "make",
    "make_accessors",
    "todo",
    "with_abort",
    "with_timeout",
]
