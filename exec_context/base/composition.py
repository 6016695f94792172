"""Abort and timeout composition over contexts.

``with_abort`` runs an async operation under a fresh controller linked to the
caller's controller (if any) and hands back the task plus this level's abort
function. ``with_timeout`` layers a one-shot deadline on top.

Both must be called while an event loop is running. Neither ever rejects the
returned task on its own: aborting only flips the signal that the operation
reads from its context, and the task settles exactly as the operation does.

Lifecycle of one level
----------------------
1. The cascade from the parent signal is wired before the operation starts;
   a parent that already fired aborts the new controller immediately.
2. The operation runs inside an ``asyncio.Task`` with the derived context.
3. On settlement (result, error or task cancellation) the cascade listener is
   removed from the parent signal and this level's controller is aborted, so
   nothing can wait on the signal past the operation's lifetime.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional, Tuple, TypeVar

from ..config import get_settings
from .cancellation import ABORT_EVENT, AbortController, AbortSignal
from .context import Context
from .errors import ContextTimeoutError
from .logging import LogContext, get_logger, log_event
from .registry import reserved_slots

T = TypeVar("T")

Operation = Callable[[Context], Awaitable[T]]
AbortFn = Callable[..., None]

_LOGGER = get_logger(__name__)


def _operation_name(op: Callable[..., Any]) -> str:
    return getattr(op, "__qualname__", None) or repr(op)


def _link_to_parent(parent: AbortSignal, controller: AbortController) -> Callable[[], None]:
    """Cascade ``parent`` into ``controller``; return a function undoing the link."""
    forward = get_settings().forward_parent_reason

    def _cascade(signal: AbortSignal) -> None:
        log_event(_LOGGER, "abort.cascade", forwarded=forward)
        controller.abort(signal.reason if forward else None)

    if parent.aborted:
        _cascade(parent)
        return lambda: None
    parent.add_event_listener(ABORT_EVENT, _cascade)
    return lambda: parent.remove_event_listener(ABORT_EVENT, _cascade)


def with_abort(ctx: Optional[Context], op: Operation[T]) -> Tuple["asyncio.Task[T]", AbortFn]:
    """Run ``op`` with a child context carrying a new controller/signal pair.

    Parameters
    ----------
    ctx:
        Parent context; ``None`` is replaced by ``Context.todo()``. Values
        bound on it remain visible to ``op``.
    op:
        Callable receiving the child context and returning an awaitable.

    Returns
    -------
    tuple
        ``(task, abort)``. ``task`` resolves or raises exactly as ``op``
        does. ``abort(reason=None)`` triggers this level's signal and is
        idempotent.

    Raises
    ------
    RuntimeError
        If no event loop is running.
    """
    loop = asyncio.get_running_loop()
    ctx = ctx if ctx is not None else Context.todo()
    slots = reserved_slots()

    parent = slots.controller.get(ctx)
    controller = AbortController()
    child = Context.compose(
        ctx,
        [
            (slots.controller.set, controller),
            (slots.signal.set, controller.signal),
        ],
    )
    unlink = _link_to_parent(parent.signal, controller) if parent is not None else None
    log_ctx = LogContext(operation=_operation_name(op))

    async def _run() -> T:
        return await op(child)

    log_event(_LOGGER, "composition.start", log_ctx, nested=parent is not None)
    task = loop.create_task(_run())

    # Also runs when the task is cancelled before its first step.
    def _finalize(done: "asyncio.Task[T]") -> None:
        if unlink is not None:
            unlink()
        controller.abort()
        log_event(_LOGGER, "composition.settle", log_ctx, cancelled=done.cancelled() or None)

    task.add_done_callback(_finalize)
    return task, controller.abort


def with_timeout(ctx: Optional[Context], ms: float, op: Operation[T]) -> Tuple["asyncio.Task[T]", AbortFn]:
    """Like :func:`with_abort`, plus an abort with ``ContextTimeoutError`` after ``ms``.

    The timer is armed after the task is scheduled, so ``ms=0`` fires on the
    next loop iteration, after ``op`` has started. It is disarmed as soon as
    the task settles. A manual ``abort(reason)`` before the deadline wins and
    the timer becomes a no-op.

    Raises
    ------
    ValueError
        If ``ms`` is negative.
    """
    if ms < 0:
        raise ValueError(f"timeout must be non-negative, got {ms!r}")
    loop = asyncio.get_running_loop()
    result, abort = with_abort(ctx, op)
    log_ctx = LogContext(operation=_operation_name(op), timeout_ms=ms)

    fired = False

    def _fire() -> None:
        nonlocal fired
        fired = True
        log_event(_LOGGER, "timeout.fired", log_ctx)
        abort(ContextTimeoutError(ms))

    handle = loop.call_later(ms / 1000, _fire)
    log_event(_LOGGER, "timeout.armed", log_ctx)

    def _disarm(_task: "asyncio.Task[T]") -> None:
        if not fired and not handle.cancelled():
            handle.cancel()
            log_event(_LOGGER, "timeout.disarmed", log_ctx)

    result.add_done_callback(_disarm)
    return result, abort


__all__ = ["Operation", "AbortFn", "with_abort", "with_timeout"]
