"""Immutable request-scoped context.

A :class:`Context` wraps exactly one :class:`KeyedStore` snapshot. It is passed
explicitly down call chains; deriving a value always yields a new context and
never changes what any accessor returns for an existing one.

``Context.todo()`` is for call sites that have not been extended to accept a
context yet; ``Context.background()`` is the root for ``main``, tests and
incoming requests. Both return a fresh empty context on every call.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable, Optional, Tuple

from .keys_parts.key import Key
from .store import EMPTY_STORE, KeyedStore

SetterPair = Tuple[Callable[..., "Context"], Any]


class Context:
    """Opaque handle over an immutable keyed store."""

    __slots__ = ("_store",)

    def __init__(self, store: Optional[KeyedStore] = None) -> None:
        self._store = store if store is not None else EMPTY_STORE

    @classmethod
    def todo(cls) -> "Context":
        """Return a new empty context (placeholder until one is plumbed in)."""
        return cls()

    TODO = todo

    @classmethod
    def background(cls) -> "Context":
        """Return a new empty context: never aborted, no values, no timeout."""
        return cls()

    @staticmethod
    def compose(ctx: "Context", setters: Iterable[SetterPair]) -> "Context":
        """Apply ``(setter, value)`` pairs left to right starting from ``ctx``."""
        for setter, value in setters:
            ctx = setter(ctx, value)
        return ctx

    @property
    def store(self) -> KeyedStore:
        return self._store

    def value(self, key: Key) -> Any:
        """Return the raw value bound to ``key`` or ``None``."""
        return self._store.get(key)

    def with_value(self, key: Key, value: Any) -> "Context":
        """Return a derived context with ``key`` bound to ``value``."""
        return type(self)(self._store.derive(key, value))

    def __repr__(self) -> str:
        return f"Context({', '.join(k.label for k in self._store)})"


todo = Context.todo
background = Context.background
compose = Context.compose

__all__ = ["Context", "SetterPair", "todo", "background", "compose"]
