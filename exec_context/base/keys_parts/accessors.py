"""Accessor factory: unique key plus matched getter/setter pair.

Each ``make`` call mints a brand-new :class:`Key` and returns an
:class:`Accessors` record whose ``get``/``set`` close over it. Accessors are
typically bound once at module level::

    get_request_id, with_request_id = make_accessors("request_id")

    ctx = with_request_id(Context.todo(), "r-1")
    assert get_request_id(ctx) == "r-1"
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, Iterator, Optional, TypeVar, Union

from .key import Key
from .key_options import KeyOptions

if TYPE_CHECKING:
    from ..context import Context

T = TypeVar("T")

DefaultProducer = Callable[[Optional["Context"]], T]
ContextGetter = Callable[[Optional["Context"]], Optional[T]]
ContextSetter = Callable[..., "Context"]


@dataclass(frozen=True)
class Accessors(Generic[T]):
    """Getter/setter pair bound to one key.

    Iterable so it can be unpacked as ``get, set = make_accessors(...)``.
    """

    key: Key
    get: ContextGetter[T]
    set: ContextSetter
    options: KeyOptions

    def __iter__(self) -> Iterator[Callable[..., Any]]:
        yield self.get
        yield self.set


def make(options: KeyOptions | None = None) -> Accessors[Any]:
    """Mint a new key and return its accessor pair."""
    # Local import: context imports the store which imports keys_parts.
    from ..context import Context

    options = options or KeyOptions()
    key = Key(options.name)
    default = options.default

    def get(ctx: Optional[Context]) -> Any:
        value = ctx.value(key) if ctx is not None else None
        if value is None and default is not None:
            return default(ctx)
        return value

    def set(ctx: Optional[Context], value: Any = None) -> Context:  # noqa: A001 - mirrors accessor naming
        base = ctx if ctx is not None else Context.todo()
        if value is None and default is not None:
            value = default(base)
        return base.with_value(key, value)

    get.__qualname__ = f"get[{key.label}]"
    set.__qualname__ = f"set[{key.label}]"
    return Accessors(key=key, get=get, set=set, options=options)


def make_accessors(
    name: Union[str, DefaultProducer[Any], None] = None,
    default: Optional[DefaultProducer[Any]] = None,
) -> Accessors[Any]:
    """Convenience wrapper over :func:`make`.

    Accepts ``()``, ``(name)``, ``(default)`` and ``(name, default)``.
    """
    if callable(name):
        if default is not None:
            raise TypeError("make_accessors() got two default producers")
        name, default = None, name
    return make(KeyOptions(name=name, default=default))


__all__ = [
    "Accessors",
    "ContextGetter",
    "ContextSetter",
    "DefaultProducer",
    "make",
    "make_accessors",
]
