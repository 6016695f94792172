"""Immutable keyed store backing every :class:`Context`.

A ``KeyedStore`` maps opaque :class:`Key` tokens to arbitrary values. It
exposes the read-only ``Mapping`` protocol and two derivation helpers; there is
no way to mutate a store once built. Derivation copies the private dict, so a
parent store and its children never observe each other.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Dict, Tuple

from .keys_parts.key import Key


class KeyedStore(Mapping):
    """Read-only ``Key -> value`` mapping with copy-on-write derivation."""

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Key, Any] | None = None) -> None:
        self._data: Dict[Key, Any] = dict(data) if data else {}

    def __getitem__(self, key: Key) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[Key]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def derive(self, key: Key, value: Any) -> "KeyedStore":
        """Return a new store equal to this one with ``key`` bound to ``value``."""
        data = dict(self._data)
        data[key] = value
        return self._from_dict(data)

    def derive_many(self, items: Iterable[Tuple[Key, Any]]) -> "KeyedStore":
        """Return a new store with every ``(key, value)`` pair applied in order."""
        data = dict(self._data)
        for key, value in items:
            data[key] = value
        return self._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[Key, Any]) -> "KeyedStore":
        store = cls.__new__(cls)
        store._data = data
        return store

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"KeyedStore({[k.label for k in self._data]!r})"


EMPTY_STORE = KeyedStore()

__all__ = ["KeyedStore", "EMPTY_STORE"]
