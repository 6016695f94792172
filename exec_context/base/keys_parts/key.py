"""Opaque, unforgeable context keys.

A :class:`Key` compares and hashes by identity only. The optional ``name`` is
a debug label: two keys minted with the same name are still distinct.
"""
from __future__ import annotations

import itertools
from typing import Optional

_SERIAL = itertools.count(1)


class Key:
    """Unique token identifying one slot in a context."""

    __slots__ = ("name", "serial")

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self.serial = next(_SERIAL)

    @property
    def label(self) -> str:
        """Human-readable label, unique within the process."""
        return f"{self.name or 'key'}#{self.serial}"

    def __repr__(self) -> str:
        return f"Key({self.label})"


__all__ = ["Key"]
