"""Keyed store keys and accessor factory (public API facade).

Purpose
-------
Expose stable constructs for minting context keys via the canonical
``exec_context.base.keys`` import path while the concrete implementations
live under ``keys_parts``.

Notes
-----
- ``Key`` equality is identity; names are diagnostics only.
- ``make`` / ``make_accessors`` never fail apart from option validation and
  have no side effect other than minting a key.
"""

from .keys_parts.key import Key
from .keys_parts.key_options import KeyOptions
from .keys_parts.accessors import (
    Accessors,
    ContextGetter,
    ContextSetter,
    DefaultProducer,
    make,
    make_accessors,
)

__all__ = [
    "Key",
    "KeyOptions",
    "Accessors",
    "ContextGetter",
    "ContextSetter",
    "DefaultProducer",
    "make",
    "make_accessors",
]
