"""Configuration record consumed by the accessor factory.

``KeyOptions`` collapses the different ways of minting accessors (nothing, a
name, a default producer, or both) into a single validated value.
"""
from __future__ import annotations

from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict


class KeyOptions(BaseModel):
    """Options for one ``make`` call.

    Attributes
    ----------
    name:
        Debug label for the minted key. Never used for lookup; need not be
        unique.
    default:
        Optional producer ``(ctx) -> value`` evaluated lazily on every lookup
        that misses. Its result is never cached into the context.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    default: Optional[Callable[[Any], Any]] = None


__all__ = ["KeyOptions"]
