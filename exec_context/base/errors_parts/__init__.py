"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `exec_context.base.errors` for the stable surface.
"""

from .abort_kind import AbortKind
from .context_errors import AbortError, ContextError, ContextTimeoutError
from .classification import classify_reason

__all__ = ["AbortKind", "AbortError", "ContextError", "ContextTimeoutError", "classify_reason"]
