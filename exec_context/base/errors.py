"""Context error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``exec_context.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.abort_kind import AbortKind
from .errors_parts.context_errors import AbortError, ContextError, ContextTimeoutError
from .errors_parts.classification import classify_reason

__all__ = ["AbortKind", "AbortError", "ContextError", "ContextTimeoutError", "classify_reason"]
