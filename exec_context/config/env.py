"""exec_context.config.env
=========================

Environment variable names and small parsing helpers.

Failure Modes
-------------
- Helpers never raise on unset or malformed variables; they return the
  provided default so a typo in the environment cannot break imports.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

ENV_LOG_LEVEL = "EXEC_CONTEXT_LOG_LEVEL"
ENV_LOG_JSON = "EXEC_CONTEXT_LOG_JSON"
ENV_FORWARD_PARENT_REASON = "EXEC_CONTEXT_FORWARD_PARENT_REASON"

ENV_VARS: Tuple[str, ...] = (ENV_LOG_LEVEL, ENV_LOG_JSON, ENV_FORWARD_PARENT_REASON)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def parse_env_bool(name: str, default: bool) -> bool:
    """Parse an environment variable as a boolean flag.

    Accepts ``1/true/yes/on`` and ``0/false/no/off`` case-insensitively.
    Anything else (including unset) yields ``default``.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return default


def parse_env_str(name: str, default: Optional[str]) -> Optional[str]:
    """Return the stripped value of ``name`` or ``default`` when unset/blank."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_fingerprint() -> str:
    """Return a string capturing the current values of all known variables.

    Used by the settings cache to detect environment changes at runtime.
    """
    return "/".join(os.getenv(name, "") for name in ENV_VARS)


__all__ = [
    "ENV_LOG_LEVEL",
    "ENV_LOG_JSON",
    "ENV_FORWARD_PARENT_REASON",
    "ENV_VARS",
    "parse_env_bool",
    "parse_env_str",
    "env_fingerprint",
]
