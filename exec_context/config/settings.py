"""Process-wide settings for the context layer.

``get_settings()`` returns a process-cached :class:`ContextSettings`, parsing
environment overrides on first use and again only when one of the known
variables changes. Supported environment variables (all optional):

    EXEC_CONTEXT_LOG_LEVEL              DEBUG/INFO/WARNING/ERROR/CRITICAL
    EXEC_CONTEXT_LOG_JSON               emit JSON lines (default) or plain text
    EXEC_CONTEXT_FORWARD_PARENT_REASON  cascade the parent's abort reason

Invalid values never raise; the affected field keeps its default.
"""

from __future__ import annotations

from threading import Lock
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .defaults import DEFAULT_FORWARD_PARENT_REASON, DEFAULT_LOG_JSON, DEFAULT_LOG_LEVEL
from .env import (
    ENV_FORWARD_PARENT_REASON,
    ENV_LOG_JSON,
    ENV_LOG_LEVEL,
    env_fingerprint,
    parse_env_bool,
    parse_env_str,
)

_LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ContextSettings(BaseModel):
    """Normalized settings.

    Attributes:
        log_level: Level name applied to the shared ``exec_context`` logger.
        log_json: Whether the managed handlers use the JSON formatter.
        forward_parent_reason: When true, a cascaded abort records the
            parent's reason instead of a fresh ``AbortError``.
    """

    model_config = ConfigDict(frozen=True)

    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = DEFAULT_LOG_JSON
    forward_parent_reason: bool = DEFAULT_FORWARD_PARENT_REASON

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> str:
        name = str(value).strip().upper()
        if name == "WARN":
            name = "WARNING"
        if name not in _LEVEL_NAMES:
            raise ValueError(f"unknown log level: {value!r}")
        return name


_CACHED: Optional[ContextSettings] = None
_ENV_GUARD: Optional[str] = None
_LOCK = Lock()


def _load_from_env() -> ContextSettings:
    level = parse_env_str(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    fields = {
        "log_json": parse_env_bool(ENV_LOG_JSON, DEFAULT_LOG_JSON),
        "forward_parent_reason": parse_env_bool(ENV_FORWARD_PARENT_REASON, DEFAULT_FORWARD_PARENT_REASON),
    }
    try:
        return ContextSettings(log_level=level, **fields)
    except ValidationError:
        return ContextSettings(**fields)


def get_settings() -> ContextSettings:
    """Return the process-cached settings, refreshing on environment change."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = env_fingerprint()
    with _LOCK:
        if _CACHED is None or _ENV_GUARD != guard:
            _CACHED = _load_from_env()
            _ENV_GUARD = guard
        return _CACHED


def reset_settings_cache() -> None:
    """Drop the cached settings so the next ``get_settings`` re-reads env."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603
    with _LOCK:
        _CACHED = None
        _ENV_GUARD = None


__all__ = ["ContextSettings", "get_settings", "reset_settings_cache"]
