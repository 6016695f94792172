"""Configuration layer for the context package.

Merge order (later wins): built-in defaults -> environment variables.
Single call site: ``get_settings()``.
"""
from __future__ import annotations

from .settings import ContextSettings, get_settings, reset_settings_cache

__all__ = ["ContextSettings", "get_settings", "reset_settings_cache"]
