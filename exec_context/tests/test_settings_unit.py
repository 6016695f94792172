from __future__ import annotations

import pydantic
import pytest

from exec_context.config import ContextSettings, get_settings, reset_settings_cache
from exec_context.config.env import parse_env_bool


def test_defaults_without_env():
    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.log_json is True
    assert settings.forward_parent_reason is False


def test_env_overrides_and_cache_refresh(monkeypatch):
    first = get_settings()
    assert get_settings() is first

    monkeypatch.setenv("EXEC_CONTEXT_LOG_LEVEL", "debug")
    monkeypatch.setenv("EXEC_CONTEXT_FORWARD_PARENT_REASON", "yes")
    refreshed = get_settings()

    assert refreshed is not first
    assert refreshed.log_level == "DEBUG"
    assert refreshed.forward_parent_reason is True


def test_invalid_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("EXEC_CONTEXT_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("EXEC_CONTEXT_LOG_JSON", "maybe")
    reset_settings_cache()
    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.log_json is True


def test_warn_alias_normalized():
    assert ContextSettings(log_level="warn").log_level == "WARNING"


def test_settings_model_validation():
    with pytest.raises(pydantic.ValidationError):
        ContextSettings(log_level="nope")


def test_parse_env_bool(monkeypatch):
    monkeypatch.setenv("SOME_FLAG", "Off")
    assert parse_env_bool("SOME_FLAG", True) is False
    monkeypatch.delenv("SOME_FLAG")
    assert parse_env_bool("SOME_FLAG", True) is True
