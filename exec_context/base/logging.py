"""Structured logging utilities for the context layer.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Every module obtains its logger through ``get_logger`` so all output flows
  through the single managed ``exec_context`` handler.

The base level and formatter come from ``exec_context.config.get_settings``
(``EXEC_CONTEXT_LOG_LEVEL`` / ``EXEC_CONTEXT_LOG_JSON``). Events are emitted at
DEBUG by default so an application only sees them after opting in.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Optional

from ..config import get_settings
from ..config.defaults import LOGGER_NAME
from .log_support import JsonFormatter, LogContext

_BASE_LOGGER_ATTR = "_exec_context_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_exec_context_console_handler"
_FILE_HANDLER_ATTR = "_exec_context_file_handler"

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: str | int | None, default: int = logging.WARNING) -> int:
    """Parse a logging level name (or number) into an integer constant.

    Falls back to ``default`` on unknown values.
    """
    if value is None or value == "":
        return default
    if isinstance(value, int):
        return value
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _make_formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _make_console_handler(level: int, json_mode: bool) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(json_mode))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    return handler


def _ensure_base_logger() -> logging.Logger:
    """Initialize (or refresh) and return the shared ``exec_context`` logger."""
    settings = get_settings()
    level = _parse_level(settings.log_level)
    logger = logging.getLogger(LOGGER_NAME)

    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if logger.level != level:
            logger.setLevel(level)
        for existing in list(logger.handlers):
            if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                continue
            stream_obj = getattr(existing, "stream", None)
            if stream_obj is None or getattr(stream_obj, "closed", False):
                logger.removeHandler(existing)
                with contextlib.suppress(Exception):
                    existing.close()
                logger.addHandler(_make_console_handler(level, settings.log_json))
                continue
            existing.setLevel(level)
            if isinstance(existing, logging.StreamHandler) and stream_obj is not sys.stderr:
                with contextlib.suppress(Exception):
                    existing.setStream(sys.stderr)
            if settings.log_json != isinstance(existing.formatter, JsonFormatter):
                existing.setFormatter(_make_formatter(settings.log_json))
        return logger

    logger.setLevel(level)
    logger.handlers[:] = [_make_console_handler(level, settings.log_json)]
    logger.propagate = False
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Return a logger under the shared ``exec_context`` hierarchy.

    Child loggers carry no handlers of their own and propagate to the base
    logger, so each record is written exactly once.
    """
    base_logger = _ensure_base_logger()
    if name == LOGGER_NAME:
        return base_logger
    if not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: Optional[bool] = None,
) -> logging.Logger:
    """Reconfigure the shared logger at runtime.

    Parameters
    ----------
    level: int | str | None
        Desired level; ``None`` keeps the current one.
    file_path: Optional[str]
        When provided, attach (or reuse) a managed rotating file handler
        writing to this path. When ``None``, remove any managed file handler.
    json_mode: Optional[bool]
        Formatter for the managed handlers; ``None`` keeps the settings value.

    Returns
    -------
    logging.Logger
        The configured base logger. User-attached handlers are left alone.
    """
    logger = _ensure_base_logger()
    if json_mode is None:
        json_mode = get_settings().log_json

    if level is not None:
        logger.setLevel(_parse_level(level, default=logger.level))
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    if file_path is None:
        for h in managed:
            logger.removeHandler(h)
            with contextlib.suppress(OSError):
                h.close()
        return logger

    abs_path = os.path.abspath(os.path.expanduser(file_path))
    os.makedirs(os.path.dirname(abs_path), exist_ok=True)

    existing: Optional[logging.FileHandler] = None
    for h in managed:
        if getattr(h, "baseFilename", None) == abs_path:
            existing = h  # type: ignore[assignment]
        else:
            logger.removeHandler(h)
            with contextlib.suppress(OSError):
                h.close()

    if existing is None:
        existing = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        setattr(existing, _FILE_HANDLER_ATTR, True)
        logger.addHandler(existing)
    existing.setFormatter(_make_formatter(json_mode))
    existing.setLevel(logger.level)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.DEBUG,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON payload.

    Keys whose values are ``None`` are dropped unless ``keep_none`` is set.
    Non-serializable values are rendered with ``repr``. The payload is only
    built when ``level`` is enabled.
    """
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=repr))


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
