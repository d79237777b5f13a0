"""Structured logging utilities for the provider layer.

Rationale:
- One place configures the shared ``relay_providers`` logger so adapters do
  not attach ad-hoc handlers.
- Events are single-line JSON payloads (``{"event": ..., "provider": ...}``)
  that downstream tooling can filter without parsing free text.

Environment:
    RELAY_LOG_LEVEL   DEBUG / INFO / WARNING / ERROR / CRITICAL (default INFO)
    RELAY_LOG_FORMAT  ``json`` (default) or ``plain``

Request/response bodies and credentials are never passed to these helpers.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from typing import Any, Optional

from .log_support import JsonFormatter, LogContext

BASE_LOGGER_NAME = "relay_providers"

_CONFIGURED_ATTR = "_relay_configured"
_HANDLER_ATTR = "_relay_console_handler"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a level name (case-insensitive) into a logging constant."""
    if not value:
        return default
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


def _console_handler(formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    return handler


def _rebind_console_handlers(logger: logging.Logger) -> None:
    """Point managed handlers at the current ``sys.stderr``.

    A handler whose stream was closed (pytest capture, daemonization, log
    rotation) is replaced, since flushing a closed stream raises.
    """
    for existing in list(logger.handlers):
        if not getattr(existing, _HANDLER_ATTR, False):
            continue
        stream_obj = getattr(existing, "stream", None)
        if stream_obj is sys.stderr:
            continue
        if stream_obj is None or getattr(stream_obj, "closed", False):
            logger.removeHandler(existing)
            with contextlib.suppress(Exception):
                existing.close()
            logger.addHandler(_console_handler(existing.formatter or _make_formatter(True)))
            continue
        with contextlib.suppress(Exception):
            existing.setStream(sys.stderr)


def _ensure_base_logger() -> logging.Logger:
    """Initialize (once) and return the shared base logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    if getattr(logger, _CONFIGURED_ATTR, False):
        _rebind_console_handlers(logger)
        return logger
    level = _parse_level(os.getenv("RELAY_LOG_LEVEL"))
    json_mode = (os.getenv("RELAY_LOG_FORMAT") or "json").strip().lower() != "plain"
    logger.setLevel(level)
    logger.addHandler(_console_handler(_make_formatter(json_mode)))
    # Records still propagate so applications (and pytest's caplog) see them.
    setattr(logger, _CONFIGURED_ATTR, True)
    return logger


def get_logger(name: str = BASE_LOGGER_NAME) -> logging.Logger:
    """Return the base logger or a child of it.

    Parameters:
        name: Either the base name or a dotted suffix/full child name, e.g.
            ``"anthropic"`` or ``"relay_providers.anthropic"``.
    """
    base = _ensure_base_logger()
    if name == BASE_LOGGER_NAME:
        return base
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logger(
    *,
    level: int | str | None = None,
    json_mode: Optional[bool] = None,
) -> logging.Logger:
    """Adjust the shared logger at runtime.

    Parameters:
        level: Numeric level or level name; ``None`` keeps the current level.
        json_mode: Switch the managed console handler between JSON and plain
            output; ``None`` keeps the current formatter.

    Returns:
        The base logger.

    Handlers attached by applications are left untouched.
    """
    logger = _ensure_base_logger()
    if level is not None:
        logger.setLevel(_parse_level(level, logger.level) if isinstance(level, str) else level)
    if json_mode is not None:
        for handler in logger.handlers:
            if getattr(handler, _HANDLER_ATTR, False):
                handler.setFormatter(_make_formatter(json_mode))
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit one structured event.

    Parameters:
        logger: Logger obtained from :func:`get_logger`.
        event: Dotted event name (``chat.start``, ``chat.error``...).
        ctx: Provider/model context merged into the payload.
        level: Logging level for the record.
        **fields: JSON-serializable values; ``None`` values are dropped.
    """
    payload: dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


__all__ = [
    "BASE_LOGGER_NAME",
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
]
