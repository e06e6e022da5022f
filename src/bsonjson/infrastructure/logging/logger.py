# src/bsonjson/infrastructure/logging/logger.py
# Copyright (c)
# SPDX-License-Identifier: MIT
"""Structured JSON logging utilities.

This module exposes an idempotent root configurator and a per-module logger
factory. Logs go to stderr so that stdout carries conversion output only.

Features:
    * Stable keys: ``ts``, ``level``, ``logger``, ``message``.
    * Automatic enrichment with the run ``mode`` via contextvars.
    * Optional plain-text output for interactive use.

Typical usage:
    configure_root_logging()
    log = get_json_logger(__name__)
"""

from __future__ import annotations

import json
import logging
import os
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

__all__ = [
    "configure_root_logging",
    "get_json_logger",
    "set_run_context",
]

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Conversion direction of the current run ("encode" / "decode").
_MODE_CTX: ContextVar[str | None] = ContextVar("bsonjson_mode", default=None)


def set_run_context(*, mode: str | None = None) -> None:
    """Set per-run correlation fields on the current context.

    Args:
        mode: Conversion direction, ``"encode"`` or ``"decode"``.
    """
    if mode is not None:
        _MODE_CTX.set(mode)


class _JsonFormatter(logging.Formatter):
    """JSON log formatter emitting stable keys and optional extras."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a JSON object.

        Args:
            record: Logging record.

        Returns:
            JSON-encoded log line.
        """
        payload: dict[str, Any] = {
            "ts": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        mode = getattr(record, "mode", None) or _MODE_CTX.get(None)
        if mode:
            payload["mode"] = mode

        if record.exc_info:
            exc_type, exc_value, _ = record.exc_info
            if exc_type is not None:
                payload["exc_type"] = exc_type.__name__
            if exc_value is not None:
                payload["exc_message"] = str(exc_value)

        # Extra dict, if any (e.g., error details).
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)

        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False, default=str)


def configure_root_logging(level: str | int | None = None, *, json_format: bool = True) -> None:
    """Initialize the root logger with a stderr stream handler (idempotent).

    The level is always applied; the handler is installed only once.

    Args:
        level: Logging level or level name. If ``None``, use env ``LOG_LEVEL`` or ``WARNING``.
        json_format: Emit JSON lines when true, plain text otherwise.
    """
    root = logging.getLogger()

    env_level = os.getenv("LOG_LEVEL")
    resolved: int | str = (
        level if level is not None else (env_level.upper() if env_level else "WARNING")
    )
    root.setLevel(resolved)

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(_JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT))
    root.addHandler(handler)


def get_json_logger(name: str) -> logging.Logger:
    """Return a module-specific logger backed by the root handler.

    This does *not* implicitly configure the root logger. Call
    :func:`configure_root_logging` once at startup.

    Args:
        name: Logger name, typically ``__name__`` of the caller.

    Returns:
        Configured logger.
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
