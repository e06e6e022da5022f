# src/bsonjson/config/settings.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""bsonjson Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated runtime configuration for the ``bs`` command. Settings
    only govern diagnostics; no setting changes conversion results.

Design:
    - Pydantic v2 BaseSettings with ``extra='forbid'`` to catch typos.
    - Environment variables use the ``BS_`` prefix.
    - Singleton accessor ``get_settings()`` with LRU cache.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_LEVEL_NAMES = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class Settings(BaseSettings):
    """Typed configuration for the ``bs`` command."""

    log_level: str = Field(
        default="WARNING",
        description="Root log level. Overridden to DEBUG by --verbose.",
    )
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines on stderr; plain text when false.",
    )

    model_config = SettingsConfigDict(
        env_prefix="BS_",
        extra="forbid",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        """Upper-case the level name and reject unknown levels."""
        level = str(value).strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {sorted(_LEVEL_NAMES)}, got {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
    logger.debug(
        "settings.initialized",
        extra={"extra": {"log_level": settings.log_level, "log_json": settings.log_json}},
    )
    return settings
