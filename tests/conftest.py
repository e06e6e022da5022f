# tests/conftest.py
from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from bsonjson.config.settings import get_settings
from bsonjson.infrastructure.logging.logger import set_run_context


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a clean environment and a fresh settings singleton."""
    for var in ("BS_LOG_LEVEL", "BS_LOG_JSON", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    """Undo root level changes and drop handlers installed by configure_root_logging()."""
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    set_run_context(mode="")
