"""Shared pytest fixtures for sparkapi tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

pytest_plugins = [
    "tests.fixtures.clients",
]


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> Iterator[None]:
    """Keep ``SPARK_*`` variables, stray ``.env`` files and logging setup out of every test."""
    for name in ("SPARK_TOKEN", "SPARK_PAGE_SIZE", "SPARK_BASE_URL", "SPARK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path_factory.mktemp("cwd"))
    library_logger = logging.getLogger("sparkapi")
    handlers = list(library_logger.handlers)
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    library_logger.handlers[:] = handlers
    library_logger.setLevel(logging.NOTSET)
    library_logger.propagate = True
