"""Integration tests for the logging setup helper."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from chartlayout.axis import compute_range
from chartlayout.logging_config import LOGGER_NAME, setup_logging

pytestmark = pytest.mark.integration


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger after each test."""

    logger = logging.getLogger(LOGGER_NAME)
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


def test_setup_logging_is_idempotent(package_logger: logging.Logger) -> None:
    """Repeated setup should not stack handlers."""

    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO


def test_setup_logging_writes_layout_fallbacks_to_file(package_logger: logging.Logger, tmp_path: Path) -> None:
    """Debug fallbacks from layout modules reach the configured file."""

    log_file = tmp_path / "layout.log"
    setup_logging(logging.DEBUG, log_file=str(log_file))
    assert len(package_logger.handlers) == 2

    compute_range([])

    assert "empty axis range" in log_file.read_text(encoding="utf-8")
