"""Tests for docwriter logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docwriter.logging import configure_logging, get_logger


@pytest.fixture
def root_logger():
    logger = logging.getLogger("docwriter")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


def test_get_logger_nests_under_docwriter() -> None:
    assert get_logger().name == "docwriter"
    assert get_logger("scanner").name == "docwriter.scanner"


@pytest.mark.parametrize(
    ("verbose", "quiet", "level"),
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_configure_logging_levels(root_logger, verbose, quiet, level) -> None:
    logger = configure_logging(verbose=verbose, quiet=quiet)

    assert logger is root_logger
    assert logger.level == level
    assert [handler.level for handler in logger.handlers] == [level]


def test_repeated_configuration_replaces_handlers(root_logger, tmp_path: Path) -> None:
    configure_logging(log_file=tmp_path / "run.log")
    logger = configure_logging(quiet=True)

    assert len(logger.handlers) == 1
    assert logger.propagate is False


def test_log_file_records_debug_detail(root_logger, tmp_path: Path) -> None:
    log_file = tmp_path / "run.log"
    logger = configure_logging(quiet=True, log_file=log_file)

    get_logger("scanner").debug("walking %s", "src")
    for handler in logger.handlers:
        handler.flush()

    assert "docwriter.scanner: walking src" in log_file.read_text(encoding="utf-8")
