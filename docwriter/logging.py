"""Logging setup shared by the docwriter CLI and pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

_ROOT_LOGGER = "docwriter"
_CONSOLE_FORMAT = "[docwriter] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger nested under ``docwriter`` (``docwriter.<name>``)."""
    if not name:
        return logging.getLogger(_ROOT_LOGGER)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")


def console_level(*, verbose: bool = False, quiet: bool = False) -> int:
    """``--verbose`` shows debug output, ``--quiet`` only warnings; verbose wins."""
    if verbose:
        return logging.DEBUG
    return logging.WARNING if quiet else logging.INFO


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Install console (and optional file) handlers on the docwriter logger.

    Calling this again replaces the previously installed handlers, so repeated
    CLI invocations inside one process do not duplicate output. The log file
    always receives debug records, whatever the console level.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.propagate = False
    for stale in list(logger.handlers):
        logger.removeHandler(stale)
        stale.close()

    level = console_level(verbose=verbose, quiet=quiet)
    handlers = [_handler(logging.StreamHandler(), level, _CONSOLE_FORMAT)]
    if log_file is not None:
        handlers.append(
            _handler(logging.FileHandler(log_file, encoding="utf-8"), logging.DEBUG, _FILE_FORMAT)
        )

    logger.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        logger.addHandler(handler)
    return logger


__all__ = ["configure_logging", "console_level", "get_logger"]
