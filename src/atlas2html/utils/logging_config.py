"""Logging setup shared by the atlas2html modules and the command line."""

from __future__ import annotations

import logging
import sys

from atlas2html.config import ATLAS2HTML_LOG_LEVEL

_PACKAGE_LOGGER = "atlas2html"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the package namespace."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once replaces the previous handler instead of
    stacking duplicates, so the CLI can be invoked repeatedly in-process.
    """
    logger = logging.getLogger(_PACKAGE_LOGGER)
    resolved = level if level is not None else ATLAS2HTML_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING

    for handler in list(logger.handlers):
        if getattr(handler, "_atlas2html", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._atlas2html = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(resolved)
    return logger
