"""Logging utilities tailored for word search generation."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER = "wordsearch"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """Install a single stream handler on the ``wordsearch`` logger.

    Placement runs many cheap random attempts per word, so per-attempt detail
    stays at DEBUG and only per-puzzle summaries are logged at INFO. The root
    logger is left alone so embedding applications keep their own handlers.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    package = logging.getLogger(PACKAGE_LOGGER)
    package.handlers.clear()
    package.addHandler(handler)
    package.setLevel(level)
    package.propagate = False
    return package


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``wordsearch`` namespace, configuring defaults if needed."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
