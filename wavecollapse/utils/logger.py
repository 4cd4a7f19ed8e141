"""Logging utilities tailored for the solver."""

from __future__ import annotations

import logging
from typing import Optional, TextIO, Union


PACKAGE_LOGGER = "wavecollapse"
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as ``"debug"`` into its numeric value."""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level {level!r}")
    return value


def configure_logging(level: Union[int, str] = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Send solver logs to ``stream`` (stderr by default).

    Only the ``wavecollapse`` logger is configured, so an application that
    embeds the solver keeps its own root handlers. Per-step messages go out at
    DEBUG and solve summaries at INFO.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(resolve_level(level))
    logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package namespace, configuring defaults if needed."""

    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name or PACKAGE_LOGGER)
