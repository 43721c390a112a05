"""Logging utilities for bayeskit.

Every module logs through ``get_logger(__name__)``. Loggers live under the
``bayeskit`` namespace, do not propagate to the root logger and each own a
single stream handler, so inference routines can emit DEBUG traces (factor
sizes, accepted sample counts, effective sample sizes) without touching the
application's logging setup. Nothing is logged above DEBUG on normal paths.
"""

from __future__ import annotations

import logging
import sys
from typing import Dict, Optional, TextIO, Union

_PACKAGE = "bayeskit"
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

_level = logging.WARNING
_formatter = logging.Formatter(_DEFAULT_FORMAT)
_loggers: Dict[str, logging.Logger] = {}

Level = Union[int, str]


def _coerce_level(level: Level) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown logging level {level!r}")
        return value
    return level


def _qualified(name: Optional[str]) -> str:
    if name is None or name == _PACKAGE or name.startswith(_PACKAGE + "."):
        return name or _PACKAGE
    return f"{_PACKAGE}.{name}"


def _attach_handler(logger: logging.Logger, stream: TextIO) -> None:
    handler = logging.StreamHandler(stream)
    handler.setLevel(_level)
    handler.setFormatter(_formatter)
    logger.addHandler(handler)


def _apply_level(logger: logging.Logger) -> None:
    logger.setLevel(_level)
    for handler in logger.handlers:
        handler.setLevel(_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a bayeskit logger.

    Names outside the package are prefixed, so ``get_logger("demo")``
    returns ``bayeskit.demo`` while ``get_logger(__name__)`` inside the
    package is used as is.

    Args:
        name: Logger name (typically `__name__`). If None, returns the package logger.

    Returns:
        Cached logger instance.

    Example:
        >>> from bayeskit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("Summed out %s", "Alarm")
    """
    logger_name = _qualified(name)
    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        _attach_handler(logger, sys.stderr)
        _apply_level(logger)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: Level) -> None:
    """Set the level of every bayeskit logger, present and future.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or a level
            name such as 'DEBUG'.

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    global _level
    _level = _coerce_level(level)
    for logger in _loggers.values():
        _apply_level(logger)


def configure_logging(
    level: Level = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Route every bayeskit logger to ``stream`` with a fresh handler.

    Loggers created later pick up the same level and format, but write to
    stderr.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).

    Raises:
        ValueError: If ``level`` is an unknown level name.
    """
    global _level, _formatter
    _level = _coerce_level(level)
    _formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        _attach_handler(logger, stream or sys.stderr)
        _apply_level(logger)
