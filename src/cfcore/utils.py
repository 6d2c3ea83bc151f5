from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import *

import dateutil.parser as _dateutil_parser

__all__ = [
    "logger_setup",
    "parse_datetime",
    "encode_query_value",
    "strip_none",
]

DEFAULT_USER_AGENT = "cfcore/0.1 (+https://docs.curseforge.com/)"


def logger_setup(name: str = "cfcore",
                 level: int = logging.INFO,
                 *,
                 log_to_file: Optional[str] = None,
                 file_level: Optional[int] = None,
                 fmt: str = "%(asctime)s %(name)s %(levelname)s: %(message)s",
                 datefmt: str = "%Y-%m-%d %H:%M:%S") -> logging.Logger:
    """
    Create and return a configured logger for the library.

    Behavior:
        - Creates a logger with the given `name` (the package logger by default,
          so every `cfcore.*` module logger propagates to it).
        - Adds a console (StreamHandler) with the given `level`.
        - If `log_to_file` is provided, also adds a FileHandler.
          The file handler level defaults to `level` unless `file_level` is set.
        - Multiple calls with the same `name` will not duplicate handlers (idempotent).

    Parameters
    ----------
    name : str
        Logger name.
    level : int
        Logging level for console (e.g., logging.INFO).
    log_to_file : Optional[str]
        If provided, path of file to log to (created if missing).
    file_level : Optional[int]
        Logging level for file handler (defaults to `level` if None).
    fmt : str
        Log message format string.
    datefmt : str
        Date format used by formatter.

    Returns
    -------
    logging.Logger

    Example
    -------
    >>> logger = logger_setup(level=logging.DEBUG)
    >>> logger.debug("requests will now be traced")
    """
    logger = logging.getLogger(name)
    logger.setLevel(min(level, file_level if file_level is not None else level))

    if not getattr(logger, "_cfcore_setup_done", False):
        formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

        ch = logging.StreamHandler()
        ch.setLevel(level)
        ch.setFormatter(formatter)
        logger.addHandler(ch)

        if log_to_file:
            fh = logging.FileHandler(log_to_file, encoding="utf-8")
            fh.setLevel(file_level if file_level is not None else level)
            fh.setFormatter(formatter)
            logger.addHandler(fh)

        logger._cfcore_setup_done = True

    return logger


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an API timestamp (e.g. ``2022-01-02T03:04:05.123Z``) into a datetime.

    Returns None for empty or unparseable values.
    """
    if not value:
        return None
    try:
        return _dateutil_parser.isoparse(value)
    except (ValueError, OverflowError):
        return None


def encode_query_value(value: Any) -> Any:
    """
    Convert a Python value into its query-string form.

    Enums are sent by value, booleans as ``true``/``false``, sequences
    element-wise; everything else is left for the transport to encode.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return encode_query_value(value.value)
    if isinstance(value, (list, tuple)):
        return [encode_query_value(v) for v in value]
    return value


def strip_none(mapping: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Copy `mapping` without the keys whose value is None."""
    if not mapping:
        return {}
    return {k: v for k, v in mapping.items() if v is not None}
