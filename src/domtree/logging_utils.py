#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for applications that embed domtree.

The library itself only emits records through ``logging.getLogger(__name__)``
and never installs handlers. Call :func:`configure_logging` from an
application entry point to see validation verdicts.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LIBRARY_LOGGER_NAME = "domtree"


def resolve_log_level(log_level: int | str) -> int:
    """Translate a level name such as ``"debug"`` into its numeric value.

    Unknown names fall back to ``logging.INFO``.
    """
    if isinstance(log_level, int):
        return log_level
    return getattr(logging, str(log_level).upper(), logging.INFO)


def configure_logging(
    log_level: int | str,
    log_file: Optional[str] = None,
    trace_mode: bool = False,
    logger_name: str = LIBRARY_LOGGER_NAME,
) -> logging.Logger:
    """Attach console (and optionally file) handlers to the domtree logger.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or string name (e.g., "DEBUG").
    log_file : str, optional
        Optional path to a log file for teeing log output.
    trace_mode : bool, default False
        When true, emit timestamps and logger names for debugging traces.
    logger_name : str, default "domtree"
        Logger to configure. Pass ``""`` to configure the root logger.

    Returns
    -------
    logging.Logger
        The configured logger instance.

    """
    resolved_level = resolve_log_level(log_level)

    logger = logging.getLogger(logger_name)
    logger.setLevel(resolved_level)
    logger.handlers.clear()

    format_str = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s" if trace_mode else "%(levelname)s: %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S" if trace_mode else None
    formatter = logging.Formatter(format_str, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not create log file %s: %s", log_file, exc)
        else:
            file_handler.setLevel(resolved_level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
            logger.info("Logging to file: %s", log_file)

    return logger
