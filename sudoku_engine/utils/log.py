# -*- coding: utf-8 -*-
"""Logging utilities."""
import logging
import os
import sys
from typing import Optional, Union

_FORMAT = "%(asctime)s %(levelname)s %(name)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "sudoku_engine"
LOG_LEVEL_ENV_VAR = "SUDOKU_ENGINE_LOG_LEVEL"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    return level


def set_log_level(level: Union[int, str, None] = None) -> None:
    """Set the level of all engine loggers.

    Args:
        level (Optional[Union[int, str]]): Logging level. Read from the
            `SUDOKU_ENGINE_LOG_LEVEL` environment variable when omitted.
    """
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(_resolve_level(level))


def _setup_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(_resolve_level(None))
    return root


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a logger under the `sudoku_engine` hierarchy.

    Args:
        name (str): Logger name, usually `__name__`.
        level (Optional[Union[int, str]]): Level for this logger only. When
            omitted the level of the `sudoku_engine` logger applies.

    Returns:
        logging.Logger: The logger.
    """
    _setup_root_logger()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger
