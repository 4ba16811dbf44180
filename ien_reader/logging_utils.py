"""
Project-wide logging setup.

Usage in any script:

    from ien_reader.logging_utils import get_logger
    logger = get_logger(__name__)
    logger.info("Parsing %d reports", n)

Set IEN_READER_LOG_LEVEL (e.g. "DEBUG") to override the level without
touching code; DEBUG shows one line per section found in each report.
"""

from __future__ import annotations

import logging
import os
import sys

_LEVEL_ENV_VAR = "IEN_READER_LOG_LEVEL"
_PACKAGE_LOGGER = "ien_reader"


def _resolve_level(level: int | str) -> int:
    override = os.getenv(_LEVEL_ENV_VAR)
    if override:
        level = override
    if isinstance(level, str):
        resolved = getattr(logging, level.upper(), None)
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def get_logger(name: str, level: int | str = logging.INFO) -> logging.Logger:
    """
    Return a named logger with a consistent format.

    Handlers are attached to both the named logger and the ien_reader package
    logger, each only once, so library modules that log through
    logging.getLogger(__name__) show up in script output too.
    """
    resolved = _resolve_level(level)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    )

    names = [_PACKAGE_LOGGER]
    if name != _PACKAGE_LOGGER and not name.startswith(_PACKAGE_LOGGER + "."):
        names.append(name)

    for logger_name in names:
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            logger.setLevel(resolved)
    return logging.getLogger(name)
