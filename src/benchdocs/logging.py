"""
Console logging for benchdocs.

Every module asks for its logger through ``get_logger(__name__)``. Build steps
driven from the command line (``benchdocs.cli``, ``benchdocs.runner``) report
progress at INFO; the helpers they call stay quiet unless something goes
wrong. ``BENCHDOCS_LOG_LEVEL`` sets one level for all of them.
"""

import logging
import os
from typing import Optional

LEVEL_ENV_VAR = "BENCHDOCS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PROGRESS_LOGGERS = (".cli", ".runner")


def _level_from_env() -> Optional[int]:
    level_name = os.getenv(LEVEL_ENV_VAR, "").strip()
    if not level_name:
        return None
    level = logging.getLevelName(level_name.upper())
    # getLevelName maps unknown names to the string "Level <name>".
    return level if isinstance(level, int) else None


def resolve_level(name: str) -> int:
    """Level for the logger called ``name``, honouring BENCHDOCS_LOG_LEVEL."""
    level = _level_from_env()
    if level is not None:
        return level
    if name.endswith(PROGRESS_LOGGERS):
        return logging.INFO
    return logging.WARNING


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(resolve_level(name))
    return logger
