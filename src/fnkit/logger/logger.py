"""Project logger for fnkit.

Library code only emits DEBUG records when a caller misuses an operation, so
the logger stays silent at the default INFO level.
"""

import logging
import sys

from fnkit.core.config import normalize_log_level, settings

__all__ = ["logger", "setup_logger"]


def setup_logger(name: str = "fnkit", level: str | None = None) -> logging.Logger:
    """Attach a stdout handler to ``name`` once and return the logger.

    Args:
        name: Logger name.
        level: Level name (aliases such as ``warn`` accepted). Defaults to
            ``settings.LOG_LEVEL``; unknown names fall back to it as well.

    Returns:
        The configured logger. Later calls for the same name return it
        unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=settings.LOG_FORMAT, datefmt=settings.LOG_DATEFMT)
    )
    logger.addHandler(handler)
    logger.setLevel(normalize_log_level(level or "") or settings.LOG_LEVEL)
    logger.propagate = False
    return logger


logger = setup_logger()
