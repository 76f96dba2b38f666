"""Logger factory for polar_lut modules and the CLI."""

import logging
import os

from polar_lut.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV

PACKAGE_LOGGER = "polar_lut"
_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def resolve_level(name) -> int:
    """Return the numeric level for ``name``; unknown names fall back to INFO.

    Args:
        name: Level name (case-insensitive) or number.

    Returns:
        A level usable with :meth:`logging.Logger.setLevel`.
    """
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level
    logging.getLogger(PACKAGE_LOGGER).warning(
        "Unknown log level %r in $%s, using %s", name, LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL
    )
    return logging.getLevelName(DEFAULT_LOG_LEVEL)


def _package_logger() -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(resolve_level(os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)))
    return logger


def get_logger(name: str = PACKAGE_LOGGER, level=None) -> logging.Logger:
    """Return a logger under the ``polar_lut`` hierarchy.

    The stderr handler lives on the package logger only, so module loggers
    (``polar_lut.table_loader`` ...) propagate to it without duplicate
    output. Repeated calls do not stack handlers. The package level
    defaults to ``$POLAR_LUT_LOG_LEVEL`` (INFO when unset or unknown).
    """
    package = _package_logger()
    logger = package if name == PACKAGE_LOGGER else logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger


def set_level(level) -> None:
    """Change the level of the package logger and every polar_lut.* child."""
    _package_logger().setLevel(level)
    for name, logger in logging.Logger.manager.loggerDict.items():
        if isinstance(logger, logging.Logger) and name.startswith(PACKAGE_LOGGER + "."):
            logger.setLevel(level)
