"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module
only configures the root handler once, at application start-up.
"""

import logging

from app.core.config import settings

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger.

    Args:
        level: Level name override.  Defaults to ``settings.LOG_LEVEL``
            (``DEBUG`` when ``settings.DEBUG`` is set).
    """
    if level is None:
        level = "DEBUG" if settings.DEBUG else settings.LOG_LEVEL
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)
    logging.getLogger(__name__).debug("Logging configured at %s", level.upper())
