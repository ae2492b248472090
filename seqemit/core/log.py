"""Logging setup for host applications and tests."""

import logging

from seqemit.core.config import settings


class EmitterLogHandler(logging.StreamHandler):
    """Stream handler installed by ``configure_logging``."""


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stream handler to the ``seqemit`` logger.

    Calling it twice does not stack handlers.
    """
    logger = logging.getLogger("seqemit")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if not any(isinstance(h, EmitterLogHandler) for h in logger.handlers):
        handler = EmitterLogHandler()
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        logger.addHandler(handler)
    return logger
