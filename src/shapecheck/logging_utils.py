"""Opt-in log output for applications using shapecheck."""

import logging
from typing import IO, Optional

from shapecheck.config import Settings, get_settings

PACKAGE_LOGGER = "shapecheck"


def configure_logging(
    settings: Optional[Settings] = None,
    *,
    stream: Optional[IO[str]] = None,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Logger:
    """Attach a stream handler to the ``shapecheck`` logger.

    The root logger is left alone. Calling this again replaces the handler
    installed by the previous call.
    """
    settings = settings or get_settings()

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    logger.setLevel(settings.log_level.upper())

    if formatter is None:
        formatter = logging.Formatter("%(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler(stream=stream)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
