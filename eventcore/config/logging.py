import logging
import sys
from logging import StreamHandler

from eventcore.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "eventcore"


def setup_logging() -> logging.Logger:
    """Send eventcore's own log records to stdout.

    Only the `eventcore` logger is configured, so an application embedding the
    model keeps control of the root logger. Calling it again only updates the
    level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)
    if not any(getattr(h, "name", None) == LOGGER_NAME for h in logger.handlers):
        handler = StreamHandler(sys.stdout)
        handler.set_name(LOGGER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
