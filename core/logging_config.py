# core/logging_config.py
import logging

from core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOGGER_NAME = "orgportal"

# Third-party loggers that share our handler, with their own floor
LIBRARY_LEVELS = {
    "apscheduler": logging.WARNING,
}


def setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)

    # Avoid duplicate handlers in dev reload
    if logger.handlers:
        return logger

    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.setLevel(level)
    logger.addHandler(handler)
    logger.propagate = False

    # Scheduler job events (added / executed / missed) land in the same stream
    for name, floor in LIBRARY_LEVELS.items():
        library_logger = logging.getLogger(name)
        library_logger.setLevel(max(level, floor))
        library_logger.addHandler(handler)
        library_logger.propagate = False

    return logger


logger = setup_logger()
