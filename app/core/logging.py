"""Logging setup for the User Service API.

Everything under the ``app`` package logs through ``logging.getLogger(__name__)``;
this module only decides where those records end up.
"""

import logging
import sys

LOGGER_NAME = "app"

_FORMAT = "[UserService] %(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the ``app`` logger.

    `level` is a level name ("DEBUG", "INFO", ...) or a numeric level.
    Safe to call more than once: the handler is only added the first time,
    later calls just adjust the level. Returns the package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
