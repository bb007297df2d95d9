"""Logging setup shared by the service and the uvicorn server."""

import logging

from uvicorn.config import LOG_LEVELS

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "info") -> None:
    """Attach a stream handler to the root logger and apply `level` to the service loggers.

    `level` is one of uvicorn's level names; unknown names raise KeyError.
    """
    numeric_level = LOG_LEVELS[level.lower()]
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("greeter").setLevel(numeric_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
