"""Named loggers for the importer, all writing to stderr."""

import logging
import os
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a named logger with a single stderr handler.

    LOG_LEVEL is read straight from the environment so that loggers can be
    created at import time even when the database settings are invalid.
    """
    logger = logging.getLogger(f"metric_importer.{name}")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    return logger
