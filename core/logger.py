"""Logging helpers for the nutrition service.

`get_logger` hands out module loggers that share one stream handler and one
rotating file handler, so every module logs with the same format.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from core import config

LOG_DIR = config.LOG_DIR
if not os.path.exists(LOG_DIR):
    os.makedirs(LOG_DIR, exist_ok=True)

LOG_FILE = os.path.join(LOG_DIR, "nutrition.log")

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")

_stream_handler = logging.StreamHandler()
_stream_handler.setFormatter(_formatter)

_file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
_file_handler.setFormatter(_formatter)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a logger wired to the shared stream and rotating file handlers.

    The level defaults to `LOG_LEVEL` from the environment. Handlers are only
    attached once per logger name, so repeated calls are cheap.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level if level is not None else getattr(logging, config.LOG_LEVEL, logging.INFO))
        logger.addHandler(_stream_handler)
        logger.addHandler(_file_handler)
    return logger
