# Copyright (c) Microsoft. All rights reserved.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import UrbanairshipException

if TYPE_CHECKING:
    from ._settings import UrbanairshipSettings

__all__ = ["LOG_FORMAT", "get_logger", "setup_logging"]

LOG_FORMAT = "[%(asctime)s - %(pathname)s:%(lineno)d - %(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "urbanairship"


def setup_logging(settings: UrbanairshipSettings | None = None) -> logging.Logger:
    """Setup the logging configuration for the urbanairship logger.

    Attaches a single handler, writing to ``settings.log_path`` when set and to stderr otherwise.
    Calling it again replaces the handler instead of adding a second one.

    Args:
        settings: The settings to read ``log_level`` and ``log_path`` from. Defaults are loaded
            from the environment when omitted.

    Returns:
        logging.Logger: The configured root logger of the library.
    """
    if settings is None:
        from ._settings import UrbanairshipSettings

        settings = UrbanairshipSettings()

    handler: logging.Handler
    if settings.log_path:
        handler = logging.FileHandler(settings.log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logger = get_logger()
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    logger.setLevel(settings.log_level)
    return logger


def get_logger(name: str = "urbanairship") -> logging.Logger:
    """Get a logger with the specified name, defaulting to 'urbanairship'.

    Args:
        name (str): The name of the logger. Defaults to 'urbanairship'.

    Returns:
        logging.Logger: The logger instance.
    """
    if name != "urbanairship" and not name.startswith("urbanairship."):
        raise UrbanairshipException("Logger name must start with 'urbanairship'.")
    return logging.getLogger(name)
