"""Logging for the demohub command and library code."""

import logging
import sys
from typing import Optional
from pythonjsonlogger import jsonlogger

from ..config import config

ROOT_LOGGER = "demohub"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _formatter() -> logging.Formatter:
    if config.environment == "prod":
        return jsonlogger.JsonFormatter(
            JSON_FORMAT,
            datefmt=DATE_FORMAT,
            static_fields={"service": ROOT_LOGGER, "environment": config.environment},
        )
    return logging.Formatter(TEXT_FORMAT, datefmt=DATE_FORMAT)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger writing to stdout at the configured level.

    Text lines locally, one JSON object per line when ENVIRONMENT=prod.
    Handlers are attached once per logger name.

    Args:
        name: Logger name, usually ``__name__``. Defaults to ``demohub``.
    """
    logger = logging.getLogger(name or ROOT_LOGGER)
    if logger.handlers:
        return logger

    level = getattr(logging, config.log_level.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(_formatter())

    logger.setLevel(level)
    logger.addHandler(handler)
    # root handlers would print every record twice
    logger.propagate = False
    return logger
