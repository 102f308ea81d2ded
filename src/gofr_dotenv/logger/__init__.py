"""
gofr-dotenv logger module

Usage:
    from gofr_dotenv.logger import get_logger, create_logger

    logger = get_logger()
    logger.info("Loading .env files", directory="/srv/app/")

    logger = create_logger(level=logging.DEBUG, json_format=True)

Environment Variables:
    {PREFIX}_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    {PREFIX}_LOG_FILE: Optional file path for log output
    {PREFIX}_LOG_JSON: Set to "true" for JSON output format

    Where {PREFIX} is derived from the logger name (GOFR_DOTENV for "gofr-dotenv")
"""

import logging
from typing import Optional

from gofr_dotenv.config.settings import LogSettings

from .interface import Logger
from .structured_logger import JsonFormatter, StructuredLogger, TextFormatter

DEFAULT_LOGGER_NAME = "gofr-dotenv"


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix ("gofr-dotenv" -> "GOFR_DOTENV")."""
    return name.upper().replace("-", "_")


def create_logger(
    name: str = DEFAULT_LOGGER_NAME,
    level: Optional[int] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> Logger:
    """Create a new logger instance.

    Parameters left as None are read from {PREFIX}_LOG_LEVEL,
    {PREFIX}_LOG_FILE and {PREFIX}_LOG_JSON, PREFIX derived from the name.

    Args:
        name: Logger name
        level: Logging level (defaults to INFO or env var)
        log_file: Optional file path for log output
        json_format: If True, output logs as JSON

    Returns:
        A configured Logger instance
    """
    settings = LogSettings.from_env(prefix=_get_env_prefix(name))

    if level is None:
        level = getattr(logging, settings.level, logging.INFO)

    if log_file is None:
        log_file = settings.log_file

    if json_format is None:
        json_format = settings.json_format

    return StructuredLogger(
        name=name,
        level=level,
        log_file=log_file,
        json_format=json_format,
    )


def get_logger(name: str = DEFAULT_LOGGER_NAME) -> Logger:
    """Get a logger configured from environment variables."""
    return create_logger(name=name)


__all__ = [
    "Logger",
    "StructuredLogger",
    "JsonFormatter",
    "TextFormatter",
    "DEFAULT_LOGGER_NAME",
    "create_logger",
    "get_logger",
]
