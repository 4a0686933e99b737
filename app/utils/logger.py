"""Structured logging configuration for the application."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.utils.environment import is_debug

LOGGER_NAME = "siteforge"


def setup_logger(
    name: str = LOGGER_NAME,
    log_file: str | None = None,
    log_level: str | None = None,
) -> logging.Logger:
    """Configure and return the application logger.

    Module loggers under the ``app`` package share the same handlers, so the
    console and file output cover both ``siteforge`` and ``app.*`` records.

    Args:
        name: Logger name
        log_file: Path to log file (default: LOG_FILE env, empty disables file output)
        log_level: Log level (default: LOG_LEVEL env, DEBUG locally, INFO when deployed)

    Returns:
        Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv("LOG_LEVEL", "DEBUG" if is_debug() else "INFO")

    level = getattr(logging, log_level.upper(), logging.INFO)

    log = logging.getLogger(name)
    log.setLevel(level)

    # Prevent duplicate handlers on re-import
    if log.handlers:
        return log

    log_format = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_format)
    handlers.append(console_handler)

    if log_file is None:
        log_file = os.getenv("LOG_FILE", "logs/app.log")

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setFormatter(log_format)
            handlers.append(file_handler)
        except OSError as e:
            log.warning(f"Failed to create file handler for {log_file}: {e}")

    app_log = logging.getLogger("app")
    app_log.setLevel(level)
    for handler in handlers:
        handler.setLevel(level)
        log.addHandler(handler)
        app_log.addHandler(handler)

    log.propagate = False
    app_log.propagate = False

    return log


# Global logger instance
logger = setup_logger()
