"""Logging configuration for the simulation package."""

import logging
import logging.config
import sys


def setup_logging(log_level: str = "INFO", detailed: bool = True) -> logging.Logger:
    """
    Configure console logging for the ``simulation`` logger.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        detailed: Include timestamp and logger name in each line (default)

    Returns:
        The configured package logger
    """
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            },
            "simple": {
                "format": "%(levelname)s: %(message)s"
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": sys.stderr,
                "formatter": "detailed" if detailed else "simple",
                "level": log_level.upper(),
            }
        },
        "loggers": {
            "simulation": {
                "level": log_level.upper(),
                "handlers": ["console"],
            }
        },
    }
    logging.config.dictConfig(config)
    return logging.getLogger("simulation")
