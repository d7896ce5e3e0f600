"""Logging setup for the command line."""

from __future__ import annotations

import logging
import logging.config


def build_logging_config(verbose: bool = False) -> dict:
    level = "DEBUG" if verbose else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(levelname)s: %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "mean_linter": {
                "handlers": ["console"],
                "level": level,
                "propagate": True,
            },
        },
    }


def setup_logging(verbose: bool = False) -> None:
    """Route ``mean_linter`` log records to stderr."""
    logging.config.dictConfig(build_logging_config(verbose))
    logging.getLogger(__name__).debug("Logging configured (verbose=%s)", verbose)
