"""Logging configuration for the CLI process.

Diagnostics go to stderr so they never interleave with the history and
prediction output on stdout.
"""

from __future__ import annotations

import logging
import logging.config


def setup_logging(level: str = "WARNING") -> None:
    """Configure the ``cycle_tracker`` logger hierarchy.

    Unknown level names fall back to ``WARNING``.
    """
    resolved = level.upper()
    if not isinstance(logging.getLevelName(resolved), int):
        resolved = "WARNING"

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "standard",
            }
        },
        "formatters": {
            "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"}
        },
        "loggers": {
            "cycle_tracker": {
                "handlers": ["stderr"],
                "level": resolved,
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(config)
