"""Logging initialisation for the command-line entry point.

Messages go to stderr so that ``--dry-run`` output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys

_handler: logging.StreamHandler | None = None


def setup_logging(level: str = "WARNING") -> None:
    global _handler

    logger = logging.getLogger("googlehosts")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    # Already configured: follow the current sys.stderr, no second handler.
    if _handler is not None:
        _handler.setStream(sys.stderr)
        return

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(_handler)
