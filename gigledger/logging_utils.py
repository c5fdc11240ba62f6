"""Mini README: Application-wide logging helpers for Gig Ledger.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - one-time root handler setup with optional level.

Usage:
    Modules declare ``LOGGER = get_logger(__name__)`` at import time. The root
    handler is attached only once so repeated imports (for example under the
    development reloader) never duplicate log lines.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Attach the shared stream handler to the root logger once."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
