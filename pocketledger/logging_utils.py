"""Mini README: Application-wide logging helpers for Pocket Ledger.

Structure:
    * configure_root_logger - one-time root logger setup with a shared format.
    * get_logger - module logger factory that guarantees the setup ran.

Usage:
    Modules call ``get_logger(__name__)`` at import time. The launcher calls
    ``configure_root_logger`` with the configured level; the handler is only
    ever attached once so reloads never stack duplicate output.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger with a readable, timestamped formatter.

    Repeated calls leave the handler alone but still apply an explicit level.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(logging.INFO if level is None else level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
