"""Logger factory for the sbolcore package."""

from __future__ import annotations

import logging
from typing import Final

from ..config import get_log_level

_LOGGER_NAME: Final = "sbolcore"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(component: str | None = None) -> logging.Logger:
    """Return ``sbolcore.<component>`` at the level currently set in ``SBOL_LOG_LEVEL``.

    The stream handler is attached once; the level is re-read on every call so
    a host can change it without re-importing the package.
    """

    logger = logging.getLogger(f"{_LOGGER_NAME}.{component}" if component else _LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(get_log_level())
    return logger
