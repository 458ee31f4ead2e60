"""Central logging configuration for the theme reader."""
from __future__ import annotations

import logging
import os
from typing import Optional

LOG_LEVEL_ENV = "DRAWINGML_THEME_LOG_LEVEL"
_DEFAULT_LEVEL = logging.INFO
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configured_level() -> int:
    name = os.environ.get(LOG_LEVEL_ENV)
    if not name:
        return _DEFAULT_LEVEL
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else _DEFAULT_LEVEL


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-level logger, configuring the root handler on first use."""
    logger = logging.getLogger(name)
    if not logging.getLogger().handlers:
        logging.basicConfig(level=_configured_level(), format=_LOG_FORMAT)
    return logger
