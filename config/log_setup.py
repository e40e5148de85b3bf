# ============================================================================
# LOGGING SETUP - Console handler for the bootstrap and the host application
# ============================================================================

import logging
from typing import Optional

from config.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"

_handler: Optional[logging.Handler] = None


def normalize_log_level(level: Optional[str]) -> str:
    """Upper-case a level name; anything unknown becomes INFO."""
    name = (level or "").strip().upper()
    if name not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return name


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the root logger (call once at startup).

    Calling again only updates the level.

    Args:
        level: DEBUG/INFO/WARNING/ERROR/CRITICAL, any case
               (default: LOG_LEVEL from settings; unknown values use INFO)

    Returns:
        The root logger
    """
    global _handler

    if level is None:
        level = get_settings().log_level

    root = logging.getLogger()

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)

    root.setLevel(normalize_log_level(level))
    return root
