# ============================================================================
# SETTINGS - Bootstrap inputs read from the process environment
# ============================================================================

"""
Type-safe access to the handful of variables the bootstrap itself needs.

Loads from:
1. Keyword arguments (tests, embedding applications)
2. Process environment variables

RESPONSIBILITY:
- Read the mode flag, home directory, app root and log level
- NO file I/O here (that's loader.py)
- NO decisions here (that's environment.py)

The mode flag is read verbatim and never validated: an unknown value is a
legitimate input that selects the test profile. Variable names are case
sensitive: only ENV sets the mode, not env or Env.

LOG_LEVEL is kept as a raw string; setup_logging() normalizes it, so a bad
log level can never stop the mode bootstrap.

USAGE:
from config import get_settings

settings = get_settings()
mode = settings.mode  # "production", "develop", anything else
"""

from pathlib import Path
from typing import Optional
import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from config.environment import DEFAULT_APP_ROOT

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Bootstrap settings loaded from environment variables.

    All fields have aliases to match the environment variable names.
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        extra="ignore",
    )

    mode: Optional[str] = Field(
        default=None,
        alias="ENV",
        description="Mode flag: production, develop, anything else = test",
    )

    home_dir: Optional[str] = Field(
        default=None,
        alias="HOME",
        description="Home directory holding the test settings file",
    )

    app_root: str = Field(
        default=DEFAULT_APP_ROOT,
        alias="APP_ROOT",
        description="Application root holding the production/develop settings file",
    )

    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level (normalized by setup_logging)",
    )

    @property
    def resolved_home_dir(self) -> str:
        """HOME if set, otherwise the user's home directory."""
        if self.home_dir:
            return self.home_dir
        return str(Path.home())

# ============================================================================
# SINGLETON PATTERN - Global Settings Instance
# ============================================================================

_settings_instance: Optional[Settings] = None

def get_settings() -> Settings:
    """
    Get or create the global Settings instance (singleton).

    Returns:
        Settings: Global settings instance
    """
    global _settings_instance

    if _settings_instance is None:
        _settings_instance = Settings()
        logger.debug("✅ Settings initialized from environment (singleton)")

    return _settings_instance

def reset_settings() -> None:
    """Reset settings instance (for testing purposes)."""
    global _settings_instance
    _settings_instance = None
