# ============================================================================
# CONFIGURATION LOADER - Environment-Aware .puienv Bootstrap
# ============================================================================

"""
Resolve the environment profile and load its settings file.

Supports three modes (production, develop, test) selected by the ENV
variable. Runs once at process startup, before anything reads configuration.

RESPONSIBILITY:
- Resolve the EnvironmentProfile from the bootstrap Settings
- Hand the profile's settings file to python-dotenv (once)
- Snapshot the resulting environment into a RuntimeConfig
- Provide lazy-loading and caching

INPUTS:
- ENV: production, develop, anything else (test)
- HOME: home directory (test profile)
- APP_ROOT: application root (production/develop profiles)
- .puienv file at the resolved location (optional)

OUTPUTS:
- RuntimeConfig with the mode prefix and a snapshot of values

A missing settings file is not an error: python-dotenv simply loads nothing.
Existing environment variables are never overridden by the file.
"""

import os
import logging
from typing import Callable, MutableMapping, Optional

from dotenv import load_dotenv

from config.environment import EnvironmentProfile, resolve
from config.runtime import RuntimeConfig
from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

DotenvLoader = Callable[..., object]


class ConfigLoader:
    """Resolve the environment profile and load its settings file."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        dotenv_loader: Optional[DotenvLoader] = None,
        environ: Optional[MutableMapping[str, str]] = None,
    ):
        """Initialize config loader.

        Args:
            settings: Bootstrap settings (default: global Settings)
            dotenv_loader: Settings file loader (default: dotenv.load_dotenv)
            environ: Environment to snapshot after loading (default: os.environ)
        """
        self.settings = settings if settings is not None else get_settings()
        self._dotenv_loader = dotenv_loader if dotenv_loader is not None else load_dotenv
        self._environ = environ if environ is not None else os.environ
        self._profile: Optional[EnvironmentProfile] = None
        self._config: Optional[RuntimeConfig] = None

    @property
    def profile(self) -> EnvironmentProfile:
        """Resolved profile (resolved on first access, then fixed)."""
        if self._profile is None:
            self._profile = resolve(
                self.settings.mode,
                self.settings.resolved_home_dir,
                self.settings.app_root,
            )
            logger.info(
                f"🔧 Environment resolved: mode={self._profile.mode.value}, "
                f"prefix={self._profile.mode_prefix!r}, file={self._profile.settings_path}"
            )
        return self._profile

    @property
    def loaded(self) -> bool:
        return self._config is not None

    def load(self) -> RuntimeConfig:
        """
        Load the settings file for the resolved profile.

        The settings file is handed to the dotenv loader exactly once per
        ConfigLoader; later calls return the cached RuntimeConfig.

        Returns:
            RuntimeConfig for the resolved profile
        """
        if self._config is not None:
            logger.debug("✓ Using cached configuration")
            return self._config

        profile = self.profile

        logger.info(f"📂 Loading settings file {profile.settings_path}")
        self._dotenv_loader(dotenv_path=profile.settings_path, override=False)

        self._config = RuntimeConfig(profile, self._environ)
        logger.info("✅ Configuration loaded")
        return self._config

# ============================================================================
# GLOBAL SINGLETON
# ============================================================================

_loader_instance: Optional[ConfigLoader] = None

def init_config_loader(
    settings: Optional[Settings] = None,
    dotenv_loader: Optional[DotenvLoader] = None,
) -> bool:
    """
    Initialize the global config loader (call once at startup).

    This function:
    1. Creates a ConfigLoader instance
    2. Resolves the profile and loads its settings file
    3. Caches for reuse

    A second call keeps the loader from the first one.

    Args:
        settings: Bootstrap settings (optional)
        dotenv_loader: Settings file loader (optional)

    Returns:
        True if initialization succeeded, False otherwise
    """
    global _loader_instance

    if _loader_instance is not None and _loader_instance.loaded:
        logger.debug("✓ Config loader already initialized")
        return True

    try:
        logger.info("🚀 Initializing configuration...")

        loader = ConfigLoader(settings, dotenv_loader)
        loader.load()
        _loader_instance = loader

        return True

    except Exception as e:
        logger.error(f"❌ Configuration initialization failed: {str(e)}", exc_info=True)
        return False

def get_config_loader() -> ConfigLoader:
    """Get global ConfigLoader instance (auto-initializes if needed)."""
    if _loader_instance is None:
        init_config_loader()

    if _loader_instance is None:
        raise RuntimeError("Failed to initialize ConfigLoader")

    return _loader_instance

def get_runtime_config() -> RuntimeConfig:
    """Get the process-wide RuntimeConfig."""
    return get_config_loader().load()

def get_mode_prefix() -> str:
    """Variable-name prefix for the running mode ("", "DEV_" or "TEST_")."""
    return get_config_loader().profile.mode_prefix

def reset_config_loader() -> None:
    """Reset loader instance (for testing purposes)."""
    global _loader_instance
    _loader_instance = None
