"""
================================================================================
CONFIG PACKAGE - Environment Bootstrap
================================================================================

SUMMARY
-------
Central entry point for configuration in the hosting application.

Picks the settings file and variable prefix from the ENV mode flag, loads
the file once at startup, and hands out an explicit RuntimeConfig.

EXPORTS
-------
    init_config_loader() - Resolve + load (call at startup)
    get_runtime_config() - Get the RuntimeConfig
    get_mode_prefix()    - "", "DEV_" or "TEST_"
    resolve()            - Pure mode → EnvironmentProfile function
    setup_logging()      - Console logging for the application

ARCHITECTURE
------------
config/
├── __init__.py     ← This file (exports everything)
├── environment.py  ← Mode, EnvironmentProfile, resolve()
├── runtime.py      ← RuntimeConfig (prefix-aware lookups)
├── loader.py       ← .puienv loading + global singleton
├── settings.py     ← Bootstrap variables (ENV, HOME, APP_ROOT, LOG_LEVEL)
└── log_setup.py    ← Logging handler

KEY PRINCIPLE
-------------
Config layer NEVER imports from src/.

USAGE
-----
# At application startup:
from config import init_config_loader, get_runtime_config, setup_logging

setup_logging()
if not init_config_loader():
    raise RuntimeError("Failed to initialize configuration")

config = get_runtime_config()
url = config.get("DATABASE_URL")   # reads DEV_DATABASE_URL in develop

================================================================================
"""

from config.environment import (
    DEFAULT_APP_ROOT,
    MODE_PREFIXES,
    SETTINGS_FILE_NAME,
    EnvironmentProfile,
    Mode,
    resolve,
)
from config.runtime import RuntimeConfig
from config.settings import Settings, get_settings, reset_settings
from config.loader import (
    ConfigLoader,
    init_config_loader,
    get_config_loader,
    get_runtime_config,
    get_mode_prefix,
    reset_config_loader,
)
from config.log_setup import setup_logging

# Public API
__all__ = [
    'DEFAULT_APP_ROOT',
    'MODE_PREFIXES',
    'SETTINGS_FILE_NAME',
    'EnvironmentProfile',
    'Mode',
    'resolve',
    'RuntimeConfig',
    'Settings',
    'get_settings',
    'reset_settings',
    'ConfigLoader',
    'init_config_loader',
    'get_config_loader',
    'get_runtime_config',
    'get_mode_prefix',
    'reset_config_loader',
    'setup_logging',
]
