# ============================================================================
# RUNTIME CONFIG - Explicit, prefix-aware configuration object
# ============================================================================

"""
Configuration object handed to the rest of the application.

Built once by ConfigLoader after the settings file has been loaded. Holds a
snapshot of the configuration values and composes every lookup with the
mode prefix, so callers ask for "SOME_SETTING" and get "DEV_SOME_SETTING"
in develop, "TEST_SOME_SETTING" in test and "SOME_SETTING" in production.

Values are returned exactly as stored (strings). No conversion, no
validation.

USAGE:
from config import get_runtime_config

config = get_runtime_config()
url = config.get("DATABASE_URL")
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from config.environment import EnvironmentProfile, Mode


class RuntimeConfig:
    """Snapshot of configuration values for the resolved environment."""

    def __init__(self, profile: EnvironmentProfile, values: Mapping[str, str]):
        self._profile = profile
        self._values = MappingProxyType(dict(values))

    @property
    def profile(self) -> EnvironmentProfile:
        return self._profile

    @property
    def mode(self) -> Mode:
        return self._profile.mode

    @property
    def mode_prefix(self) -> str:
        return self._profile.mode_prefix

    @property
    def settings_path(self) -> Path:
        return self._profile.settings_path

    def key(self, name: str) -> str:
        """Full variable name for `name` in the active mode."""
        return f"{self._profile.mode_prefix}{name}"

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._values.get(self.key(name), default)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.key(name) in self._values

    def as_dict(self) -> Dict[str, str]:
        """All values carrying the active prefix, keyed without it."""
        prefix = self._profile.mode_prefix
        return {
            key[len(prefix):]: value
            for key, value in self._values.items()
            if key.startswith(prefix)
        }

    def __repr__(self) -> str:
        return (
            f"RuntimeConfig(mode={self.mode.value!r}, "
            f"settings_path={str(self.settings_path)!r})"
        )
