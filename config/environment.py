# ============================================================================
# ENVIRONMENT RESOLVER - Mode → (variable prefix, settings file path)
# ============================================================================

"""
Decide which settings file to load and which variable prefix to use.

RESPONSIBILITY:
- Map the raw mode flag onto a Mode (production / develop / test)
- Pick the variable-name prefix for that mode
- Pick the settings file location for that mode
- NO file I/O here (that's loader.py)

MODES:
- production → prefix ""      → <app_root>/.puienv
- develop    → prefix "DEV_"  → <app_root>/.puienv
- anything   → prefix "TEST_" → <home_dir>/.puienv

Unknown, empty or missing modes always fall back to the test profile.
Nothing in this module raises for a bad mode.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

SETTINGS_FILE_NAME = ".puienv"
DEFAULT_APP_ROOT = "/src"

# ============================================================================
# ENUMS
# ============================================================================

class Mode(str, Enum):
    """Deployment profiles the process can run under."""
    PRODUCTION = "production"
    DEVELOP = "develop"
    TEST = "test"          # Default for every unrecognized value

    @classmethod
    def parse(cls, value: Optional[Union[str, "Mode"]]) -> "Mode":
        """
        Map a raw mode flag onto a Mode.

        Only the exact literals "production" and "develop" are recognized.
        Everything else (None, "", "staging", "PRODUCTION", ...) is TEST.
        """
        if isinstance(value, Mode):
            return value
        if value == cls.PRODUCTION.value:
            return cls.PRODUCTION
        if value == cls.DEVELOP.value:
            return cls.DEVELOP
        return cls.TEST


MODE_PREFIXES: Dict[Mode, str] = {
    Mode.PRODUCTION: "",
    Mode.DEVELOP: "DEV_",
    Mode.TEST: "TEST_",
}

# ============================================================================
# PROFILE
# ============================================================================

class EnvironmentProfile(BaseModel):
    """Resolved environment for this process (computed once at startup)."""

    model_config = ConfigDict(frozen=True)

    mode: Mode
    mode_prefix: str
    settings_path: Path


def resolve(
    mode: Optional[Union[str, Mode]],
    home_dir: Union[str, Path],
    app_root: Union[str, Path] = DEFAULT_APP_ROOT,
) -> EnvironmentProfile:
    """
    Resolve the environment profile for a mode flag.

    Pure function: identical inputs always give equal profiles.

    Args:
        mode: Raw mode flag (e.g. value of ENV), a Mode, or None
        home_dir: Home directory used by the test profile
        app_root: Application root used by production and develop

    Returns:
        EnvironmentProfile with prefix and settings file path

    Example:
        >>> resolve("develop", "/home/ci").mode_prefix
        'DEV_'
    """
    selected = Mode.parse(mode)

    if selected is Mode.TEST:
        base_dir = Path(home_dir)
    else:
        base_dir = Path(app_root)

    return EnvironmentProfile(
        mode=selected,
        mode_prefix=MODE_PREFIXES[selected],
        settings_path=base_dir / SETTINGS_FILE_NAME,
    )
