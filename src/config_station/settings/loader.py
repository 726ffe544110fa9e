"""Settings for the config-station command line itself."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    """Parse truthy environment values like '1' or 'true'."""
    if value is None:
        return default
    if not isinstance(value, str):
        value = str(value)
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Runtime options for the CLI, loaded from environment variables."""

    debug: bool = False
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            debug=_to_bool(os.getenv("CONFIG_STATION_DEBUG")),
            log_level=os.getenv("CONFIG_STATION_LOG_LEVEL") or None,
        )


def load_settings(debug_override: Optional[bool] = None) -> Settings:
    """Return a Settings instance, applying optional runtime overrides."""
    settings = Settings.from_env()
    if debug_override is not None:
        settings.debug = debug_override
    return settings
