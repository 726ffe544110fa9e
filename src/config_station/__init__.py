"""Load configs from a JSON file and prefixed environment variables."""
from __future__ import annotations

from config_station.domain.models.config import (
    ConfigSources,
    FileReadResult,
    MappingConfig,
    ResolvedAttributes,
)
from config_station.station import ConfigStation

__all__ = [
    "ConfigSources",
    "ConfigStation",
    "FileReadResult",
    "MappingConfig",
    "ResolvedAttributes",
]
