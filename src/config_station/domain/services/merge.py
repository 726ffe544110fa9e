"""Combine the file and environment contributions."""
from __future__ import annotations

from typing import Mapping

from config_station.domain.models.config import RawConfigMap


def merge_config(file_map: Mapping[str, object], env_map: Mapping[str, object]) -> RawConfigMap:
    """Overlay ``env_map`` on ``file_map`` into a new dict; inputs stay untouched."""
    merged: RawConfigMap = dict(file_map)
    merged.update(env_map)
    return merged
