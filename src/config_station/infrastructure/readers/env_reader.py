"""Extract prefixed environment variables as lowercase config fields."""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping

from config_station.domain.models.config import RawConfigMap
from config_station.domain.services.resolution import field_pattern, validate_env_key

logger = logging.getLogger(__name__)


class EnvConfigReader:
    """Scan an environment snapshot for ``<env_key>_<FIELD>`` variables."""

    def __init__(self, env_key: str) -> None:
        self._env_key = validate_env_key(env_key)
        self._pattern = field_pattern(env_key)

    def read(self, environ: Mapping[str, str]) -> RawConfigMap:
        """Return ``{field.lower(): value}`` for every matching variable.

        Variables are visited in sorted name order, so when several names
        lowercase to the same field the last one in that order wins.
        """
        values: RawConfigMap = {}
        sources: Dict[str, List[str]] = {}
        for name in sorted(environ):
            match = self._pattern.match(name)
            if match is None:
                continue
            key = match.group(1).lower()
            values[key] = environ[name]
            sources.setdefault(key, []).append(name)

        for key, names in sources.items():
            if len(names) > 1:
                logger.warning(
                    "Environment variables %s all map to config key %r; using %s",
                    ", ".join(names),
                    key,
                    names[-1],
                )
        return values
