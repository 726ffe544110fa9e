"""Read the JSON config file into a flat mapping without ever raising."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from config_station.domain.models.config import FileReadResult

logger = logging.getLogger(__name__)


class FileConfigReader:
    """Load a UTF-8 JSON object from ``location``.

    Missing files, undecodable bytes, invalid or too deeply nested JSON, and
    non-object documents all degrade to an empty result carrying a failure
    description.
    """

    def __init__(self, location: Optional[Union[str, Path]]) -> None:
        self._location = str(location) if location else ""

    @property
    def location(self) -> str:
        return self._location

    def read(self) -> FileReadResult:
        if not self._location:
            return FileReadResult()

        try:
            raw = Path(self._location).read_text(encoding="utf-8")
            data = json.loads(raw)
        except (OSError, ValueError, RecursionError) as exc:
            logger.debug("Config file %s could not be loaded: %s", self._location, exc)
            return FileReadResult(error=f"{type(exc).__name__}: {exc}")

        if not isinstance(data, dict):
            return FileReadResult(
                error=f"expected a JSON object in {self._location}, got {type(data).__name__}"
            )
        return FileReadResult(values=data)
