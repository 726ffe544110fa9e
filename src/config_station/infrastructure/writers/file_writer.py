"""Overwrite the config file with a JSON-encoded payload."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Union


class ConfigWriter:
    """Write compact UTF-8 JSON to a single file, replacing prior contents."""

    def __init__(self, location: Union[str, Path]) -> None:
        if not location:
            raise ValueError("No path specified to store config to.")
        self._path = Path(location)

    @property
    def path(self) -> Path:
        return self._path

    def write(self, payload: Mapping[str, Any]) -> None:
        """Encode ``payload`` and write it; I/O and encoding errors propagate."""
        text = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        self._path.write_text(text, encoding="utf-8")
