"""Debug trace output describing what each configuration source produced."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

TRACE_LOGGER_NAME = "config_station.trace"
TRACE_PREFIX = "CONFIGSTATION FROM"


class DebugTracer:
    """Emit per-source diagnostics when the resolved debug flag is truthy.

    Lines go to the ``config_station.trace`` logger at WARNING level so they
    surface even when the host application never configured logging.
    """

    def __init__(self, enabled: Any, logger: Optional[logging.Logger] = None) -> None:
        self._enabled = bool(enabled)
        self._logger = logger or logging.getLogger(TRACE_LOGGER_NAME)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def trace(self, source: str, values: Mapping[str, Any]) -> None:
        """Report the key/value pairs read from ``source`` (or EMPTY)."""
        if not self._enabled:
            return
        if not values:
            self._emit(f"{TRACE_PREFIX} {source}: EMPTY")
            return
        self._emit(f"{TRACE_PREFIX} {source}:")
        for key, value in values.items():
            self._emit(f"  {key}: {_format_value(value)}")

    def trace_failure(self, source: str, error: str) -> None:
        if self._enabled:
            self._emit(f"{TRACE_PREFIX} {source}: {error}")

    def warn(self, message: str) -> None:
        if self._enabled:
            self._emit(message)

    def _emit(self, line: str) -> None:
        self._logger.warning(line)


def _format_value(value: Any) -> str:
    """Strings print as-is; other values print as JSON (``true``, ``null``)."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)
