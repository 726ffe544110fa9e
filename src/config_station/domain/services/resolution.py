"""Resolve the debug flag and file location from explicit values or the environment."""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional, Pattern

from config_station.domain.models.config import ResolvedAttributes
from config_station.utils.tracing import DebugTracer

NO_PATH_MESSAGE = "No path specified to load config from"


def validate_env_key(env_key: Any) -> str:
    if not isinstance(env_key, str) or not env_key:
        raise ValueError("env_key must be a non-empty string.")
    return env_key


def debug_variable(env_key: str) -> str:
    return f"DEBUG_{env_key}"


def file_variable(env_key: str) -> str:
    return f"FILE_{env_key}"


def field_pattern(env_key: str) -> Pattern[str]:
    """Match ``<env_key>_<FIELD>`` and capture FIELD (one or more characters)."""
    return re.compile(rf"^{re.escape(env_key)}_(.+)$", re.DOTALL)


def resolve_attributes(
    env_key: str,
    environ: Mapping[str, str],
    *,
    location: Optional[str] = None,
    debug: Any = None,
) -> ResolvedAttributes:
    """Compute debug and location once; callers are expected to cache the result.

    ``DEBUG_<env_key>`` wins over the explicit flag whenever it exists, even
    when set to an empty string. ``FILE_<env_key>`` wins over the explicit
    location only when non-empty.
    """
    debug_name = debug_variable(env_key)
    resolved_debug = environ[debug_name] if debug_name in environ else debug

    resolved_location = environ.get(file_variable(env_key)) or location or ""

    if not resolved_location and resolved_debug:
        DebugTracer(resolved_debug).warn(NO_PATH_MESSAGE)

    return ResolvedAttributes(debug=resolved_debug, location=str(resolved_location))
