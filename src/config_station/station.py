"""Load configs from a JSON file and the environment, and store them back."""
from __future__ import annotations

import os
from dataclasses import asdict, is_dataclass
from typing import Any, Mapping, Optional

from config_station.domain.models.config import (
    ConfigFactory,
    ConfigSources,
    FileReadResult,
    RawConfigMap,
    ResolvedAttributes,
)
from config_station.domain.services.merge import merge_config
from config_station.domain.services.resolution import resolve_attributes, validate_env_key
from config_station.infrastructure.readers.env_reader import EnvConfigReader
from config_station.infrastructure.readers.file_reader import FileConfigReader
from config_station.infrastructure.writers.file_writer import ConfigWriter
from config_station.utils.tracing import DebugTracer


class ConfigStation:
    """Build a config object from ``<location>`` overlaid by ``<env_key>_*`` variables.

    ``config_class`` is called with the merged mapping as keyword arguments;
    whatever it raises (missing required fields, bad values) reaches the
    caller of :meth:`load` untouched.

    ``environ`` pins the environment snapshot used for every lookup. When it
    is omitted the live process environment is read on each call.
    """

    def __init__(
        self,
        env_key: str,
        config_class: ConfigFactory,
        *,
        location: Optional[str] = None,
        debug: Any = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        if not callable(config_class):
            raise ValueError("config_class must be callable.")
        self._env_key = validate_env_key(env_key)
        self._config_class = config_class
        self._explicit_location = location
        self._explicit_debug = debug
        self._environ = environ
        self._env_reader = EnvConfigReader(env_key)
        self._attributes: Optional[ResolvedAttributes] = None
        self._tracer: Optional[DebugTracer] = None

    @property
    def env_key(self) -> str:
        return self._env_key

    @property
    def attributes(self) -> ResolvedAttributes:
        """Resolved debug/location; computed on first access, then frozen."""
        if self._attributes is None:
            self._attributes = resolve_attributes(
                self._env_key,
                self._snapshot(),
                location=self._explicit_location,
                debug=self._explicit_debug,
            )
        return self._attributes

    @property
    def debug(self) -> Any:
        return self.attributes.debug

    @property
    def location(self) -> str:
        return self.attributes.location

    @property
    def tracer(self) -> DebugTracer:
        if self._tracer is None:
            self._tracer = DebugTracer(self.attributes.tracing_enabled)
        return self._tracer

    def read_sources(self) -> ConfigSources:
        """Read both sources fresh and report each contribution plus the merge."""
        file_result = self._read_file()
        env_values = self._read_env()
        return ConfigSources(
            file=file_result,
            env=env_values,
            merged=merge_config(file_result.values, env_values),
        )

    def read_config(self) -> RawConfigMap:
        return self.read_sources().merged

    def load(self) -> Any:
        """Return ``config_class(**merged)`` for the current file and environment."""
        return self._config_class(**self.read_config())

    def store(self, obj: Any) -> None:
        """Serialize ``obj`` and overwrite the file at the resolved location."""
        ConfigWriter(self.location).write(_serialize(obj))

    def _snapshot(self) -> Mapping[str, str]:
        if self._environ is not None:
            return self._environ
        return dict(os.environ)

    def _read_file(self) -> FileReadResult:
        result = FileConfigReader(self.location).read()
        if result.failed:
            self.tracer.trace_failure("FILE", result.error or "")
        else:
            self.tracer.trace("FILE", result.values)
        return result

    def _read_env(self) -> RawConfigMap:
        values = self._env_reader.read(self._snapshot())
        self.tracer.trace("ENV", values)
        return values


def _serialize(obj: Any) -> Any:
    serialize = getattr(obj, "serialize", None)
    if callable(serialize):
        return serialize()
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"{type(obj).__name__} object has no serialize() method.")
