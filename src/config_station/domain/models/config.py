"""Value objects exchanged between the resolver, readers, merger and station."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

RawConfigMap = Dict[str, Any]
ConfigFactory = Callable[..., Any]


@dataclass(frozen=True)
class ResolvedAttributes:
    """Debug flag and file location, fixed after the first resolution."""

    debug: Any = None
    location: str = ""

    @property
    def tracing_enabled(self) -> bool:
        return bool(self.debug)


@dataclass(frozen=True)
class FileReadResult:
    """Outcome of reading the config file: values, or why there are none."""

    values: RawConfigMap = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class ConfigSources:
    """Per-source view of a single read, used for inspection."""

    file: FileReadResult
    env: RawConfigMap
    merged: RawConfigMap

    def origin(self, key: str) -> str:
        """Describe where the merged value for ``key`` came from."""
        in_file = key in self.file.values
        in_env = key in self.env
        if in_file and in_env:
            return "env>file"
        if in_env:
            return "env"
        return "file"


class MappingConfig:
    """Schema-less config object built from whatever fields were resolved."""

    def __init__(self, **fields: Any) -> None:
        self._fields: RawConfigMap = dict(fields)

    def __getattr__(self, item: str) -> Any:
        try:
            return self.__dict__["_fields"][item]
        except KeyError as e:
            raise AttributeError(item) from e

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MappingConfig):
            return NotImplemented
        return self._fields == other._fields

    def __repr__(self) -> str:
        return f"MappingConfig({self._fields!r})"

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def as_dict(self) -> RawConfigMap:
        return dict(self._fields)

    def serialize(self) -> RawConfigMap:
        """Return the fields as a JSON-encodable mapping for ``store``."""
        return self.as_dict()
