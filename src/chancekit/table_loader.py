"""Load weight tables from JSON or YAML files.

A table file looks like::

    {
      "entries": [
        {"key": "common", "weight": 70, "value": {"gold": 5}},
        {"key": "rare", "weight": 25},
        {"key": "legendary", "weight": 5}
      ],
      "config": {"trim": false}
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, Optional

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

from pydantic import BaseModel, Field, field_validator

from .config import SelectorConfig
from .errors import NoValidEntriesError
from .selectors import KeyedSelector, MappedSelector, build_keyed, build_mapped
from .source import UniformFn, uniform
from .telemetry import TelemetryPublisher, TelemetrySink


class WeightEntry(BaseModel):
    """Single weighted row of a table."""

    key: str
    weight: float = Field(default=1.0)
    value: Any = None


class WeightTable(BaseModel):
    """Named rows plus the selector defaults they are drawn with."""

    entries: list[WeightEntry] = Field(default_factory=list)
    config: SelectorConfig = Field(default_factory=SelectorConfig)

    @field_validator("entries")
    @classmethod
    def _unique_keys(cls, value: list[WeightEntry]) -> list[WeightEntry]:
        seen: set[str] = set()
        for entry in value:
            if entry.key in seen:
                raise ValueError(f"duplicate weight table key: {entry.key!r}")
            seen.add(entry.key)
        return value

    def as_mapping(self) -> dict[str, WeightEntry]:
        return {entry.key: entry for entry in self.entries}

    def selector(
        self,
        *,
        random_fn: UniformFn = uniform,
        telemetry: Optional[TelemetryPublisher] = None,
        sinks: Optional[Iterable[TelemetrySink]] = None,
        name: Optional[str] = None,
    ) -> KeyedSelector[str]:
        """Build a selector drawing entry keys."""

        return build_keyed(
            self.as_mapping(),
            lambda _key, entry: entry.weight,
            self.config.trim,
            random_fn=random_fn,
            telemetry=self._publisher(telemetry, sinks),
            name=name,
        )

    def value_selector(
        self,
        *,
        random_fn: UniformFn = uniform,
        telemetry: Optional[TelemetryPublisher] = None,
        sinks: Optional[Iterable[TelemetrySink]] = None,
        name: Optional[str] = None,
    ) -> MappedSelector[str, WeightEntry, Any]:
        """Build a selector drawing entry values, or keys for rows without one."""

        return build_mapped(
            self.as_mapping(),
            lambda _key, entry: entry.weight,
            lambda key, entry: key if entry.value is None else entry.value,
            self.config.trim,
            random_fn=random_fn,
            telemetry=self._publisher(telemetry, sinks),
            name=name,
        )

    def _publisher(
        self,
        telemetry: Optional[TelemetryPublisher],
        sinks: Optional[Iterable[TelemetrySink]],
    ) -> Optional[TelemetryPublisher]:
        if telemetry is not None:
            return telemetry
        return TelemetryPublisher.for_selector(self.config, sinks=sinks)


def load_weight_table(path: str | Path) -> WeightTable:
    """Load a weight table from a JSON or YAML file."""

    data = _read_file(path)
    table = WeightTable.model_validate(data)
    if not table.entries:
        raise NoValidEntriesError(f"weight table {path} contains no entries")
    return table


def _read_file(path: str | Path) -> dict:
    payload = Path(path).read_text(encoding="utf-8")
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required for YAML weight tables")
        return yaml.safe_load(payload) or {}
    return json.loads(payload)


__all__ = ["WeightEntry", "WeightTable", "load_weight_table"]
