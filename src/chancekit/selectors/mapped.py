"""Keyed selection that maps each drawn pair to an arbitrary result."""

from __future__ import annotations

from typing import Generic, Iterator, Mapping, Optional

from ..source import UniformFn, uniform
from ..telemetry import TelemetryPublisher
from ..types import K, M, MapFn, V, WeightFn
from .keyed import KeyedSelector, build_keyed


class MappedSelector(Generic[K, V, M]):
    """Draws a key and returns ``map_fn(key, mapping[key])``."""

    def __init__(self, mapping: Mapping[K, V], keyed: KeyedSelector[K], map_fn: MapFn) -> None:
        self._mapping = mapping
        self._keyed = keyed
        self._map_fn = map_fn

    @property
    def keyed(self) -> KeyedSelector[K]:
        return self._keyed

    def __len__(self) -> int:
        return len(self._keyed)

    def __call__(self) -> M:
        return self.draw()

    def __iter__(self) -> Iterator[M]:
        """Yield mapped draws; infinite unless the selector trims."""

        for key in self._keyed:
            yield self._map_fn(key, self._mapping[key])

    def draw(self) -> M:
        key = self._keyed.draw()
        return self._map_fn(key, self._mapping[key])


def build_mapped(
    mapping: Mapping[K, V],
    weight_fn: WeightFn,
    map_fn: MapFn,
    trim: bool = False,
    *,
    random_fn: UniformFn = uniform,
    telemetry: Optional[TelemetryPublisher] = None,
    name: Optional[str] = None,
) -> MappedSelector[K, V, M]:
    """Build a keyed selector whose draws go through ``map_fn``."""

    keyed = build_keyed(
        mapping,
        weight_fn,
        trim,
        random_fn=random_fn,
        telemetry=telemetry,
        name=name,
    )
    return MappedSelector(mapping, keyed, map_fn)


__all__ = ["MappedSelector", "build_mapped"]
