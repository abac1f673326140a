"""Weighted selection of keys from a key/value mapping."""

from __future__ import annotations

from typing import Generic, Iterator, Mapping, Optional

from ..errors import InvalidWeightError, NoValidEntriesError
from ..source import UniformFn, uniform
from ..telemetry import TelemetryPublisher
from ..types import K, V, WeightFn
from .weighted import WeightedSelector, build_weighted, is_weight


class KeyedSelector(Generic[K]):
    """Draws keys of a mapping with weights derived by ``weight_fn``.

    Only pairs whose weight is strictly positive are kept; the rest are
    dropped from the derived arrays entirely. The caller's mapping is never
    modified, trimming only shrinks the derived key list.
    """

    def __init__(self, keys: list[K], delegate: WeightedSelector[K]) -> None:
        self._keys = keys
        self._delegate = delegate

    @property
    def keys(self) -> list[K]:
        """Keys that can still be drawn."""

        return list(self._keys)

    @property
    def selector(self) -> WeightedSelector[K]:
        return self._delegate

    def __len__(self) -> int:
        return len(self._keys)

    def __call__(self) -> K:
        return self.draw()

    def __iter__(self) -> Iterator[K]:
        """Yield keys until the selector is exhausted.

        Only a trimming selector ever runs out; without trim this never stops.
        """

        return iter(self._delegate)

    def draw(self) -> K:
        return self._delegate.draw()


def derive_weights(mapping: Mapping[K, V], weight_fn: WeightFn) -> tuple[list[K], list[float]]:
    """Return parallel key/weight lists for the positively weighted pairs."""

    keys: list[K] = []
    weights: list[float] = []
    for key, value in mapping.items():
        weight = weight_fn(key, value)
        if not is_weight(weight):
            raise InvalidWeightError(weight, key)
        if weight > 0:
            keys.append(key)
            weights.append(weight)
    return keys, weights


def build_keyed(
    mapping: Mapping[K, V],
    weight_fn: WeightFn,
    trim: bool = False,
    *,
    random_fn: UniformFn = uniform,
    telemetry: Optional[TelemetryPublisher] = None,
    name: Optional[str] = None,
) -> KeyedSelector[K]:
    """Build a selector drawing keys of ``mapping``.

    ``weight_fn(key, value)`` is called once per pair, at build time.

    Raises:
        InvalidWeightError: ``weight_fn`` returned something other than a finite real number.
        NoValidEntriesError: no pair received a positive weight.
    """

    keys, weights = derive_weights(mapping, weight_fn)
    if not keys:
        raise NoValidEntriesError("no key received a weight > 0")
    delegate = build_weighted(
        keys,
        weights,
        trim,
        random_fn=random_fn,
        telemetry=telemetry,
        name=name,
    )
    return KeyedSelector(keys, delegate)


__all__ = ["KeyedSelector", "build_keyed", "derive_weights"]
