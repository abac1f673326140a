"""Weighted selection over parallel item and weight sequences.

A selector fixes its pivot once, at construction: ``pivot = uniform() * total``
where ``total`` is the sum of the positive weights. Each draw walks the
weights left to right, accumulating a running total, and picks the first
positive-weight index whose running total reaches the pivot.

With ``trim=True`` the drawn entry is deleted from the caller's sequences.
The pivot and total are *not* recomputed afterwards, so successive draws are
replays of the same pivot against a shrinking prefix sum rather than fresh
independent samples. Once the pivot exceeds the remaining prefix sum the walk
falls back to the last positive-weight index, which keeps every draw distinct
until the selectable entries run out.
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Generic, Iterator, MutableSequence, Optional, Sequence

from ..errors import EmptySelectorError, InvalidWeightError, LengthMismatchError, NoValidEntriesError
from ..source import UniformFn, uniform
from ..telemetry import TelemetryPublisher
from ..types import SELECTOR_BUILD, SELECTOR_DRAW, SELECTOR_EXHAUSTED, DrawEvent, Number, V

LOGGER = logging.getLogger(__name__)


def is_weight(value: object) -> bool:
    """Return True for finite real numbers; booleans are rejected."""

    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        return False
    # NaN poisons the running total and inf turns a zero pivot into NaN
    return math.isfinite(value)


def positive_total(weights: Sequence[Number]) -> Number:
    """Sum of the weights strictly greater than zero."""

    return sum(weight for weight in weights if weight > 0)


class WeightedSelector(Generic[V]):
    """Repeatable weighted draw bound to caller-owned sequences.

    Use :func:`build_weighted` rather than instantiating directly; it performs
    the validation and fixes the pivot.
    """

    def __init__(
        self,
        items: Sequence[V],
        weights: Sequence[Number],
        *,
        pivot: float,
        total: Number,
        trim: bool = False,
        telemetry: Optional[TelemetryPublisher] = None,
        name: Optional[str] = None,
    ) -> None:
        self._items = items
        self._weights = weights
        self._pivot = pivot
        self._total = total
        self._trim = trim
        self._telemetry = telemetry
        self.name = name

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def pivot(self) -> float:
        """Random point in ``[0, total)`` fixed at construction."""

        return self._pivot

    @property
    def total(self) -> Number:
        """Sum of positive weights at construction time."""

        return self._total

    @property
    def trim(self) -> bool:
        return self._trim

    def __len__(self) -> int:
        return len(self._items)

    def __call__(self) -> V:
        return self.draw()

    def __iter__(self) -> Iterator[V]:
        """Yield draws until the selector is exhausted.

        Without trim nothing is ever removed, so the iterator is infinite.
        """

        while True:
            try:
                yield self.draw()
            except EmptySelectorError:
                return

    def draw(self) -> V:
        """Return the item at the chosen index, trimming it if configured."""

        index = self._walk()
        if index is None:
            LOGGER.debug("Selector %s exhausted", self.name or hex(id(self)))
            self._emit(SELECTOR_EXHAUSTED)
            raise EmptySelectorError()

        item = self._items[index]
        if self._trim:
            del self._items[index]
            del self._weights[index]
        self._emit(SELECTOR_DRAW, index=index)
        return item

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _walk(self) -> Optional[int]:
        running = 0
        last_good: Optional[int] = None
        for index, weight in enumerate(self._weights):
            running += weight
            if weight > 0:
                if self._pivot <= running:
                    return index
                last_good = index
        # Accumulated float error may leave running just short of the pivot.
        return last_good

    def _emit(self, event: str, *, index: Optional[int] = None) -> None:
        if self._telemetry is None or not self._telemetry.wants(event):
            return
        self._telemetry.emit(
            DrawEvent(
                event=event,
                selector=self.name,
                index=index,
                remaining=len(self._items),
                payload={"pivot": self._pivot, "total": self._total, "trim": self._trim},
            )
        )

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return (
            f"<WeightedSelector{label} entries={len(self._items)} "
            f"total={self._total!r} trim={self._trim}>"
        )


def build_weighted(
    items: Sequence[V],
    weights: Sequence[Number],
    trim: bool = False,
    *,
    random_fn: UniformFn = uniform,
    telemetry: Optional[TelemetryPublisher] = None,
    name: Optional[str] = None,
) -> WeightedSelector[V]:
    """Build a selector drawing from ``items`` proportionally to ``weights``.

    Entries with a non-positive weight are never drawn but keep their index.
    When ``trim`` is set both sequences must be mutable; drawn entries are
    deleted from them in place.

    Raises:
        LengthMismatchError: ``items`` and ``weights`` differ in length.
        InvalidWeightError: a weight is not a finite real number.
        NoValidEntriesError: no weight is greater than zero.
    """

    if len(items) != len(weights):
        raise LengthMismatchError(len(items), len(weights))
    for index, weight in enumerate(weights):
        if not is_weight(weight):
            raise InvalidWeightError(weight, index)
    if trim and not (isinstance(items, MutableSequence) and isinstance(weights, MutableSequence)):
        raise TypeError("trim requires mutable items and weights sequences")

    total = positive_total(weights)
    if total == 0:
        raise NoValidEntriesError()

    pivot = random_fn() * total
    selector = WeightedSelector(
        items,
        weights,
        pivot=pivot,
        total=total,
        trim=trim,
        telemetry=telemetry,
        name=name,
    )
    LOGGER.debug("Built %r with pivot %s", selector, pivot)
    selector._emit(SELECTOR_BUILD)
    return selector


__all__ = ["WeightedSelector", "build_weighted", "is_weight", "positive_total"]
