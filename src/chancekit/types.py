"""Common data types used across the chancekit package."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
M = TypeVar("M")

Number = Union[int, float]

SELECTOR_BUILD = "selector.build"
SELECTOR_DRAW = "selector.draw"
SELECTOR_EXHAUSTED = "selector.exhausted"
SELECTOR_EVENTS = frozenset({SELECTOR_BUILD, SELECTOR_DRAW, SELECTOR_EXHAUSTED})


class RangeSpec(BaseModel):
    """Inclusive-exclusive numeric range ``[min, max)`` resolved on demand.

    No ordering is enforced between the bounds; a reversed range simply
    samples from ``(max, min]``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


class DrawEvent(BaseModel):
    """Telemetry payload describing a selector lifecycle event."""

    event: str
    selector: Optional[str] = Field(
        default=None,
        description="Caller supplied selector name, if any.",
    )
    index: Optional[int] = Field(
        default=None,
        description="Index of the chosen entry in the backing sequence at draw time.",
    )
    remaining: Optional[int] = Field(
        default=None,
        description="Entries left in the backing sequence after the event.",
    )
    payload: dict[str, Any] = Field(default_factory=dict)


WeightFn = Callable[[Any, Any], Number]
MapFn = Callable[[Any, Any], Any]


__all__ = [
    "SELECTOR_BUILD",
    "SELECTOR_DRAW",
    "SELECTOR_EVENTS",
    "SELECTOR_EXHAUSTED",
    "DrawEvent",
    "K",
    "M",
    "MapFn",
    "Number",
    "RangeSpec",
    "V",
    "WeightFn",
]
