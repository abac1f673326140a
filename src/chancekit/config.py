"""Configuration models for selectors and telemetry."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from .types import SELECTOR_EVENTS


class TelemetryConfig(BaseModel):
    """Controls emission of selector telemetry events."""

    enabled: bool = False
    sample_rate: float = Field(
        default=1.0,
        ge=0.0,
        le=1.0,
        description="Fraction of events forwarded to sinks.",
    )
    events: set[str] = Field(
        default_factory=lambda: set(SELECTOR_EVENTS),
        description="Event kinds forwarded to sinks, e.g. only 'selector.exhausted'.",
    )

    @field_validator("events")
    @classmethod
    def _validate_events(cls, value: set[str]) -> set[str]:
        unknown = value - SELECTOR_EVENTS
        if unknown:
            raise ValueError(f"unknown telemetry events: {sorted(unknown)}")
        return value


class SelectorConfig(BaseModel):
    """Defaults applied when selectors are built from weight tables."""

    trim: bool = Field(
        default=False,
        description="Remove each drawn entry so it cannot be drawn again.",
    )
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)


__all__ = ["SelectorConfig", "TelemetryConfig"]
