"""Selector telemetry: build, draw and exhaustion events fanned out to sinks.

Selectors hold an optional :class:`TelemetryPublisher`. The publisher decides
whether an event kind is wanted at all (so selectors skip building the event)
and samples what remains before handing it to each sink.
"""

from __future__ import annotations

import logging
import random
from collections import Counter
from typing import Callable, Iterable, Optional, Protocol

from .config import SelectorConfig, TelemetryConfig
from .types import SELECTOR_DRAW, DrawEvent

LOGGER = logging.getLogger(__name__)


class TelemetrySink(Protocol):
    """Receives selector events."""

    def handle(self, event: DrawEvent) -> None:  # pragma: no cover - protocol
        ...


class TelemetryPublisher:
    """Forward selector events of the configured kinds to sinks."""

    def __init__(
        self,
        config: TelemetryConfig,
        *,
        sinks: Optional[Iterable[TelemetrySink]] = None,
        random_fn: Callable[[], float] = random.random,
    ) -> None:
        self.config = config
        self._random = random_fn
        self._sinks: list[TelemetrySink] = list(sinks or [])

    @classmethod
    def for_selector(
        cls,
        config: SelectorConfig,
        *,
        sinks: Optional[Iterable[TelemetrySink]] = None,
        random_fn: Callable[[], float] = random.random,
    ) -> Optional["TelemetryPublisher"]:
        """Publisher for a selector built with ``config``, or None when disabled.

        Without explicit sinks, events go to a DEBUG-level logging sink.
        """

        if not config.telemetry.enabled:
            return None
        if sinks is None:
            sinks = [LoggingTelemetrySink(level=logging.DEBUG)]
        return cls(config.telemetry, sinks=sinks, random_fn=random_fn)

    @property
    def sinks(self) -> list[TelemetrySink]:
        return list(self._sinks)

    def subscribe(self, sink: TelemetrySink) -> None:
        self._sinks.append(sink)

    def unsubscribe(self, sink: TelemetrySink) -> None:
        if sink in self._sinks:
            self._sinks.remove(sink)

    def wants(self, kind: str) -> bool:
        return self.config.enabled and kind in self.config.events and bool(self._sinks)

    def emit(self, event: DrawEvent) -> None:
        if not self.wants(event.event):
            return
        if self._random() > self.config.sample_rate:
            return
        for sink in list(self._sinks):
            try:
                sink.handle(event)
            except Exception:  # pragma: no cover - a broken sink must not fail the draw
                LOGGER.exception("Telemetry sink %s failed on %s", sink, event.event)


class LoggingTelemetrySink:
    """Log one line per selector event."""

    def __init__(self, level: int = logging.INFO) -> None:
        self.level = level

    def handle(self, event: DrawEvent) -> None:
        LOGGER.log(
            self.level,
            "%s selector=%s index=%s remaining=%s",
            event.event,
            event.selector or "-",
            event.index,
            event.remaining,
        )


class InMemoryTelemetrySink:
    """Keeps every event; handy for inspecting draw sequences in tests."""

    def __init__(self) -> None:
        self.events: list[DrawEvent] = []

    def handle(self, event: DrawEvent) -> None:
        self.events.append(event)

    def kinds(self) -> list[str]:
        return [event.event for event in self.events]

    def draw_indices(self) -> Counter[int]:
        """How often each backing index was drawn."""

        return Counter(
            event.index
            for event in self.events
            if event.event == SELECTOR_DRAW and event.index is not None
        )


__all__ = [
    "InMemoryTelemetrySink",
    "LoggingTelemetrySink",
    "TelemetryPublisher",
    "TelemetrySink",
]
