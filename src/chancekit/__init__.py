"""Public package interface for chancekit."""

from .chance import chance, chance_percent
from .config import SelectorConfig, TelemetryConfig
from .errors import (
    ChanceKitError,
    EmptySelectorError,
    InvalidWeightError,
    LengthMismatchError,
    NoValidEntriesError,
)
from .ranges import between_floats, resolve
from .selectors import (
    KeyedSelector,
    MappedSelector,
    WeightedSelector,
    build_keyed,
    build_mapped,
    build_weighted,
)
from .source import uniform
from .table_loader import WeightEntry, WeightTable, load_weight_table
from .telemetry import InMemoryTelemetrySink, LoggingTelemetrySink, TelemetryPublisher
from .types import DrawEvent, RangeSpec

__version__ = "0.1.0"

__all__ = [
    "ChanceKitError",
    "DrawEvent",
    "EmptySelectorError",
    "InMemoryTelemetrySink",
    "InvalidWeightError",
    "KeyedSelector",
    "LengthMismatchError",
    "LoggingTelemetrySink",
    "MappedSelector",
    "NoValidEntriesError",
    "RangeSpec",
    "SelectorConfig",
    "TelemetryConfig",
    "TelemetryPublisher",
    "WeightEntry",
    "WeightTable",
    "WeightedSelector",
    "between_floats",
    "build_keyed",
    "build_mapped",
    "build_weighted",
    "chance",
    "chance_percent",
    "load_weight_table",
    "resolve",
    "uniform",
]
