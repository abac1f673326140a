"""Exceptions raised by selector construction and draws."""

from __future__ import annotations


class ChanceKitError(Exception):
    """Base class for every error raised by chancekit."""


class LengthMismatchError(ChanceKitError, ValueError):
    """Items and weights do not have the same length."""

    def __init__(self, items: int, weights: int) -> None:
        super().__init__(f"items and weights must have the same length (got {items} and {weights})")
        self.items = items
        self.weights = weights


class InvalidWeightError(ChanceKitError, TypeError):
    """A weight is not a finite real number."""

    def __init__(self, weight: object, index: object = None) -> None:
        where = "" if index is None else f" at {index!r}"
        super().__init__(f"weight{where} must be a finite real number, got {type(weight).__name__}: {weight!r}")
        self.weight = weight
        self.index = index


class NoValidEntriesError(ChanceKitError, ValueError):
    """No entry has a weight strictly greater than zero."""

    def __init__(self, message: str = "at least one weight must be > 0") -> None:
        super().__init__(message)


class EmptySelectorError(ChanceKitError, LookupError):
    """A draw was attempted after every selectable entry was trimmed away."""

    def __init__(self, message: str = "selector has no selectable entries left") -> None:
        super().__init__(message)


__all__ = [
    "ChanceKitError",
    "EmptySelectorError",
    "InvalidWeightError",
    "LengthMismatchError",
    "NoValidEntriesError",
]
