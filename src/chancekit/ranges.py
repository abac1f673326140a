"""Resolve fixed numbers or ``{min, max}`` ranges into concrete values."""

from __future__ import annotations

import numbers
from typing import Mapping, Union

from pydantic import ValidationError

from .source import UniformFn, uniform
from .types import Number, RangeSpec

RangeLike = Union[Number, RangeSpec, Mapping[str, Number]]


def between_floats(minimum: float, maximum: float, *, random_fn: UniformFn = uniform) -> float:
    """Sample uniformly from ``[minimum, maximum)``.

    The bounds are not validated; with ``minimum > maximum`` the result lies
    in ``(maximum, minimum]``.
    """

    return minimum + random_fn() * (maximum - minimum)


def resolve(value: RangeLike, *, random_fn: UniformFn = uniform) -> Number:
    """Return ``value`` itself for a number, or a sample from a range.

    Ranges are given either as :class:`RangeSpec` or as a mapping holding
    ``min`` and ``max`` keys.
    """

    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return value
    if isinstance(value, RangeSpec):
        bounds = value
    elif isinstance(value, Mapping):
        try:
            bounds = RangeSpec.model_validate(value)
        except ValidationError as exc:
            raise TypeError(f"range mapping must hold numeric 'min' and 'max': {dict(value)!r}") from exc
    else:
        raise TypeError(f"expected a number or a min/max range, got {type(value).__name__}")
    return between_floats(bounds.min, bounds.max, random_fn=random_fn)


__all__ = ["RangeLike", "between_floats", "resolve"]
