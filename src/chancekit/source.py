"""Uniform random source shared by every helper in the package."""

from __future__ import annotations

import random
from typing import Callable

UniformFn = Callable[[], float]


def uniform() -> float:
    """Return a float in ``[0, 1)`` from the process-wide generator."""

    return random.random()


__all__ = ["UniformFn", "uniform"]
