"""Boolean threshold checks over the uniform source."""

from __future__ import annotations

from .source import UniformFn, uniform


def chance(p: float, *, random_fn: UniformFn = uniform) -> bool:
    """Return True with probability ``p`` (a fraction, 0..1)."""

    return random_fn() < p


def chance_percent(p: float, *, random_fn: UniformFn = uniform) -> bool:
    """Return True with probability ``p`` percent (0..100)."""

    return random_fn() * 100 < p


__all__ = ["chance", "chance_percent"]
