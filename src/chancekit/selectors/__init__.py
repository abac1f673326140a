"""Weighted selectors over sequences and mappings."""

from .keyed import KeyedSelector, build_keyed
from .mapped import MappedSelector, build_mapped
from .weighted import WeightedSelector, build_weighted

__all__ = [
    "KeyedSelector",
    "MappedSelector",
    "WeightedSelector",
    "build_keyed",
    "build_mapped",
    "build_weighted",
]
