# -----------------------------------------------------------------------------
# Distances with an explicit "unreachable" value
# Purpose: Dijkstra needs a distance that compares greater than every finite
# number and absorbs addition. A dedicated singleton keeps it from ever being
# confused with (or overflowing into) a real number.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Tuple, Union


class Unreachable:
    """Singleton marker for a node no path has reached yet."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNREACHABLE"

    def __str__(self) -> str:
        return "∞"

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self


UNREACHABLE = Unreachable()

Distance = Union[int, float, Unreachable]


def is_finite(d: Distance) -> bool:
    return d is not UNREACHABLE


def add(d: Distance, weight: float) -> Distance:
    # unreachable + anything stays unreachable
    if d is UNREACHABLE:
        return UNREACHABLE
    return d + weight


def less(a: Distance, b: Distance) -> bool:
    """Strict a < b with UNREACHABLE above every finite value."""
    if a is UNREACHABLE:
        return False
    if b is UNREACHABLE:
        return True
    return a < b


def sort_key(d: Distance) -> Tuple[int, float]:
    return (1, 0.0) if d is UNREACHABLE else (0, d)


def to_json(d: Distance):
    # JSON has no infinity; unreachable travels as null
    return None if d is UNREACHABLE else d
