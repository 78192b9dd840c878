from __future__ import annotations
from typing import Iterable

from .distance import Distance, UNREACHABLE


def num(x: float) -> str:
    # 4.0 -> "4", 2.5 -> "2.5"
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def dist(d: Distance) -> str:
    return "∞" if d is UNREACHABLE else num(d)


def path(ids: Iterable[str]) -> str:
    return " → ".join(ids)


def edge_label(from_id: str, to_id: str, weight: float) -> str:
    return f"{from_id}-{to_id} (weight: {num(weight)})"
