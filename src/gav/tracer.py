# -----------------------------------------------------------------------------
# Tracing utility
# Purpose:
#   Append-only step collector shared by the three engines. Numbers steps
#   0, 1, 2, ... in append order and freezes each step's state so nothing the
#   engine does afterwards can reach back into an emitted step. Produces a
#   JSON-friendly list suitable for API responses and replay.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Tuple

from .distance import Unreachable


@dataclass(frozen=True)
class Step:
    # One trace record: sequence number, action tag, narration, state snapshot.
    step: int
    action: str
    description: str
    state: Mapping[str, Any]

    def __getitem__(self, key: str) -> Any:
        return self.state[key]

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"step": self.step, "description": self.description}
        for key, val in self.state.items():
            out[_camel(key)] = export(val)
        out["action"] = self.action
        return out


class Tracer:
    def __init__(self): self._steps: List[Step] = []

    def add(self, action: str, description: str, **state: Any) -> Step:
        """
        Append a step. State values must already be snapshots (see snapshot.py);
        the mapping itself is copied and wrapped read-only here.
        """
        s = Step(len(self._steps), action, description, MappingProxyType(dict(state)))
        self._steps.append(s)
        return s

    def steps(self) -> Tuple[Step, ...]: return tuple(self._steps)


def export(val: Any) -> Any:
    """Recursively turn snapshot values into plain JSON-ready data."""
    if isinstance(val, Unreachable):
        return None
    if hasattr(val, "to_dict"):
        return val.to_dict()
    if isinstance(val, Mapping):
        return {k: export(v) for k, v in val.items()}
    if isinstance(val, (list, tuple)):
        return [export(v) for v in val]
    return val


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(p.capitalize() for p in rest)
