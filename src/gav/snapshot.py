# -----------------------------------------------------------------------------
# Snapshots
# Purpose: One explicit copy function per kind of live engine state. Every
# value handed to Tracer.add goes through one of these, so a step owns its
# own immutable copy (tuples of frozen records, read-only mappings).
# -----------------------------------------------------------------------------

from __future__ import annotations
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .distance import Distance
from .types import Edge, PrimCandidate, QueueEntry, ShortestPath, TracedEdge
from .union_find import UnionFind


def edges(items: Sequence[Edge], statuses: Sequence[str]) -> Tuple[TracedEdge, ...]:
    return tuple(TracedEdge(e, s) for e, s in zip(items, statuses))


def accepted(items: Iterable[Edge]) -> Tuple[TracedEdge, ...]:
    return tuple(TracedEdge(e, "accepted") for e in items)


def components(uf: UnionFind, node_ids: Sequence[str]) -> Tuple[Tuple[str, ...], ...]:
    # Connected components ordered by root index, members in node input order
    return tuple(tuple(node_ids[i] for i in members) for members in uf.groups().values())


def frontier(queue: Iterable[PrimCandidate]) -> Tuple[PrimCandidate, ...]:
    return tuple(queue)


def queue(entries: Iterable[QueueEntry]) -> Tuple[QueueEntry, ...]:
    return tuple(entries)


def nodes(ids: Iterable[str]) -> Tuple[str, ...]:
    return tuple(ids)


def distances(d: Mapping[str, Distance]) -> Mapping[str, Distance]:
    return MappingProxyType(dict(d))


def previous(p: Mapping[str, Optional[str]]) -> Mapping[str, Optional[str]]:
    return MappingProxyType(dict(p))


def paths(p: Mapping[str, ShortestPath]) -> Mapping[str, ShortestPath]:
    return MappingProxyType(dict(p))
