# -----------------------------------------------------------------------------
# Adjacency list builder
# Purpose: Turn the edge list into per-node neighbor lists for Prim and
# Dijkstra. Undirected edges yield an arc each way, both tagged with the same
# edge id so either traversal maps back to one logical edge.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List

from .types import Graph

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Arc:
    to: str
    weight: float
    edge_id: str
    directed: bool = False


def build_adjacency(graph: Graph) -> Dict[str, List[Arc]]:
    adj: Dict[str, List[Arc]] = {nid: [] for nid in graph.node_ids()}
    for e in graph.edges:
        if e.from_id not in adj or e.to_id not in adj:
            logger.debug("Skipping edge %s: unknown endpoint %s or %s", e.id, e.from_id, e.to_id)
            continue
        adj[e.from_id].append(Arc(e.to_id, e.weight, e.id, e.directed))
        if not e.directed:
            adj[e.to_id].append(Arc(e.from_id, e.weight, e.id, e.directed))
    return adj
