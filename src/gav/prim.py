# -----------------------------------------------------------------------------
# Prim trace engine
# Purpose: Grow a minimum spanning tree outward from one start node. The
# frontier is a plain list re-sorted (stably) by weight after every accept,
# so equal-weight candidates keep their discovery order.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from . import snapshot
from .adjacency import build_adjacency
from .errors import InvalidStart
from .formatters import edge_label, num
from .tracer import Tracer
from .types import AlgorithmRun, Edge, Graph, PrimCandidate, PrimResult, TracedCandidate

logger = logging.getLogger(__name__)


def _by_weight(c: PrimCandidate) -> float:
    return c.weight


def run_prim(graph: Graph | Dict[str, Any], start_node_id: Optional[str] = None) -> AlgorithmRun:
    g = Graph.coerce(graph)
    if not g.nodes:
        raise InvalidStart("Graph must have at least one node")
    start = start_node_id or g.nodes[0].id
    if not g.has_node(start):
        raise InvalidStart(f"Start node '{start}' not found in graph")
    logger.info("Prim: %d nodes, %d edges, start %s", len(g.nodes), len(g.edges), start)

    adj = build_adjacency(g)
    visited: List[str] = [start]        # insertion order, for the trace
    seen = {start}
    mst: List[Edge] = []
    total = 0

    queue = [PrimCandidate(start, a.to, a.weight, a.edge_id, a.directed)
             for a in adj[start] if a.to not in seen]
    queue.sort(key=_by_weight)

    tracer = Tracer()
    tracer.add(
        "initialize", f"Starting Prim's Algorithm from node {start}",
        current_edge=None,
        visited_nodes=snapshot.nodes(visited),
        priority_queue=snapshot.frontier(queue),
        mst_edges=(),
        total_cost=total,
    )

    while queue and len(seen) < len(g.nodes):
        current = queue.pop(0)
        label = edge_label(current.from_id, current.to_id, current.weight)

        if current.to_id in seen:
            # stale frontier entry: both ends already in the tree
            tracer.add(
                "skip", f"Edge {label} skipped - both nodes already in MST",
                current_edge=TracedCandidate(current, "skipped"),
                visited_nodes=snapshot.nodes(visited),
                priority_queue=snapshot.frontier(queue),
                mst_edges=snapshot.accepted(mst),
                total_cost=total,
            )
            continue

        mst.append(current.as_edge())
        total += current.weight
        visited.append(current.to_id)
        seen.add(current.to_id)

        discovered = [PrimCandidate(current.to_id, a.to, a.weight, a.edge_id, a.directed)
                      for a in adj[current.to_id] if a.to not in seen]
        queue.extend(discovered)
        queue = [c for c in queue if c.to_id not in seen]
        queue.sort(key=_by_weight)

        tracer.add(
            "accept",
            f"Added edge {label} to MST. Added {len(discovered)} new edges to consider.",
            current_edge=TracedCandidate(current, "accepted"),
            visited_nodes=snapshot.nodes(visited),
            priority_queue=snapshot.frontier(queue),
            mst_edges=snapshot.accepted(mst),
            total_cost=total,
            new_edges_added=snapshot.frontier(discovered),
        )

    # Only a spanning tree gets a terminal step; a partial forest just ends
    if len(seen) == len(g.nodes):
        tracer.add(
            "complete", f"MST completed! All nodes visited. Total cost: {num(total)}",
            current_edge=None,
            visited_nodes=snapshot.nodes(visited),
            priority_queue=(),
            mst_edges=snapshot.accepted(mst),
            total_cost=total,
        )
    else:
        logger.info("Prim: %d of %d nodes reachable from %s", len(seen), len(g.nodes), start)

    result = PrimResult(mst_edges=snapshot.accepted(mst), total_cost=total,
                        edge_count=len(mst), start_node=start)
    return AlgorithmRun("Prim", tracer.steps(), result)
