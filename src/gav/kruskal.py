# -----------------------------------------------------------------------------
# Kruskal trace engine
# Purpose: Build a minimum spanning tree (or forest) by scanning edges in
# ascending weight order and joining components with Union-Find, recording
# one step per examined edge.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Any, Dict, List

from . import snapshot
from .formatters import edge_label, num
from .tracer import Tracer
from .types import AlgorithmRun, Edge, Graph, KruskalResult, TracedEdge
from .union_find import UnionFind

logger = logging.getLogger(__name__)


def run_kruskal(graph: Graph | Dict[str, Any]) -> AlgorithmRun:
    """
    Steps:
      initialize  every usable edge listed in sorted order, all 'pending'
      accept      edge joined two components
      reject      edge endpoints already connected (would close a cycle)
      complete    emitted once n-1 edges are accepted; scanning stops there
                  (a lone node is already spanned, so its first edge completes it)
    A disconnected graph never reaches n-1 accepts, so its trace ends after the
    last edge without a 'complete' step and the result describes the forest.
    """
    g = Graph.coerce(graph)
    node_ids = g.node_ids()
    index = {nid: i for i, nid in enumerate(node_ids)}
    logger.info("Kruskal: %d nodes, %d edges", len(node_ids), len(g.edges))

    usable: List[Edge] = []
    for e in g.edges:
        if e.from_id not in index or e.to_id not in index:
            logger.debug("Skipping edge %s: unknown endpoint %s or %s", e.id, e.from_id, e.to_id)
            continue
        usable.append(e)

    # sorted() is stable: equal weights keep input order
    edges = sorted(usable, key=lambda e: e.weight)
    status = ["pending"] * len(edges)
    uf = UnionFind(len(node_ids))
    mst: List[Edge] = []
    total = 0
    needed = len(node_ids) - 1

    tracer = Tracer()
    tracer.add(
        "initialize", "Starting Kruskal's Algorithm. Edges sorted by weight.",
        current_edge=None,
        sorted_edges=snapshot.edges(edges, status),
        mst_edges=(),
        union_find_state=snapshot.components(uf, node_ids),
        total_cost=total,
    )

    for i, edge in enumerate(edges):
        cycle = uf.connected(index[edge.from_id], index[edge.to_id])
        label = edge_label(edge.from_id, edge.to_id, edge.weight)
        if cycle:
            status[i] = "rejected"
            action, description = "reject", f"Edge {label} would create a cycle. Rejected."
        else:
            uf.union(index[edge.from_id], index[edge.to_id])
            mst.append(edge)
            total += edge.weight
            status[i] = "accepted"
            action, description = "accept", f"Edge {label} added to MST."

        tracer.add(
            action, description,
            current_edge=TracedEdge(edge, status[i]),
            sorted_edges=snapshot.edges(edges, status),
            mst_edges=snapshot.accepted(mst),
            union_find_state=snapshot.components(uf, node_ids),
            total_cost=total,
            would_create_cycle=cycle,
        )

        if len(mst) == needed:
            tracer.add(
                "complete", f"MST completed! Total cost: {num(total)}",
                current_edge=None,
                sorted_edges=snapshot.edges(edges, status),
                mst_edges=snapshot.accepted(mst),
                union_find_state=snapshot.components(uf, node_ids),
                total_cost=total,
            )
            break

    logger.info("Kruskal: accepted %d edges, total cost %s", len(mst), num(total))
    result = KruskalResult(mst_edges=snapshot.accepted(mst), total_cost=total, edge_count=len(mst))
    return AlgorithmRun("Kruskal", tracer.steps(), result)
