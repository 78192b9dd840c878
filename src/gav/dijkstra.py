# -----------------------------------------------------------------------------
# Dijkstra trace engine
# Purpose: Single-source shortest paths with step-by-step narration.
# Responsibilities:
#   • Pop the closest frontier entry (list re-sorted stably each pop)
#   • Relax edges to unvisited neighbors, one frontier entry per node
#   • Optional early exit once the target is finalized
#   • Rebuild paths from predecessor pointers, bounded against bad chains
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Optional

from . import distance, snapshot
from .adjacency import build_adjacency
from .distance import UNREACHABLE, Distance
from .errors import MissingSource, UnknownSource, UnknownTarget
from .formatters import dist, path as fmt_path
from .tracer import Tracer
from .types import (AlgorithmRun, DijkstraResult, Graph, QueueEntry,
                    ShortestPath, UpdatedNeighbor)

logger = logging.getLogger(__name__)


def _by_distance(q: QueueEntry):
    return distance.sort_key(q.distance)


def reconstruct_paths(previous: Dict[str, Optional[str]], source: str,
                      node_ids: Iterable[str], distances: Dict[str, Distance],
                      max_steps: int) -> Dict[str, ShortestPath]:
    """
    Walk predecessor pointers back from each node. A path counts only if the
    walk ends exactly at the source within max_steps nodes; anything else
    (no pointer, a loop, a chain that never reaches the source) is "no path".
    """
    paths: Dict[str, ShortestPath] = {}
    for nid in node_ids:
        if nid == source:
            paths[nid] = ShortestPath((source,), 0)
            continue
        walk: List[str] = []
        cur: Optional[str] = nid
        while cur is not None and len(walk) < max_steps:
            walk.append(cur)
            if cur == source:
                break
            cur = previous.get(cur)
        walk.reverse()
        if walk and walk[0] == source:
            paths[nid] = ShortestPath(tuple(walk), distances.get(nid, UNREACHABLE))
        else:
            paths[nid] = ShortestPath((), UNREACHABLE)
    return paths


def run_dijkstra(graph: Graph | Dict[str, Any], source_node_id: Optional[str],
                 target_node_id: Optional[str] = None) -> AlgorithmRun:
    g = Graph.coerce(graph)
    if not source_node_id:
        raise MissingSource("Source node ID is required")
    if not g.has_node(source_node_id):
        raise UnknownSource(f"Source node '{source_node_id}' not found in graph")
    if target_node_id and not g.has_node(target_node_id):
        raise UnknownTarget(f"Target node '{target_node_id}' not found in graph")
    source, target = source_node_id, target_node_id or None
    logger.info("Dijkstra: source %s, target %s", source, target)

    node_ids = g.node_ids()
    cap = len(node_ids) + 1
    adj = build_adjacency(g)
    distances: Dict[str, Distance] = {nid: (0 if nid == source else UNREACHABLE) for nid in node_ids}
    previous: Dict[str, Optional[str]] = {nid: None for nid in node_ids}
    visited: List[str] = []
    done = set()
    queue = [QueueEntry(source, 0)]

    tracer = Tracer()

    def record(action: str, description: str, current: Optional[str], **extra: Any) -> None:
        tracer.add(
            action, description,
            current_node=current,
            distances=snapshot.distances(distances),
            previous=snapshot.previous(previous),
            visited=snapshot.nodes(visited),
            priority_queue=snapshot.queue(queue),
            shortest_paths=snapshot.paths(reconstruct_paths(previous, source, visited, distances, cap)),
            **extra,
        )

    record("initialize", f"Starting Dijkstra's Algorithm from node {source}", None)

    while queue:
        queue.sort(key=_by_distance)
        current = queue.pop(0)
        nid = current.node_id
        if nid in done:
            continue                    # stale duplicate, no step
        done.add(nid)
        visited.append(nid)
        record("process_node", f"Processing node {nid} with distance {dist(distances[nid])}", nid)

        if target and nid == target:
            break

        updated: List[UpdatedNeighbor] = []
        for arc in adj[nid]:
            if arc.to in done:
                continue
            candidate = distance.add(distances[nid], arc.weight)
            old = distances[arc.to]
            if distance.less(candidate, old):
                distances[arc.to] = candidate
                previous[arc.to] = nid
                updated.append(UpdatedNeighbor(arc.to, old, candidate, nid))
                # replace, never duplicate, the neighbor's frontier entry
                queue = [q for q in queue if q.node_id != arc.to]
                queue.append(QueueEntry(arc.to, candidate))

        if updated:
            record("update_distances",
                   f"Updated distances for {len(updated)} neighbor(s) of node {nid}", nid,
                   updated_neighbors=tuple(updated))

    final_paths = reconstruct_paths(previous, source, node_ids, distances, cap)

    description = f"All shortest paths from {source} computed"
    if target:
        if not distance.is_finite(distances[target]):
            description = f"No path exists from {source} to {target}"
        else:
            route = final_paths[target].path
            description = (f"Shortest path from {source} to {target}: "
                           f"{fmt_path(route) if route else 'No path'} (distance: {dist(distances[target])})")

    tracer.add(
        "complete", description,
        current_node=None,
        distances=snapshot.distances(distances),
        previous=snapshot.previous(previous),
        visited=snapshot.nodes(visited),
        priority_queue=(),
        shortest_paths=snapshot.paths(final_paths),
    )

    path_exists = distance.is_finite(distances[target]) if target else True
    logger.info("Dijkstra: visited %d of %d nodes", len(visited), len(node_ids))
    result = DijkstraResult(
        source_node=source, target_node=target,
        distances=snapshot.distances(distances),
        shortest_paths=snapshot.paths(final_paths),
        path_exists=path_exists,
    )
    return AlgorithmRun("Dijkstra", tracer.steps(), result)
