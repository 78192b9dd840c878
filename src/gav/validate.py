# -----------------------------------------------------------------------------
# Graph validator
# Purpose: Whole-graph shape check run before any engine touches the input.
# Strict on structure (fails the whole request); individual edges pointing at
# unknown node ids are NOT checked here, the engines skip those on their own.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import Any, Mapping, Sequence

from .errors import InvalidGraph


def _is_sequence(x: Any) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes))


def _is_weight(w: Any) -> bool:
    # bool is an int subclass; a True weight is a malformed payload, not 1
    if isinstance(w, bool) or not isinstance(w, (int, float)):
        return False
    return math.isfinite(w)


def validate_graph(graph: Any) -> bool:
    """
    Raise InvalidGraph unless:
      - graph is a mapping with 'nodes' and 'edges' sequences
      - there is at least one node, each with a unique non-empty id
      - every edge has non-empty 'from' and 'to' and a numeric 'weight'
      - every weight is a finite, non-negative number
      - a 'directed' flag, when given, is a real boolean
    """
    if not isinstance(graph, Mapping) or graph.get("nodes") is None or graph.get("edges") is None:
        raise InvalidGraph("Graph must contain nodes and edges arrays")

    nodes, edges = graph["nodes"], graph["edges"]
    if not _is_sequence(nodes) or not _is_sequence(edges):
        raise InvalidGraph("Nodes and edges must be arrays")

    if len(nodes) == 0:
        raise InvalidGraph("Graph must have at least one node")

    seen = set()
    for node in nodes:
        if not isinstance(node, Mapping) or node.get("id") in (None, ""):
            raise InvalidGraph("Each node must have an id")
        node_id = str(node["id"])
        if node_id in seen:
            raise InvalidGraph(f"Duplicate node id '{node_id}'")
        seen.add(node_id)

    for edge in edges:
        if (not isinstance(edge, Mapping) or edge.get("from") in (None, "")
                or edge.get("to") in (None, "") or edge.get("weight") is None):
            raise InvalidGraph("Each edge must have from, to, and weight properties")
        if not _is_weight(edge["weight"]) or edge["weight"] < 0:
            raise InvalidGraph("Edge weights must be non-negative numbers")
        if edge.get("directed") is not None and not isinstance(edge["directed"], bool):
            raise InvalidGraph("Edge directed flag must be a boolean")

    return True
