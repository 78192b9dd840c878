# -----------------------------------------------------------------------------
# Algorithm registry
# Purpose: Name → engine lookup used by the API, plus the static descriptions
# served by the info endpoint.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Any, Dict

from .dijkstra import run_dijkstra
from .errors import UnknownAlgorithm
from .kruskal import run_kruskal
from .prim import run_prim
from .types import AlgorithmRun

REGISTRY = {
    "kruskal": run_kruskal,
    "prim": run_prim,
    "dijkstra": run_dijkstra,
}

ALGORITHM_INFO: Dict[str, Dict[str, str]] = {
    "kruskal": {
        "algorithm": "Kruskal's Algorithm",
        "description": "Finds the Minimum Spanning Tree by sorting edges and using Union-Find to avoid cycles.",
        "timeComplexity": "O(E log E)",
        "spaceComplexity": "O(V)",
        "useCase": "Network design, clustering, minimum cost connectivity",
    },
    "prim": {
        "algorithm": "Prim's Algorithm",
        "description": "Finds the Minimum Spanning Tree by growing from a starting vertex using a priority queue.",
        "timeComplexity": "O(E log V) with binary heap",
        "spaceComplexity": "O(V)",
        "useCase": "Network design, circuit design, minimum cost tree construction",
    },
    "dijkstra": {
        "algorithm": "Dijkstra's Algorithm",
        "description": "Finds shortest paths from a source vertex to all other vertices using a priority queue.",
        "timeComplexity": "O((V + E) log V) with binary heap",
        "spaceComplexity": "O(V)",
        "useCase": "GPS navigation, network routing, social networks, game pathfinding",
    },
}


def run_algorithm(name: str, graph: Any, **params: Any) -> AlgorithmRun:
    key = (name or "").lower()
    if key not in REGISTRY:
        raise UnknownAlgorithm(f"Unknown algorithm: {name}")
    return REGISTRY[key](graph, **params)


def algorithm_info(name: str) -> Dict[str, str]:
    key = (name or "").lower()
    if key not in ALGORITHM_INFO:
        raise UnknownAlgorithm(f"Unknown algorithm: {name}")
    return dict(ALGORITHM_INFO[key])
