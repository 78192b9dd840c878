from .dijkstra import run_dijkstra
from .errors import (InvalidGraph, InvalidStart, MissingSource, TraceError,
                     UnknownAlgorithm, UnknownSource, UnknownTarget)
from .kruskal import run_kruskal
from .prim import run_prim
from .router import run_algorithm
from .types import AlgorithmRun, Edge, Graph, Node

__all__ = [
    "run_kruskal", "run_prim", "run_dijkstra", "run_algorithm",
    "Graph", "Node", "Edge", "AlgorithmRun",
    "TraceError", "InvalidGraph", "InvalidStart", "MissingSource",
    "UnknownSource", "UnknownTarget", "UnknownAlgorithm",
]
