# -----------------------------------------------------------------------------
# Types module: Shared dataclasses for the trace engines
# Purpose:
#   Define the graph input model, the frontier entries the engines juggle,
#   the records embedded in trace steps, and the per-algorithm final results.
#   Everything here is frozen: steps and results hold these objects directly,
#   so they must never change after construction.
# -----------------------------------------------------------------------------

from __future__ import annotations
import yaml
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .distance import Distance, to_json
from .validate import validate_graph


@dataclass(frozen=True)
class Node:
    id: str
    label: Optional[str] = None
    # Display coordinates; carried through for the UI, ignored by the engines
    x: Optional[float] = None
    y: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id}
        for key in ("label", "x", "y"):
            val = getattr(self, key)
            if val is not None:
                out[key] = val
        return out


@dataclass(frozen=True)
class Edge:
    id: str
    from_id: str
    to_id: str
    weight: float
    directed: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "from": self.from_id, "to": self.to_id,
                "weight": self.weight, "directed": self.directed}


@dataclass(frozen=True)
class Graph:
    """
    Caller-supplied weighted graph. Read-only to every engine.
    Expected dict shape (JSON body or YAML document):
      nodes: [ { id: "A", label: "Node A", x: 150, y: 100 }, ... ]
      edges: [ { id: "A-B", from: "A", to: "B", weight: 4, directed: false }, ... ]
    Edge ids default to "<from>-<to>".
    """
    nodes: Tuple[Node, ...]
    edges: Tuple[Edge, ...]

    @staticmethod
    def from_dict(d: Any) -> "Graph":
        # Shape check first; raises InvalidGraph with a descriptive message
        validate_graph(d)
        nodes = tuple(
            Node(id=str(n["id"]), label=n.get("label"), x=n.get("x"), y=n.get("y"))
            for n in d["nodes"]
        )
        edges = []
        for e in d["edges"]:
            src, dst = str(e["from"]), str(e["to"])
            edges.append(Edge(
                id=str(e.get("id") or f"{src}-{dst}"),
                from_id=src, to_id=dst,
                weight=e["weight"],
                directed=e.get("directed") is True,
            ))
        return Graph(nodes=nodes, edges=tuple(edges))

    @staticmethod
    def from_yaml_text(text: str) -> "Graph":
        return Graph.from_dict(yaml.safe_load(text))

    @staticmethod
    def from_file(path: str) -> "Graph":
        with open(path, "r", encoding="utf-8") as f:
            return Graph.from_yaml_text(f.read())

    @staticmethod
    def coerce(obj: Any) -> "Graph":
        """Accept a Graph or a raw mapping; either way the result has passed validation."""
        if isinstance(obj, Graph):
            validate_graph(obj.to_dict())
            return obj
        return Graph.from_dict(obj)

    def to_dict(self) -> Dict[str, Any]:
        return {"nodes": [n.to_dict() for n in self.nodes],
                "edges": [e.to_dict() for e in self.edges]}

    def node_ids(self) -> List[str]:
        return [n.id for n in self.nodes]

    def has_node(self, node_id: str) -> bool:
        return any(n.id == node_id for n in self.nodes)


# ----------------------------- Frontier entries -------------------------------

@dataclass(frozen=True)
class PrimCandidate:
    # Tree edge candidate: leaves the tree at from_id, reaches to_id
    from_id: str
    to_id: str
    weight: float
    edge_id: str
    directed: bool = False

    def as_edge(self) -> Edge:
        return Edge(id=self.edge_id, from_id=self.from_id, to_id=self.to_id,
                    weight=self.weight, directed=self.directed)

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.from_id, "to": self.to_id,
                "weight": self.weight, "edgeId": self.edge_id}


@dataclass(frozen=True)
class QueueEntry:
    node_id: str
    distance: Distance

    def to_dict(self) -> Dict[str, Any]:
        return {"nodeId": self.node_id, "distance": to_json(self.distance)}


# ----------------------------- Step payload records ---------------------------

@dataclass(frozen=True)
class TracedEdge:
    # An edge as seen at one point of a run: pending | accepted | rejected | skipped
    edge: Edge
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return {**self.edge.to_dict(), "status": self.status}


@dataclass(frozen=True)
class TracedCandidate:
    candidate: PrimCandidate
    status: str

    def to_dict(self) -> Dict[str, Any]:
        return {**self.candidate.to_dict(), "status": self.status}


@dataclass(frozen=True)
class ShortestPath:
    path: Tuple[str, ...]
    distance: Distance

    def to_dict(self) -> Dict[str, Any]:
        return {"path": list(self.path), "distance": to_json(self.distance)}


@dataclass(frozen=True)
class UpdatedNeighbor:
    node_id: str
    old_distance: Distance
    new_distance: Distance
    via: str

    def to_dict(self) -> Dict[str, Any]:
        return {"nodeId": self.node_id,
                "oldDistance": to_json(self.old_distance),
                "newDistance": to_json(self.new_distance),
                "via": self.via}


# ----------------------------- Final results ----------------------------------

@dataclass(frozen=True)
class KruskalResult:
    mst_edges: Tuple[TracedEdge, ...]
    total_cost: float
    edge_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"mstEdges": [e.to_dict() for e in self.mst_edges],
                "totalCost": self.total_cost, "edgeCount": self.edge_count}


@dataclass(frozen=True)
class PrimResult:
    mst_edges: Tuple[TracedEdge, ...]
    total_cost: float
    edge_count: int
    start_node: str

    def to_dict(self) -> Dict[str, Any]:
        return {"mstEdges": [e.to_dict() for e in self.mst_edges],
                "totalCost": self.total_cost, "edgeCount": self.edge_count,
                "startNode": self.start_node}


@dataclass(frozen=True)
class DijkstraResult:
    source_node: str
    target_node: Optional[str]
    distances: Mapping[str, Distance]
    shortest_paths: Mapping[str, ShortestPath]
    path_exists: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceNode": self.source_node,
            "targetNode": self.target_node,
            "distances": {k: to_json(v) for k, v in self.distances.items()},
            "shortestPaths": {k: p.to_dict() for k, p in self.shortest_paths.items()},
            "pathExists": self.path_exists,
        }


@dataclass(frozen=True)
class AlgorithmRun:
    # What every engine returns: the full trace plus the summary
    algorithm: str
    steps: Tuple[Any, ...]          # Tuple[tracer.Step, ...]
    final_result: Any               # KruskalResult | PrimResult | DijkstraResult

    def to_dict(self) -> Dict[str, Any]:
        return {"algorithm": self.algorithm,
                "steps": [s.to_dict() for s in self.steps],
                "finalResult": self.final_result.to_dict()}

