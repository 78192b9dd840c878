import pytest
from conftest import actions

from gav.errors import InvalidGraph, InvalidStart
from gav.prim import run_prim


def test_triangle_from_a(triangle):
    run = run_prim(triangle, "A")
    assert [(e.edge.id, e.edge.weight) for e in run.final_result.mst_edges] == [("A-B", 1), ("B-C", 2)]
    assert run.final_result.total_cost == 3
    assert "skip" not in actions(run)
    assert actions(run) == ["initialize", "accept", "accept", "complete"]


def test_defaults_to_first_node(triangle):
    run = run_prim(triangle)
    assert run.final_result.start_node == "A"
    assert run.steps[0].description == "Starting Prim's Algorithm from node A"


def test_sample_graph_frontier_ordering(sample_graph):
    run = run_prim(sample_graph, "A")
    init = run.steps[0]
    assert [(c.edge_id, c.weight) for c in init["priority_queue"]] == [("A-D", 2), ("A-B", 4)]
    second = run.steps[1]
    assert second["visited_nodes"] == ("A", "D")
    assert [(c.from_id, c.to_id) for c in second["new_edges_added"]] == [("D", "B"), ("D", "E")]
    assert [c.edge_id for c in second["priority_queue"]] == ["B-D", "A-B", "D-E"]
    assert second.description == "Added edge A-D (weight: 2) to MST. Added 2 new edges to consider."
    third = run.steps[2]
    # A-B dropped: its far end B is now in the tree
    assert [c.edge_id for c in third["priority_queue"]] == ["B-C", "D-E", "B-E"]
    assert run.final_result.total_cost == 12
    assert run.steps[-1]["visited_nodes"] == ("A", "D", "B", "C", "F", "E")


def test_accepted_edge_keeps_original_edge_id(sample_graph):
    run = run_prim(sample_graph, "A")
    e = run.final_result.mst_edges[1].edge
    assert (e.id, e.from_id, e.to_id) == ("B-D", "D", "B")


def test_disconnected_graph_has_no_complete_step():
    graph = {"nodes": [{"id": n} for n in "ABC"],
             "edges": [{"from": "A", "to": "B", "weight": 1}]}
    run = run_prim(graph, "A")
    assert actions(run) == ["initialize", "accept"]
    assert run.final_result.edge_count == 1


def test_single_node_completes_immediately():
    run = run_prim({"nodes": [{"id": "A"}], "edges": []})
    assert actions(run) == ["initialize", "complete"]


def test_unknown_start_is_invalid(triangle):
    with pytest.raises(InvalidStart):
        run_prim(triangle, "Q")


def test_empty_graph_is_invalid():
    with pytest.raises(InvalidGraph):
        run_prim({"nodes": [], "edges": []})
