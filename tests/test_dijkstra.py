import pytest
from conftest import actions

from gav.dijkstra import reconstruct_paths, run_dijkstra
from gav.distance import UNREACHABLE
from gav.errors import InvalidGraph, MissingSource, UnknownSource, UnknownTarget


def test_sample_graph_distances_from_a(sample_graph):
    res = run_dijkstra(sample_graph, "A").final_result
    assert dict(res.distances) == {"A": 0, "B": 3, "C": 6, "D": 2, "E": 8, "F": 8}
    assert res.shortest_paths["F"].path == ("A", "D", "B", "C", "F")
    assert res.shortest_paths["D"].path == ("A", "D")
    assert res.shortest_paths["A"].path == ("A",)
    assert res.path_exists is True
    assert all(p.path for p in res.shortest_paths.values())


def test_sample_graph_trace_shape(sample_graph):
    run = run_dijkstra(sample_graph, "A")
    assert actions(run) == [
        "initialize",
        "process_node", "update_distances",    # A
        "process_node", "update_distances",    # D
        "process_node", "update_distances",    # B
        "process_node", "update_distances",    # C
        "process_node",                        # E: nothing improves
        "process_node",                        # F
        "complete",
    ]
    assert run.steps[-1].description == "All shortest paths from A computed"
    assert run.steps[0]["distances"]["B"] is UNREACHABLE


def test_relaxation_replaces_frontier_entry(sample_graph):
    steps = run_dijkstra(sample_graph, "A").steps
    update_d = steps[4]
    assert update_d["current_node"] == "D"
    assert [(u.node_id, u.old_distance, u.new_distance, u.via) for u in update_d["updated_neighbors"]] == [
        ("B", 4, 3, "D"), ("E", UNREACHABLE, 8, "D")]
    # one entry per node: B's old distance-4 entry is gone
    assert [(q.node_id, q.distance) for q in update_d["priority_queue"]] == [("B", 3), ("E", 8)]


def test_equal_distances_keep_queue_order(sample_graph):
    run = run_dijkstra(sample_graph, "A")
    processed = [s["current_node"] for s in run.steps if s.action == "process_node"]
    assert processed == ["A", "D", "B", "C", "E", "F"]


def test_target_stops_early(sample_graph):
    run = run_dijkstra(sample_graph, "A", "B")
    assert actions(run)[-2:] == ["process_node", "complete"]
    assert run.steps[-2]["current_node"] == "B"
    assert run.steps[-1].description == "Shortest path from A to B: A → D → B (distance: 3)"
    # E was reached tentatively but never finalized
    assert "E" not in run.steps[-1]["visited"]
    assert run.final_result.path_exists is True


def test_unreachable_target():
    graph = {"nodes": [{"id": "A"}, {"id": "B"}, {"id": "G"}],
             "edges": [{"from": "A", "to": "B", "weight": 1}]}
    run = run_dijkstra(graph, "A", "G")
    last = run.steps[-1]
    assert last.action == "complete"
    assert last.description == "No path exists from A to G"
    assert run.final_result.distances["G"] is UNREACHABLE
    assert run.final_result.shortest_paths["G"].path == ()
    assert run.final_result.path_exists is False
    assert run.final_result.to_dict()["distances"]["G"] is None


def test_directed_edges_are_one_way():
    graph = {"nodes": [{"id": "A"}, {"id": "B"}],
             "edges": [{"from": "B", "to": "A", "weight": 1, "directed": True}]}
    res = run_dijkstra(graph, "A").final_result
    assert res.distances["B"] is UNREACHABLE


def test_paths_start_at_source_and_end_at_node(sample_graph):
    for step in run_dijkstra(sample_graph, "C").steps:
        for node_id, sp in step["shortest_paths"].items():
            if sp.path:
                assert sp.path[0] == "C" and sp.path[-1] == node_id


def test_reconstruct_paths_rejects_looping_pointers():
    previous = {"S": None, "X": "Y", "Y": "X"}
    paths = reconstruct_paths(previous, "S", ["S", "X", "Y"], {"S": 0, "X": 1, "Y": 2}, max_steps=4)
    assert paths["X"].path == () and paths["X"].distance is UNREACHABLE
    assert paths["S"].path == ("S",)


def test_unknown_endpoint_edges_are_ignored(triangle):
    triangle["edges"].append({"from": "C", "to": "nowhere", "weight": 0})
    res = run_dijkstra(triangle, "A").final_result
    assert dict(res.distances) == {"A": 0, "B": 1, "C": 3}


@pytest.mark.parametrize("source, target, error", [
    (None, None, MissingSource),
    ("", None, MissingSource),
    ("Q", None, UnknownSource),
    ("A", "Q", UnknownTarget),
])
def test_parameter_errors(triangle, source, target, error):
    with pytest.raises(error):
        run_dijkstra(triangle, source, target)


def test_invalid_graph_is_checked_before_parameters():
    with pytest.raises(InvalidGraph):
        run_dijkstra({"nodes": [{"id": "A"}]}, None)
