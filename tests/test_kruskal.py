from conftest import actions

from gav.kruskal import run_kruskal


def test_sample_graph_trace(sample_graph):
    run = run_kruskal(sample_graph)
    assert actions(run) == ["initialize", "accept", "accept", "accept", "accept",
                            "reject", "accept", "complete"]
    assert [s.step for s in run.steps] == list(range(8))
    assert run.final_result.total_cost == 12
    assert [e.edge.id for e in run.final_result.mst_edges] == ["B-D", "A-D", "C-F", "B-C", "E-F"]
    assert run.final_result.edge_count == 5


def test_sort_is_stable_on_equal_weights(sample_graph):
    first = run_kruskal(sample_graph).steps[0]
    assert [e.edge.id for e in first["sorted_edges"]] == [
        "B-D", "A-D", "C-F", "B-C", "A-B", "E-F", "C-E", "D-E", "B-E"]
    assert {e.status for e in first["sorted_edges"]} == {"pending"}


def test_rejected_edge_narrates_cycle(sample_graph):
    step = run_kruskal(sample_graph).steps[5]
    assert step.action == "reject"
    assert step["would_create_cycle"] is True
    assert step.description == "Edge A-B (weight: 4) would create a cycle. Rejected."
    assert [e.status for e in step["sorted_edges"]] == [
        "accepted", "accepted", "accepted", "accepted", "rejected",
        "pending", "pending", "pending", "pending"]


def test_union_find_state_groups_components(sample_graph):
    steps = run_kruskal(sample_graph).steps
    assert steps[0]["union_find_state"] == (("A",), ("B",), ("C",), ("D",), ("E",), ("F",))
    assert steps[1]["union_find_state"] == (("A",), ("B", "D"), ("C",), ("E",), ("F",))
    assert steps[-1]["union_find_state"] == (("A", "B", "C", "D", "E", "F"),)


def test_stops_scanning_once_tree_is_complete(sample_graph):
    run = run_kruskal(sample_graph)
    last = run.steps[-1]
    assert last.action == "complete"
    assert last.description == "MST completed! Total cost: 12"
    # C-E, D-E, B-E were never examined
    assert [e.status for e in last["sorted_edges"]][-3:] == ["pending"] * 3


def test_no_edges_gives_single_initialize_step():
    run = run_kruskal({"nodes": [{"id": "A"}, {"id": "B"}], "edges": []})
    assert actions(run) == ["initialize"]
    assert run.final_result.edge_count == 0
    assert run.final_result.total_cost == 0


def test_disconnected_graph_ends_without_complete():
    graph = {"nodes": [{"id": n} for n in "ABCD"],
             "edges": [{"from": "A", "to": "B", "weight": 1},
                       {"from": "C", "to": "D", "weight": 2}]}
    run = run_kruskal(graph)
    assert actions(run) == ["initialize", "accept", "accept"]
    assert run.final_result.edge_count == 2
    assert run.final_result.total_cost == 3
    assert run.steps[-1]["union_find_state"] == (("A", "B"), ("C", "D"))


def test_accepted_edges_form_a_tree(sample_graph):
    from gav.union_find import UnionFind
    run = run_kruskal(sample_graph)
    index = {n["id"]: i for i, n in enumerate(sample_graph["nodes"])}
    uf = UnionFind(len(index))
    for e in run.final_result.mst_edges:
        assert uf.union(index[e.edge.from_id], index[e.edge.to_id])
    assert run.final_result.edge_count == min(len(sample_graph["edges"]), len(index) - 1)


def test_edge_with_unknown_endpoint_is_skipped(triangle):
    triangle["edges"].append({"id": "A-Z", "from": "A", "to": "Z", "weight": 0})
    run = run_kruskal(triangle)
    for step in run.steps:
        assert all(e.edge.id != "A-Z" for e in step["sorted_edges"])
        assert all(e.edge.id != "A-Z" for e in step["mst_edges"])
    assert run.final_result.total_cost == 3


def test_float_weights_narrate_cleanly():
    run = run_kruskal({"nodes": [{"id": "A"}, {"id": "B"}],
                       "edges": [{"from": "A", "to": "B", "weight": 2.0}]})
    assert run.steps[1].description == "Edge A-B (weight: 2) added to MST."


def test_single_node_with_self_loop_completes():
    run = run_kruskal({"nodes": [{"id": "A"}],
                       "edges": [{"from": "A", "to": "A", "weight": 1}]})
    assert actions(run) == ["initialize", "reject", "complete"]
    assert run.steps[-1].description == "MST completed! Total cost: 0"
    assert run.final_result.edge_count == 0
