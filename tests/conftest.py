import copy
import pytest

SAMPLE = {
    "nodes": [{"id": n, "label": f"Node {n}"} for n in "ABCDEF"],
    "edges": [
        {"id": "A-B", "from": "A", "to": "B", "weight": 4},
        {"id": "A-D", "from": "A", "to": "D", "weight": 2},
        {"id": "B-C", "from": "B", "to": "C", "weight": 3},
        {"id": "B-D", "from": "B", "to": "D", "weight": 1},
        {"id": "B-E", "from": "B", "to": "E", "weight": 7},
        {"id": "C-E", "from": "C", "to": "E", "weight": 5},
        {"id": "C-F", "from": "C", "to": "F", "weight": 2},
        {"id": "D-E", "from": "D", "to": "E", "weight": 6},
        {"id": "E-F", "from": "E", "to": "F", "weight": 4},
    ],
}

TRIANGLE = {
    "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
    "edges": [
        {"from": "A", "to": "B", "weight": 1},
        {"from": "B", "to": "C", "weight": 2},
        {"from": "A", "to": "C", "weight": 5},
    ],
}


@pytest.fixture
def sample_graph():
    return copy.deepcopy(SAMPLE)


@pytest.fixture
def triangle():
    return copy.deepcopy(TRIANGLE)


def actions(run):
    return [s.action for s in run.steps]
