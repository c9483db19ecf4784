import pytest

from motionkit.astar import MyAStar
from motionkit.core import Graph, SearchHeuristic, ShortestPathProblem
from motionkit.wavefront import LookupSearchHeuristic


def _path_cost(graph, path):
    total = 0.0
    for a, b in zip(path, path[1:]):
        weights = [w for c, w in zip(graph.children(a), graph.outgoing_edges(a)) if c == b]
        assert weights, f"no edge {a}->{b}"
        total += min(weights)
    return total


@pytest.fixture
def triangle_graph():
    graph = Graph()
    graph.connect(0, 1, 1.0)
    graph.connect(1, 2, 1.0)
    graph.connect(0, 2, 5.0)
    return graph


def test_finds_cheaper_two_hop_path(triangle_graph):
    result = MyAStar().search(ShortestPathProblem(triangle_graph, 0, 2), SearchHeuristic())
    assert result.success is True
    assert result.node_path == [0, 1, 2]
    assert result.path_cost == pytest.approx(2.0)


def test_path_endpoints_and_cost_consistent(triangle_graph):
    problem = ShortestPathProblem(triangle_graph, 0, 2)
    result = MyAStar().search(problem, SearchHeuristic())
    assert result.node_path[0] == problem.init_node
    assert result.node_path[-1] == problem.goal_node
    assert result.path_cost == pytest.approx(_path_cost(triangle_graph, result.node_path))


def test_unreachable_goal_reports_failure():
    graph = Graph()
    graph.connect(0, 1, 1.0)
    graph.connect(2, 3, 1.0)
    result = MyAStar().search(ShortestPathProblem(graph, 0, 3), SearchHeuristic())
    assert result.success is False
    assert result.node_path == [0]
    assert result.path_cost == 0.0


def test_init_equals_goal():
    graph = Graph()
    graph.connect(4, 5, 2.0)
    result = MyAStar().search(ShortestPathProblem(graph, 4, 4), SearchHeuristic())
    assert result.success is True
    assert result.node_path == [4]
    assert result.path_cost == 0.0


def test_directed_edges_are_respected():
    graph = Graph()
    graph.connect(1, 0, 1.0)
    result = MyAStar().search(ShortestPathProblem(graph, 0, 1), SearchHeuristic())
    assert result.success is False


def test_admissible_lookup_heuristic_gives_same_cost(triangle_graph):
    problem = ShortestPathProblem(triangle_graph, 0, 2)
    plain = MyAStar().search(problem, SearchHeuristic())
    heuristic = LookupSearchHeuristic({0: 2.0, 1: 1.0, 2: 0.0})
    informed = MyAStar().search(problem, heuristic)
    assert informed.success is True
    assert informed.path_cost == pytest.approx(plain.path_cost)
    assert informed.node_path == plain.node_path


def test_grid_graph_cost_matches_path():
    graph = Graph()
    size = 4

    def node(r, c):
        return r * size + c

    for r in range(size):
        for c in range(size):
            if c + 1 < size:
                graph.connect(node(r, c), node(r, c + 1), 1.0)
                graph.connect(node(r, c + 1), node(r, c), 1.0)
            if r + 1 < size:
                graph.connect(node(r, c), node(r + 1, c), 1.0)
                graph.connect(node(r + 1, c), node(r, c), 1.0)
    result = MyAStar().search(ShortestPathProblem(graph, 0, size * size - 1), SearchHeuristic())
    assert result.success is True
    assert len(result.node_path) == 2 * (size - 1) + 1
    assert result.path_cost == pytest.approx(_path_cost(graph, result.node_path))
    assert len(set(result.node_path)) == len(result.node_path)