import random

import pytest

from motionkit.core import (
    CircleAgentProperties,
    Graph,
    MultiAgentPath2D,
    MultiAgentProblem2D,
    Obstacle2D,
    Path2D,
)
from motionkit.multiagent import (
    RobotCollision,
    find_closest_node,
    find_closest_node_decentralized,
    new_connection_collision_check,
    point_collision_check_multi_agent,
    potential_point,
    robot_collisions,
    will_robots_collide,
    will_robots_collide_decentralized,
)


@pytest.fixture
def problem():
    square = Obstacle2D([(4, 4), (6, 4), (6, 6), (4, 6)])
    return MultiAgentProblem2D(
        x_min=0,
        x_max=10,
        y_min=0,
        y_max=10,
        obstacles=[square],
        agent_properties=[
            CircleAgentProperties(radius=0.5, q_init=(1, 1), q_goal=(9, 9)),
            CircleAgentProperties(radius=0.5, q_init=(9, 1), q_goal=(1, 9)),
        ],
    )


def _chain_graph(n):
    graph = Graph()
    for i in range(n - 1):
        graph.connect(i, i + 1, 1.0)
    return graph


def test_potential_point_always_goal(problem):
    assert potential_point(1.0, problem, 1, random.Random(3)) == problem.agent_properties[1].q_goal


def test_potential_point_samples_inside_bounds(problem):
    rng = random.Random(7)
    for _ in range(50):
        x, y = potential_point(0.0, problem, 0, rng)
        assert problem.x_min <= x <= problem.x_max
        assert problem.y_min <= y <= problem.y_max


def test_potential_point_is_reproducible(problem):
    first = [potential_point(0.3, problem, 0, random.Random(11)) for _ in range(3)]
    second = [potential_point(0.3, problem, 0, random.Random(11)) for _ in range(3)]
    assert first == second


def test_point_collision(problem):
    assert point_collision_check_multi_agent(5, 5, problem) is True
    assert point_collision_check_multi_agent(1, 1, problem) is False


def test_connection_collision(problem):
    assert new_connection_collision_check((3, 5), (7, 5), problem) is True
    assert new_connection_collision_check((1, 1), (3, 1), problem) is False


def test_will_robots_collide(problem):
    assert will_robots_collide([(1, 1), (1.5, 1)], problem) is True
    assert will_robots_collide([(1, 1), (8, 8)], problem) is False


def test_find_closest_node_prefers_nearest(problem):
    graph = _chain_graph(3)
    coords = {0: [(1, 1), (9, 1)], 1: [(2, 2), (8, 2)], 2: [(5, 8), (5, 2)]}
    node = find_closest_node([(2, 2.5), (8, 2.5)], graph, coords, problem, [False, False])
    assert node == 1


def test_find_closest_node_skips_zero_distance(problem):
    graph = _chain_graph(2)
    coords = {0: [(1, 1), (9, 1)], 1: [(3, 3), (7, 3)]}
    node = find_closest_node([(1, 1), (9, 1)], graph, coords, problem, [False, False])
    assert node == 1


def test_find_closest_node_keeps_robots_at_goal(problem):
    graph = _chain_graph(2)
    coords = {0: [(2, 2), (8, 2)], 1: [(9, 9), (6, 2)]}
    node = find_closest_node([(2, 2.1), (8, 2.1)], graph, coords, problem, [True, False])
    assert node == 1


def test_find_closest_node_none_when_no_candidate(problem):
    graph = _chain_graph(1)
    assert find_closest_node([(1, 1), (9, 1)], graph, {}, problem, [False, False]) is None


def test_find_closest_node_decentralized():
    graph = _chain_graph(3)
    coords = {0: (0, 0), 1: (5, 5), 2: (10, 0)}
    assert find_closest_node_decentralized((9, 1), graph, coords) == 2
    assert find_closest_node_decentralized((0.1, 0.1), graph, coords) == 0


def test_decentralized_collision_uses_earlier_agents_only():
    path = MultiAgentPath2D(
        [Path2D([(0, 0), (1, 0), (2, 0)]), Path2D([(5, 5)])]
    )
    assert will_robots_collide_decentralized((1, 0.2), path, 1, 1, 0.5) is True
    assert will_robots_collide_decentralized((1, 0.2), path, 0, 1, 0.5) is False


def test_decentralized_collision_holds_last_waypoint():
    path = MultiAgentPath2D([Path2D([(0, 0), (2, 0)])])
    assert will_robots_collide_decentralized((2, 0.5), path, 1, 10, 0.5) is True
    assert will_robots_collide_decentralized((0, 0.5), path, 1, 10, 0.5) is False


def test_robot_collisions_reports_both_orders():
    path = MultiAgentPath2D([Path2D([(0, 0), (0, 0)]), Path2D([(5, 0), (0.5, 0)])])
    found = robot_collisions(path)
    assert {(c.agent_a, c.agent_b, c.timestep) for c in found} == {(0, 1, 1), (1, 0, 1)}
    assert all(isinstance(c, RobotCollision) and c.distance < 1.01 for c in found)


def test_robot_collisions_empty_when_apart():
    path = MultiAgentPath2D([Path2D([(0, 0)]), Path2D([(3, 0)])])
    assert robot_collisions(path) == []