"""Helpers for sampling-based multi-agent planning of disc robots."""

from __future__ import annotations

import math
import random
from typing import Mapping, NamedTuple, Sequence

from motionkit.core import Graph, MultiAgentPath2D, MultiAgentProblem2D, Point
from motionkit.geometry import distance_between_nodes, point_in_obstacles, segment_hits_obstacles


class RobotCollision(NamedTuple):
    """Two agents closer than the safety distance at one time step."""

    agent_a: int
    agent_b: int
    distance: float
    timestep: int


def potential_point(
    p_goal: float, problem: MultiAgentProblem2D, robot: int, rng: random.Random | None = None
) -> Point:
    """Sample a point: the robot's goal with probability p_goal, else uniform in the workspace."""
    rng = rng or random.Random()
    if rng.uniform(0.0, 1.0) < p_goal:
        return problem.agent_properties[robot].q_goal
    return (rng.uniform(problem.x_min, problem.x_max), rng.uniform(problem.y_min, problem.y_max))


def point_collision_check_multi_agent(x: float, y: float, problem: MultiAgentProblem2D) -> bool:
    """True if the point (x, y) collides with the problem's obstacles."""
    return point_in_obstacles(x, y, problem.obstacles)


def new_connection_collision_check(
    p1: Sequence[float], p2: Sequence[float], problem: MultiAgentProblem2D
) -> bool:
    """True if the connection p1-p2 crosses the problem's obstacles."""
    return segment_hits_obstacles(p1, p2, problem.obstacles)


def find_closest_node(
    next_positions: Sequence[Sequence[float]],
    graph: Graph,
    node_to_coord: Mapping[int, Sequence[Sequence[float]]],
    problem: MultiAgentProblem2D,
    robot_at_goal: Sequence[bool],
) -> int | None:
    """Node whose joint configuration is closest (summed distance) to next_positions.

    Nodes at zero distance are skipped, as are nodes that move a robot already
    at its goal away from it. Returns None when no node qualifies.
    """
    smallest = math.inf
    closest: int | None = None
    for node in range(len(graph.nodes())):
        coords = node_to_coord.get(node, ())
        distance = 0.0
        goals_kept = True
        for j, coord in enumerate(coords):
            distance += distance_between_nodes(coord, next_positions[j])
            if robot_at_goal[j]:
                gx, gy = problem.agent_properties[j].q_goal
                if coord[0] != gx or coord[1] != gy:
                    goals_kept = False
        if distance < smallest and distance != 0 and goals_kept:
            smallest = distance
            closest = node
    return closest


def will_robots_collide(
    next_positions: Sequence[Sequence[float]], problem: MultiAgentProblem2D
) -> bool:
    """True if any two agents are closer than their radii plus a 0.1 margin."""
    agents = problem.agent_properties
    for i, pos_i in enumerate(next_positions):
        for j, pos_j in enumerate(next_positions):
            if i != j:
                limit = agents[i].radius + agents[j].radius + 0.1
                if distance_between_nodes(pos_i, pos_j) < limit:
                    return True
    return False


def find_closest_node_decentralized(
    next_position: Sequence[float],
    graph: Graph,
    node_to_coord: Mapping[int, Sequence[float]],
) -> int | None:
    """Node whose coordinate is nearest next_position, or None if there is none."""
    smallest = math.inf
    closest: int | None = None
    for node in range(len(graph.nodes())):
        coord = node_to_coord.get(node)
        if coord is None:
            continue
        distance = distance_between_nodes(coord, next_position)
        if distance < smallest:
            smallest = distance
            closest = node
    return closest


def will_robots_collide_decentralized(
    next_position: Sequence[float],
    path: MultiAgentPath2D,
    current_agent: int,
    time_step: int,
    r: float,
) -> bool:
    """True if next_position comes within 2r + 0.25 of an earlier agent at time_step.

    Agents whose paths have ended are taken to rest at their final waypoint.
    """
    for agent_path in path.agent_paths[:current_agent]:
        waypoints = agent_path.waypoints
        if not waypoints:
            continue
        other = waypoints[min(time_step, len(waypoints) - 1)]
        if distance_between_nodes(next_position, other) < 2 * r + 0.25:
            return True
    return False


def robot_collisions(path: MultiAgentPath2D) -> list[RobotCollision]:
    """Every ordered agent pair closer than 1.01 at a shared time step."""
    if not path.agent_paths:
        return []
    found: list[RobotCollision] = []
    n_agents = path.num_agents()
    for step in range(len(path.agent_paths[0].waypoints)):
        for j in range(n_agents):
            for k in range(n_agents):
                if j == k:
                    continue
                distance = distance_between_nodes(
                    path.agent_paths[j].waypoints[step], path.agent_paths[k].waypoints[step]
                )
                if distance < 1.01:
                    found.append(RobotCollision(j, k, distance, step))
    return found