"""Core data types for planar motion planning: obstacles, problems, paths, graphs,
link manipulators and grid configuration spaces."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Iterator, Sequence

Point = tuple[float, float]
ManipulatorState = tuple[float, ...]


def _point(p: Sequence[float]) -> Point:
    return (float(p[0]), float(p[1]))


@dataclass
class Obstacle2D:
    """Polygonal obstacle with vertices listed counter-clockwise."""

    vertices: list[Point]

    def __post_init__(self) -> None:
        self.vertices = [_point(v) for v in self.vertices]
        if len(self.vertices) < 3:
            raise ValueError("an obstacle needs at least three vertices")

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (min_x, max_x, min_y, max_y) of the polygon."""
        xs = [x for x, _ in self.vertices]
        ys = [y for _, y in self.vertices]
        return min(xs), max(xs), min(ys), max(ys)

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Yield each edge as a pair of vertices, closing the polygon."""
        return zip(self.vertices, self.vertices[1:] + self.vertices[:1])


@dataclass
class Environment2D:
    """Rectangular workspace with polygonal obstacles."""

    x_min: float = 0.0
    x_max: float = 0.0
    y_min: float = 0.0
    y_max: float = 0.0
    obstacles: list[Obstacle2D] = field(default_factory=list)


@dataclass
class Problem2D(Environment2D):
    """Single point-agent planning problem."""

    q_init: Point = (0.0, 0.0)
    q_goal: Point = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.q_init = _point(self.q_init)
        self.q_goal = _point(self.q_goal)


@dataclass
class CircleAgentProperties:
    """A disc-shaped agent with its start and goal."""

    radius: float = 0.5
    q_init: Point = (0.0, 0.0)
    q_goal: Point = (0.0, 0.0)

    def __post_init__(self) -> None:
        if self.radius < 0:
            raise ValueError("agent radius must not be negative")
        self.q_init = _point(self.q_init)
        self.q_goal = _point(self.q_goal)


@dataclass
class MultiAgentProblem2D(Environment2D):
    """Planning problem for several disc agents sharing one environment."""

    agent_properties: list[CircleAgentProperties] = field(default_factory=list)

    def num_agents(self) -> int:
        return len(self.agent_properties)


@dataclass
class Path2D:
    """Sequence of waypoints."""

    waypoints: list[Point] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.waypoints = [_point(p) for p in self.waypoints]

    def length(self) -> float:
        """Total Euclidean length along the waypoints."""
        return sum(math.dist(a, b) for a, b in zip(self.waypoints, self.waypoints[1:]))


@dataclass
class MultiAgentPath2D:
    """One path per agent, in the order of the problem's agents."""

    agent_paths: list[Path2D] = field(default_factory=list)

    def num_agents(self) -> int:
        return len(self.agent_paths)


class Graph:
    """Directed graph with weighted edges between integer nodes."""

    def __init__(self) -> None:
        self._edges: dict[int, list[tuple[int, float]]] = {}

    def connect(self, source: int, target: int, weight: float) -> None:
        """Add an edge from source to target."""
        self._edges.setdefault(source, []).append((target, float(weight)))
        self._edges.setdefault(target, [])

    def nodes(self) -> list[int]:
        """All nodes, in ascending order."""
        return sorted(self._edges)

    def children(self, node: int) -> list[int]:
        """Targets of the node's outgoing edges, in insertion order."""
        return [target for target, _ in self._edges.get(node, [])]

    def outgoing_edges(self, node: int) -> list[float]:
        """Weights of the node's outgoing edges, aligned with children()."""
        return [weight for _, weight in self._edges.get(node, [])]


@dataclass
class ShortestPathProblem:
    """Graph search problem from an initial node to a goal node."""

    graph: Graph
    init_node: int
    goal_node: int


class SearchHeuristic:
    """Zero heuristic; subclasses supply informed estimates."""

    def __call__(self, node: int) -> float:
        return 0.0


@dataclass
class GraphSearchResult:
    """Outcome of a graph search."""

    success: bool = False
    node_path: list[int] = field(default_factory=list)
    path_cost: float = 0.0


class LinkManipulator2D:
    """Planar serial manipulator with revolute joints."""

    def __init__(
        self,
        link_lengths: Sequence[float] = (1.0, 1.0),
        base_location: Sequence[float] = (0.0, 0.0),
    ) -> None:
        lengths = [float(length) for length in link_lengths]
        if not lengths:
            raise ValueError("a manipulator needs at least one link")
        if any(length <= 0 for length in lengths):
            raise ValueError("link lengths must be positive")
        self.link_lengths = lengths
        self.base_location = _point(base_location)

    def n_links(self) -> int:
        return len(self.link_lengths)

    def joint_location(self, state: Sequence[float], joint_index: int) -> Point:
        """Forward kinematics: location of a joint; index n_links() is the end effector."""
        if len(state) != self.n_links():
            raise ValueError("state length must match the number of links")
        if not 0 <= joint_index <= self.n_links():
            raise IndexError("joint index out of range")
        x, y = self.base_location
        angles = accumulate(float(a) for a in state[:joint_index])
        for length, angle in zip(self.link_lengths, angles):
            x += length * math.cos(angle)
            y += length * math.sin(angle)
        return (x, y)

    def configuration_from_ik(self, end_effector_location: Sequence[float]) -> ManipulatorState:
        """Inverse kinematics for a two-link manipulator."""
        if self.n_links() != 2:
            raise ValueError("inverse kinematics is defined for two-link manipulators")
        l1, l2 = self.link_lengths
        dx = float(end_effector_location[0]) - self.base_location[0]
        dy = float(end_effector_location[1]) - self.base_location[1]
        cos_t2 = (dx * dx + dy * dy - l1 * l1 - l2 * l2) / (2.0 * l1 * l2)
        if not -1.0 - 1e-9 <= cos_t2 <= 1.0 + 1e-9:
            raise ValueError("end effector location is out of reach")
        cos_t2 = max(-1.0, min(1.0, cos_t2))
        t2 = math.acos(cos_t2)
        t1 = math.atan2(dy, dx) - math.atan2(l2 * math.sin(t2), l1 + l2 * cos_t2)
        return (t1, t2)


class GridCSpace2D:
    """Two-dimensional configuration space discretised into boolean collision cells."""

    def __init__(
        self,
        x0_cells: int,
        x1_cells: int,
        x0_min: float,
        x0_max: float,
        x1_min: float,
        x1_max: float,
    ) -> None:
        if x0_cells < 1 or x1_cells < 1:
            raise ValueError("a grid needs at least one cell per dimension")
        if x0_max <= x0_min or x1_max <= x1_min:
            raise ValueError("grid bounds must have max greater than min")
        self.x0_bounds = (float(x0_min), float(x0_max))
        self.x1_bounds = (float(x1_min), float(x1_max))
        self._shape = (x0_cells, x1_cells)
        self._cells = [[False] * x1_cells for _ in range(x0_cells)]

    def size(self) -> tuple[int, int]:
        """Number of cells along each dimension."""
        return self._shape

    @staticmethod
    def _index(value: float, bounds: tuple[float, float], cells: int) -> int:
        low, high = bounds
        if not low <= value <= high:
            raise ValueError(f"{value} lies outside [{low}, {high}]")
        return min(int((value - low) / (high - low) * cells), cells - 1)

    def cell_from_point(self, x0: float, x1: float) -> tuple[int, int]:
        """Cell that contains the configuration (x0, x1)."""
        return (
            self._index(x0, self.x0_bounds, self._shape[0]),
            self._index(x1, self.x1_bounds, self._shape[1]),
        )

    def _check(self, cell: tuple[int, int]) -> tuple[int, int]:
        i, j = cell
        if not (0 <= i < self._shape[0] and 0 <= j < self._shape[1]):
            raise IndexError(f"cell {cell} is outside the grid")
        return i, j

    def __getitem__(self, cell: tuple[int, int]) -> bool:
        i, j = self._check(cell)
        return self._cells[i][j]

    def __setitem__(self, cell: tuple[int, int], value: bool) -> None:
        i, j = self._check(cell)
        self._cells[i][j] = bool(value)