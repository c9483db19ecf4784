"""WaveFront planner interfaces for point agents and two-link manipulators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

from motionkit.core import (
    Environment2D,
    GridCSpace2D,
    LinkManipulator2D,
    ManipulatorState,
    Path2D,
    Problem2D,
    SearchHeuristic,
)
from motionkit.planners import (
    GridCSpace2DConstructor,
    LinkManipulatorMotionPlanner2D,
    PointMotionPlanner2D,
)


class WaveFrontAlgorithm(ABC):
    """Plans through a grid C-space with the WaveFront algorithm."""

    @abstractmethod
    def plan_in_cspace(
        self,
        q_init: Sequence[float],
        q_goal: Sequence[float],
        grid_cspace: GridCSpace2D,
    ) -> Path2D:
        """Return a collision-free path of cell representative points from q_init to q_goal."""


class PointWaveFrontAlgorithm(WaveFrontAlgorithm, PointMotionPlanner2D):
    """WaveFront planner for a point agent."""

    @abstractmethod
    def construct_discretized_workspace(self, environment: Environment2D) -> GridCSpace2D:
        """Discretise the environment into a grid whose colliding cells are True."""

    def plan(self, problem: Problem2D) -> Path2D:
        """Discretise the workspace and plan through it."""
        grid_cspace = self.construct_discretized_workspace(problem)
        return self.plan_in_cspace(problem.q_init, problem.q_goal, grid_cspace)


class ManipulatorWaveFrontAlgorithm(WaveFrontAlgorithm, LinkManipulatorMotionPlanner2D):
    """WaveFront planner for a two-link manipulator."""

    def __init__(self, cspace_constructor: GridCSpace2DConstructor) -> None:
        self.cspace_constructor = cspace_constructor

    def plan(self, manipulator: LinkManipulator2D, problem: Problem2D) -> list[ManipulatorState]:
        """Solve IK for start and goal, build the C-space and plan through it."""
        if manipulator.n_links() != 2:
            raise ValueError("manipulator must have two links")
        init_state = manipulator.configuration_from_ik(problem.q_init)
        goal_state = manipulator.configuration_from_ik(problem.q_goal)
        grid_cspace = self.cspace_constructor.construct(manipulator, problem)
        path = self.plan_in_cspace(init_state, goal_state, grid_cspace)
        return [tuple(waypoint) for waypoint in path.waypoints]


@dataclass
class LookupSearchHeuristic(SearchHeuristic):
    """Heuristic whose values are looked up per node; unknown nodes raise KeyError."""

    heuristic_values: dict[int, float] = field(default_factory=dict)

    def __call__(self, node: int) -> float:
        return self.heuristic_values[node]