"""Abstract interfaces for motion planners, graph search and C-space construction."""

from __future__ import annotations

from abc import ABC, abstractmethod

from motionkit.core import (
    Environment2D,
    GraphSearchResult,
    GridCSpace2D,
    LinkManipulator2D,
    ManipulatorState,
    MultiAgentPath2D,
    MultiAgentProblem2D,
    Path2D,
    Problem2D,
    SearchHeuristic,
    ShortestPathProblem,
)


class PointMotionPlanner2D(ABC):
    """Planner for a point agent in a 2D workspace."""

    @abstractmethod
    def plan(self, problem: Problem2D) -> Path2D:
        """Return a path from problem.q_init to problem.q_goal."""


class LinkManipulatorMotionPlanner2D(ABC):
    """Planner for a link manipulator among workspace obstacles."""

    @abstractmethod
    def plan(self, manipulator: LinkManipulator2D, problem: Problem2D) -> list[ManipulatorState]:
        """Return a sequence of joint states moving the end effector from q_init to q_goal."""


class MultiAgentCircleMotionPlanner2D(ABC):
    """Planner for several disc-shaped agents."""

    @abstractmethod
    def plan(self, problem: MultiAgentProblem2D) -> MultiAgentPath2D:
        """Return one path per agent, ordered as problem.agent_properties."""


class AStar(ABC):
    """Informed shortest-path graph search."""

    @abstractmethod
    def search(self, problem: ShortestPathProblem, heuristic: SearchHeuristic) -> GraphSearchResult:
        """Search problem.graph from init_node to goal_node guided by heuristic."""


class BugAlgorithm(PointMotionPlanner2D):
    """Bug-family planner for a point agent."""


class GDAlgorithm(PointMotionPlanner2D):
    """Gradient-descent planner for a point agent."""


class GridCSpace2DConstructor(ABC):
    """Builds a grid C-space for a two-link manipulator in an environment."""

    @abstractmethod
    def construct(self, manipulator: LinkManipulator2D, env: Environment2D) -> GridCSpace2D:
        """Return a grid C-space with colliding cells set to True."""