"""A* graph search over a weighted directed graph."""

from __future__ import annotations

import math

from motionkit.core import GraphSearchResult, SearchHeuristic, ShortestPathProblem
from motionkit.planners import AStar


class MyAStar(AStar):
    """A* search that expands the open node with the lowest f-score, first-come on ties."""

    def search(self, problem: ShortestPathProblem, heuristic: SearchHeuristic) -> GraphSearchResult:
        """Find a cheapest path from init_node to goal_node.

        On failure the result is unsuccessful, with the initial node as its
        only path entry and a cost of zero.
        """
        graph = problem.graph
        init, goal = problem.init_node, problem.goal_node

        g_score: dict[int, float] = {init: 0.0}
        f_score: dict[int, float] = {init: heuristic(init)}
        came_from: dict[int, int] = {}
        open_set: list[int] = [init]

        while open_set:
            current = min(open_set, key=lambda node: f_score.get(node, math.inf))
            if current == goal:
                path = [goal]
                node = goal
                while node != init:
                    node = came_from[node]
                    path.append(node)
                path.reverse()
                return GraphSearchResult(success=True, node_path=path, path_cost=g_score[goal])

            open_set.remove(current)
            for child, weight in zip(graph.children(current), graph.outgoing_edges(current)):
                tentative = g_score[current] + weight
                if tentative < g_score.get(child, math.inf):
                    came_from[child] = current
                    g_score[child] = tentative
                    f_score[child] = tentative + heuristic(child)
                    if child not in open_set:
                        open_set.append(child)

        return GraphSearchResult(success=False, node_path=[init], path_cost=0.0)