"""Planar motion planning toolkit: data model, planner interfaces, wavefront framework,
collision geometry, link manipulators, A* search and multi-agent helpers."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "planners",
    "wavefront",
    "geometry",
    "manipulator",
    "astar",
    "multiagent",
]