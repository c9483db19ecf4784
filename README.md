# motionkit

A small toolkit for planar motion planning. It is plain Python and has no third-party
dependencies.

## Modules

- **`motionkit.core`** holds the data model. `Obstacle2D` is a counter-clockwise polygon
  with `bounding_box()` and `edges()`. The module also has `Environment2D`, `Problem2D`,
  and `MultiAgentProblem2D`, which uses `CircleAgentProperties`. There are `Path2D`
  (with `length()`) and `MultiAgentPath2D`. `Graph` is a directed, weighted graph with
  `connect`, `nodes`, `children` and `outgoing_edges`. The rest are
  `ShortestPathProblem`, `SearchHeuristic` (the zero heuristic) and `GraphSearchResult`.
  `LinkManipulator2D` gives forward kinematics through `joint_location` and two-link
  inverse kinematics through `configuration_from_ik`. `GridCSpace2D` is a boolean grid
  indexed by `(i, j)` cells, and `cell_from_point` maps a configuration to its cell.
- **`motionkit.planners`** defines abstract interfaces: `PointMotionPlanner2D`,
  `LinkManipulatorMotionPlanner2D`, `MultiAgentCircleMotionPlanner2D`, `AStar`,
  `BugAlgorithm`, `GDAlgorithm` and `GridCSpace2DConstructor`.
- **`motionkit.wavefront`** is the wavefront framework. You implement `plan_in_cspace`
  (and, for `PointWaveFrontAlgorithm`, `construct_discretized_workspace`). Each `plan`
  builds the grid and calls your method. `ManipulatorWaveFrontAlgorithm` runs inverse
  kinematics on the start and goal first, then passes the joint states to your method.
  `LookupSearchHeuristic` returns values from a dictionary.
- **`motionkit.geometry`** has the collision primitives: `orientation`,
  `point_in_obstacles`, `segment_hits_obstacles`, `point_collision_check`,
  `connection_collision_check`, `distance_between_nodes`, `square_agent_corners` and
  `new_closer_point`.
- **`motionkit.manipulator`** provides `MyLinkManipulator2D`, with its own forward and
  closed-form two-link inverse kinematics. It also provides `LinkGridCSpace2D`, whose
  `collision_check(x0, x1)` tests joint angles given in degrees against an environment.
- **`motionkit.astar`** provides `MyAStar`, an A* search. If it fails, it returns an
  unsuccessful result whose path holds only the initial node and whose cost is zero.
- **`motionkit.multiagent`** has helpers for sampling-based multi-agent planning of disc
  robots:
  - `potential_point` gives a goal-biased sample.
  - `find_closest_node` and `find_closest_node_decentralized` pick the nearest tree node.
  - `will_robots_collide` and `will_robots_collide_decentralized` check robots against
    each other.
  - `robot_collisions` lists every pair of robots closer than 1.01 at a shared time step.

## Installation

```
pip install .
```

## Example: A* on a small graph

```python
from motionkit.core import Graph, SearchHeuristic, ShortestPathProblem
from motionkit.astar import MyAStar

graph = Graph()
graph.connect(0, 1, 1.0)
graph.connect(1, 2, 2.0)
graph.connect(0, 2, 5.0)

problem = ShortestPathProblem(graph=graph, init_node=0, goal_node=2)
result = MyAStar().search(problem, SearchHeuristic())
print(result.success, result.node_path, result.path_cost)  # True [0, 1, 2] 3.0
```

## Example: collision checks

```python
from motionkit.core import Obstacle2D, Problem2D
from motionkit.geometry import connection_collision_check, point_collision_check

square = Obstacle2D([(1.0, 1.0), (2.0, 1.0), (2.0, 2.0), (1.0, 2.0)])
problem = Problem2D(obstacles=[square], q_init=(0.0, 0.0), q_goal=(3.0, 3.0))

point_collision_check(1.5, 1.5, problem)                     # True
connection_collision_check((0.0, 1.5), (3.0, 1.5), problem)  # True
```

## What it does not do

motionkit is a library of building blocks. Several things are not included:

- There is no command-line program.
- There is no plotting or visualisation.
- There is no random problem generator.
- There is no checker that validates a planned path.
- There are no finished bug, gradient-descent, wavefront, PRM or RRT planners. The
  classes in `motionkit.planners` and `motionkit.wavefront` are interfaces for you to
  implement.

## Running the tests

```
pip install .[test]
pytest
```