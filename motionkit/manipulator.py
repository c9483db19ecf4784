"""Two-link manipulator kinematics and a grid C-space with link collision checking."""

from __future__ import annotations

import math
from typing import Sequence

from motionkit.core import Environment2D, GridCSpace2D, LinkManipulator2D, ManipulatorState, Point
from motionkit.geometry import _in_bounds, _loose_bounds, _point_in_polygon, _segments_cross


class MyLinkManipulator2D(LinkManipulator2D):
    """Link manipulator with its own forward and closed-form inverse kinematics."""

    def joint_location(self, state: Sequence[float], joint_index: int) -> Point:
        """Location of joint joint_index; 0 is the base."""
        if joint_index < 0 or joint_index > self.n_links():
            raise IndexError("joint index out of range")
        if len(state) < joint_index:
            raise ValueError("state has fewer angles than the joint index needs")
        x, y = self.base_location
        angle_sum = 0.0
        for length, angle in zip(self.link_lengths[:joint_index], state):
            angle_sum += float(angle)
            x += length * math.cos(angle_sum)
            y += length * math.sin(angle_sum)
        return (x, y)

    def configuration_from_ik(self, end_effector_location: Sequence[float]) -> ManipulatorState:
        """Joint angles (t1, t2) placing the end effector at the location."""
        if self.n_links() < 2:
            raise ValueError("inverse kinematics needs at least two links")
        l1, l2 = self.link_lengths[0], self.link_lengths[1]
        px, py = float(end_effector_location[0]), float(end_effector_location[1])
        r2 = px * px + py * py
        cos_t2 = (r2 - (l1 * l1 + l2 * l2)) / (2.0 * l1 * l2)
        if not -1.0 <= cos_t2 <= 1.0 or r2 == 0.0:
            raise ValueError("end effector location is out of reach")
        t2 = math.acos(cos_t2)
        sin_arg = (py * (l1 + l2 * math.cos(t2)) - px * l2 * math.sqrt(1 - math.cos(t2) ** 2)) / r2
        if not -1.0 <= sin_arg <= 1.0:
            raise ValueError("end effector location is out of reach")
        t1 = math.asin(sin_arg)
        if t1 == 0 and self.base_location[0] > px:
            t1 = math.pi
        return (t1, t2)


class LinkGridCSpace2D(GridCSpace2D):
    """Grid C-space over two joint angles in degrees for a manipulator among obstacles."""

    def __init__(
        self,
        x0_cells: int,
        x1_cells: int,
        x0_min: float,
        x0_max: float,
        x1_min: float,
        x1_max: float,
        environment: Environment2D,
        link_lengths: Sequence[float],
    ) -> None:
        super().__init__(x0_cells, x1_cells, x0_min, x0_max, x1_min, x1_max)
        self.environment = environment
        self.link_lengths = [float(length) for length in link_lengths]

    def collision_check(self, x0: float, x1: float) -> bool:
        """True if the manipulator at joint angles (x0, x1), in degrees, touches an obstacle."""
        manipulator = MyLinkManipulator2D(self.link_lengths)
        state = (math.radians(x0), math.radians(x1))
        base = manipulator.joint_location(state, 0)
        elbow = manipulator.joint_location(state, 1)
        end = manipulator.joint_location(state, 2)
        min_x_links = min(base[0], elbow[0], end[0])
        min_y_links = min(base[1], elbow[1], end[1])

        for obstacle in self.environment.obstacles:
            bounds = _loose_bounds(obstacle)
            _, max_x, _, max_y = bounds
            if min_x_links < max_x and min_y_links < max_y:
                for v, nv in obstacle.edges():
                    if _segments_cross(base, elbow, v, nv) or _segments_cross(elbow, end, v, nv):
                        return True
            if _in_bounds(end[0], end[1], bounds):
                return _point_in_polygon(end[0], end[1], obstacle)
        return False