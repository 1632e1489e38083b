"""Orbit camera for the 3D view.

The camera is the only mutable view state: pointer drags and wheel events
update it, and the render loop reads it on every frame.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...value_objects import PlannerType, Point3D
from ..geometry import clamp

__all__ = ["OrbitCamera"]

PHI_MIN = 0.1
PHI_MAX = math.pi / 2 - 0.1
DRAG_SENSITIVITY = 0.01
ZOOM_SENSITIVITY = 0.01


@dataclass
class OrbitCamera:
    """Spherical camera orbiting the room center (metres, Y-up)."""

    theta: float = math.pi / 4
    phi: float = math.pi / 5
    distance: float = 15.0
    min_distance: float = 6.0
    max_distance: float = 35.0

    @classmethod
    def for_planner(cls, planner_type: PlannerType) -> OrbitCamera:
        """Default framing: garages are viewed from further out."""
        if planner_type is PlannerType.KITCHEN:
            return cls(phi=math.pi / 6, distance=10.0, min_distance=3.0, max_distance=25.0)
        return cls()

    def drag(self, dx: float, dy: float) -> None:
        """Orbit by a pointer delta in pixels."""
        self.theta -= dx * DRAG_SENSITIVITY
        self.phi = clamp(self.phi - dy * DRAG_SENSITIVITY, PHI_MIN, PHI_MAX)

    def zoom(self, delta: float) -> None:
        """Dolly by a wheel delta."""
        self.distance = clamp(
            self.distance + delta * ZOOM_SENSITIVITY, self.min_distance, self.max_distance
        )

    def position(self) -> Point3D:
        return Point3D(
            self.distance * math.sin(self.phi) * math.cos(self.theta),
            self.distance * math.cos(self.phi),
            self.distance * math.sin(self.phi) * math.sin(self.theta),
        )
