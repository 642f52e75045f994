"""
Figure-8 (Gerono lemniscate) path generator.

This module provides a pure mathematical reference path
for offboard setpoint tests.

No PX4 / MAVSDK code here.
"""

import math

from ..core.types import Point3


class EightTrajectory:
    def __init__(self, a: float = 5.0, altitude: float = 1.0):
        # a: half-width of the lemniscate, where the vertical tangents sit
        self.a = a
        self.alt = altitude

    def position_xyz(self, angle_deg: int) -> Point3:
        """
        x = a * cos θ
        y = a * sin θ * cos θ
        """
        th = math.radians(angle_deg)
        return Point3(
            self.a * math.cos(th),
            self.a * math.sin(th) * math.cos(th),
            self.alt,
        )

    def start_point(self) -> Point3:
        # the crossing point, not position_xyz(-180)
        return Point3(0.0, 0.0, self.alt)

    def angles(self) -> range:
        return range(-180, 181)
