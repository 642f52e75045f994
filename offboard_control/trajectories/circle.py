"""
Circular path generator.

Pure mathematical reference path, parametrised by integer degrees.
No PX4 / MAVSDK code here.
"""

import math

from ..core.types import Point3


class CircleTrajectory:
    def __init__(self, radius: float = 5.0, altitude: float = 1.0):
        self.R = radius
        self.alt = altitude

    def position_xyz(self, angle_deg: int) -> Point3:
        """
        x(θ) = R * cos θ
        y(θ) = R * sin θ
        z    = altitude
        """
        th = math.radians(angle_deg)
        return Point3(self.R * math.cos(th), self.R * math.sin(th), self.alt)

    def start_point(self) -> Point3:
        return Point3(self.R, 0.0, self.alt)

    def angles(self) -> range:
        """One full lap, 0..360 inclusive, one-degree steps."""
        return range(0, 361)
