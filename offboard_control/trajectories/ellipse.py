"""
Vertical ellipse path generator.

The ellipse lies in the x-z plane (rotated about the y axis), so the
vehicle climbs and descends while sweeping east-west.
"""

import math

from ..core.types import Point3


class EllipseTrajectory:
    def __init__(self, a: float = 5.0, b: float = 2.0, c: float = 2.5):
        """
        Parameters:
            a : major semi-axis (horizontal, x)
            b : minor semi-axis (vertical, z)
            c : altitude of the ellipse centre
        """
        self.a = a
        self.b = b
        self.c = c

    def position_xyz(self, angle_deg: int) -> Point3:
        """
        x(θ) = a * cos θ
        y    = 0
        z(θ) = c + b * sin θ
        """
        th = math.radians(angle_deg)
        return Point3(self.a * math.cos(th), 0.0, self.c + self.b * math.sin(th))

    def start_point(self) -> Point3:
        return Point3(0.0, 0.0, self.c)

    def angles(self) -> range:
        return range(0, 361)
