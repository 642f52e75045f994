"""
Square waypoint path.

Pure mathematical reference path for offboard position tests.
No PX4 / MAVSDK code here.
"""

from ..core.types import Point3


class SquareTrajectory:
    # Waypoints 1..5 are flown; reaching index 6 ends the test.
    FIRST_INDEX = 1
    TERMINAL_INDEX = 6

    def __init__(self, half_side: float = 2.0, altitude: float = 1.0):
        self.h = half_side
        self.alt = altitude

    def corner(self) -> Point3:
        return Point3(self.h, self.h, self.alt)

    def waypoint(self, index: int) -> Point3:
        """
        Corner for waypoint `index` in [1, 5].

        Consecutive waypoints are adjacent corners; waypoint 5 closes the
        loop on waypoint 1.
        """
        c = self.corner()
        if index in (1, 5):
            return c
        if index == 2:
            return Point3(-c.x, c.y, c.z)
        if index == 3:
            return Point3(-c.x, -c.y, c.z)
        if index == 4:
            return Point3(c.x, -c.y, c.z)
        raise IndexError(f"square waypoint index out of range: {index}")

    def indices(self) -> range:
        return range(self.FIRST_INDEX, self.TERMINAL_INDEX)
