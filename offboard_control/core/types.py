"""
Shared vocabulary for offboard path tests.

Coordinates are metres in the local ENU frame (x east, y north, z up),
the frame every path constant is written in. Conversion to PX4's NED
frame happens only at the MAVSDK boundary.
"""

from enum import Enum
from typing import NamedTuple


class Point3(NamedTuple):
    x: float
    y: float
    z: float

    def __sub__(self, other: "Point3") -> "Point3":
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)


ORIGIN = Point3(0.0, 0.0, 0.0)


class ControlMode(Enum):
    POSITION = "position"
    VELOCITY = "velocity"
    ACCELERATION = "acceleration"

    @property
    def supported(self) -> bool:
        # PX4 offboard acceleration setpoints are not wired up
        return self is not ControlMode.ACCELERATION


class PathShape(Enum):
    SQUARE = "square"
    CIRCLE = "circle"
    EIGHT = "eight"
    ELLIPSE = "ellipse"


class GateResult(Enum):
    CONVERGED = "converged"
    STOPPED = "stopped"
    TIMED_OUT = "timed_out"


class RunOutcome(Enum):
    COMPLETE = "complete"
    UNSUPPORTED_MODE = "unsupported_mode"
    STOPPED = "stopped"
    TIMED_OUT = "timed_out"
