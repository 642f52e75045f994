"""
Shape dispatch: (PathShape, progression) -> target point.

The progression value is a waypoint index for the square and an integer
angle in degrees for the sweep shapes.
"""

from typing import Union

from ..core.types import PathShape, Point3
from .circle import CircleTrajectory
from .eight import EightTrajectory
from .ellipse import EllipseTrajectory
from .square import SquareTrajectory

SweepTrajectory = Union[CircleTrajectory, EightTrajectory, EllipseTrajectory]

_SQUARE = SquareTrajectory()
_CIRCLE = CircleTrajectory()
_EIGHT = EightTrajectory()
_ELLIPSE = EllipseTrajectory()

_TRAJECTORIES = {
    PathShape.SQUARE: _SQUARE,
    PathShape.CIRCLE: _CIRCLE,
    PathShape.EIGHT: _EIGHT,
    PathShape.ELLIPSE: _ELLIPSE,
}


def trajectory_for(shape: PathShape):
    return _TRAJECTORIES[shape]


def square_waypoint(index: int) -> Point3:
    return _SQUARE.waypoint(index)


def circle_shape(angle_deg: int) -> Point3:
    return _CIRCLE.position_xyz(angle_deg)


def eight_shape(angle_deg: int) -> Point3:
    return _EIGHT.position_xyz(angle_deg)


def ellipse_shape(angle_deg: int) -> Point3:
    return _ELLIPSE.position_xyz(angle_deg)


def target_for(shape: PathShape, progression: int) -> Point3:
    if shape is PathShape.SQUARE:
        return square_waypoint(progression)
    return _TRAJECTORIES[shape].position_xyz(progression)
