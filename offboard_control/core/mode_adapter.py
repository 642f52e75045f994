"""
Turns a target point into the setpoint the active control mode expects.

Velocity mode is a unit-gain proportional law (v = target - position) with
no limiting, so the vehicle overshoots on tight curves, most visibly on the
ellipse. That is the expected behaviour of this test, not something to tune
away here.
"""

from typing import NamedTuple, Union

from .types import ControlMode, Point3


class UnsupportedModeError(RuntimeError):
    def __init__(self, mode: ControlMode):
        super().__init__(f"Control mode: {mode.value} control mode not supported in PX4 current Firmware.")
        self.mode = mode


class PositionSetpoint(NamedTuple):
    point: Point3


class VelocitySetpoint(NamedTuple):
    vector: Point3


SetpointCommand = Union[PositionSetpoint, VelocitySetpoint]


def adapt(target: Point3, feedback: Point3, mode: ControlMode) -> SetpointCommand:
    if mode is ControlMode.POSITION:
        return PositionSetpoint(Point3(*target))
    if mode is ControlMode.VELOCITY:
        return VelocitySetpoint(Point3(*target) - Point3(*feedback))
    raise UnsupportedModeError(mode)
