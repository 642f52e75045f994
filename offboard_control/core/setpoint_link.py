from typing import Tuple

from mavsdk import System
from mavsdk.offboard import PositionNedYaw, VelocityNedYaw

from .mode_adapter import PositionSetpoint, SetpointCommand, VelocitySetpoint
from .types import Point3


def enu_to_ned(p: Point3) -> Tuple[float, float, float]:
    # (east, north, up) -> (north, east, down)
    return p[1], p[0], -p[2]


def ned_to_enu(north: float, east: float, down: float) -> Point3:
    return Point3(east, north, -down)


class MavsdkSetpointLink:
    """Outbound setpoint channel. Fire-and-forget, no retries."""

    def __init__(self, drone: System, yaw_deg: float = 0.0):
        self.drone = drone
        self.yaw_deg = yaw_deg

    async def publish(self, command: SetpointCommand) -> None:
        if isinstance(command, PositionSetpoint):
            n, e, d = enu_to_ned(command.point)
            await self.drone.offboard.set_position_ned(PositionNedYaw(n, e, d, self.yaw_deg))
        elif isinstance(command, VelocitySetpoint):
            n, e, d = enu_to_ned(command.vector)
            await self.drone.offboard.set_velocity_ned(VelocityNedYaw(n, e, d, self.yaw_deg))
        else:
            raise TypeError(f"unknown setpoint command: {command!r}")
