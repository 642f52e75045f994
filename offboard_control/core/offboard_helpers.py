import asyncio
from mavsdk import System
from mavsdk.offboard import OffboardError, PositionNedYaw, VelocityNedYaw

from .setpoint_link import enu_to_ned
from .types import ControlMode, Point3


async def prestream_setpoints(
    drone: System,
    mode: ControlMode,
    hold: Point3,
    yaw_deg: float = 0.0,
    n: int = 20,
    dt: float = 0.05,
):
    """PX4 requires setpoints to be streamed before starting offboard."""
    n_m, e_m, d_m = enu_to_ned(hold)
    for _ in range(n):
        if mode is ControlMode.VELOCITY:
            await drone.offboard.set_velocity_ned(VelocityNedYaw(0.0, 0.0, 0.0, yaw_deg))
        else:
            await drone.offboard.set_position_ned(PositionNedYaw(n_m, e_m, d_m, yaw_deg))
        await asyncio.sleep(dt)


async def start_offboard(drone: System, mode: ControlMode = ControlMode.POSITION) -> bool:
    """Switch to OFFBOARD. Call only after setpoints for `mode` have been pre-streamed."""
    try:
        await drone.offboard.start()
    except OffboardError as e:
        print(f"Failed to start offboard ({mode.value} setpoints): {e._result.result}")
        return False

    print(f"Offboard started with {mode.value} setpoints!")
    return True


async def stop_offboard_and_land(drone: System, sleep_s: float = 5.0):
    # landing is attempted whatever offboard.stop() does
    try:
        await drone.offboard.stop()
    except Exception as e:
        print(f"Failed to stop offboard: {e}")

    print("Landing...")
    await drone.action.land()
    await asyncio.sleep(sleep_s)
