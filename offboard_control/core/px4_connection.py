import asyncio
from typing import Optional

from mavsdk import System


class VehicleNotReadyError(RuntimeError):
    """The vehicle did not connect or become armable in time."""


async def _first_connected(drone: System) -> None:
    async for state in drone.core.connection_state():
        if state.is_connected:
            return


async def _first_armable(drone: System, sleep_s: float) -> None:
    async for health in drone.telemetry.health():
        # offboard setpoints are local-frame, so a local position fix is required too
        if health.is_armable and health.is_local_position_ok:
            return
        await asyncio.sleep(sleep_s)


async def connect_px4(system_address: str, timeout_s: Optional[float] = None) -> System:
    drone = System()
    await drone.connect(system_address=system_address)

    print(f"Waiting for drone to connect on {system_address}...")
    try:
        await asyncio.wait_for(_first_connected(drone), timeout_s)
    except asyncio.TimeoutError:
        raise VehicleNotReadyError(f"no heartbeat on {system_address} after {timeout_s:.0f}s") from None

    print("-- Connected!")
    return drone


async def wait_armable(drone: System, timeout_s: Optional[float] = None, sleep_s: float = 0.5) -> None:
    print("Waiting for drone to be armable (health + local position)...")
    try:
        await asyncio.wait_for(_first_armable(drone, sleep_s), timeout_s)
    except asyncio.TimeoutError:
        raise VehicleNotReadyError(f"vehicle not armable after {timeout_s:.0f}s") from None

    print("Drone health OK. Ready to arm!")


async def arm_and_takeoff(drone: System, altitude_m: float, settle_s: float = 5.0) -> None:
    await drone.action.set_takeoff_altitude(altitude_m)
    await drone.action.arm()
    print("✔ Armed")

    await drone.action.takeoff()
    print("▲ Taking off...")
    await asyncio.sleep(settle_s)
