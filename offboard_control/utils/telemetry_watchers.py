from mavsdk import System

from ..core.setpoint_link import ned_to_enu
from .shared_state import SharedState


async def watch_position(drone: System, state: SharedState):
    """Feed NED telemetry into the shared ENU position cell until the run stops."""
    async for data in drone.telemetry.position_velocity_ned():
        pos = data.position
        state.feedback.update(ned_to_enu(pos.north_m, pos.east_m, pos.down_m))

        if not state.running:
            break
