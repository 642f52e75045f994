# tests/fixtures/__init__.py
"""
Test fixtures package for offboard path testing.

Provides stand-ins for the setpoint link and a simulated vehicle.
"""

from tests.fixtures.sim_vehicle import RecordingLink, SimulatedVehicle

__all__ = [
    'RecordingLink',
    'SimulatedVehicle',
]
