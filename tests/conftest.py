# tests/conftest.py
"""
Root pytest configuration and fixtures for offboard path testing.

Provides shared state, link doubles and a zero-period gate factory so the
sequencing logic runs at full speed. All fixtures here are available to all
test modules.
"""

import os
import sys

import pytest

# Add repo root to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
os.environ.setdefault('MPLBACKEND', 'Agg')

from offboard_control.core.convergence_gate import ConvergenceGate
from offboard_control.core.types import ControlMode
from offboard_control.utils.shared_state import SharedState
from tests.fixtures.sim_vehicle import RecordingLink, SimulatedVehicle


# =============================================================================
# State Fixtures
# =============================================================================

@pytest.fixture
def state():
    """Fresh SharedState: running, feedback at the origin, no sample yet."""
    return SharedState()


# =============================================================================
# Link Fixtures
# =============================================================================

@pytest.fixture
def recording_link():
    return RecordingLink()


@pytest.fixture
def vehicle(state):
    """Vehicle that reaches every setpoint within one period."""
    return SimulatedVehicle(state)


@pytest.fixture
def make_gate(state):
    """
    Build a ConvergenceGate with a zero period.

    Usage:
        def test_something(make_gate, vehicle):
            gate = make_gate(vehicle, ControlMode.VELOCITY)
    """
    def _make(link, mode=ControlMode.POSITION, **kwargs):
        kwargs.setdefault('tolerance_m', 0.1)
        kwargs.setdefault('period_s', 0.0)
        return ConvergenceGate(link, state, mode, **kwargs)

    return _make
