# tests/unit/test_px4_connection.py
"""
Unit tests for vehicle connection and readiness waits.

mavsdk.System is patched with a MagicMock whose telemetry streams are
plain async generators.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from offboard_control.core.px4_connection import (
    VehicleNotReadyError,
    arm_and_takeoff,
    connect_px4,
    wait_armable,
)

MODULE = 'offboard_control.core.px4_connection'


def _stream(*items, repeat_last=False):
    async def gen():
        for item in items:
            await asyncio.sleep(0)
            yield item
        while repeat_last:
            await asyncio.sleep(0)
            yield items[-1]
    return gen


def _health(armable, local_ok=True):
    return SimpleNamespace(is_armable=armable, is_local_position_ok=local_ok)


@pytest.fixture
def mock_drone():
    drone = MagicMock()
    drone.connect = AsyncMock()
    drone.action = MagicMock()
    drone.action.set_takeoff_altitude = AsyncMock()
    drone.action.arm = AsyncMock()
    drone.action.takeoff = AsyncMock()
    return drone


# =============================================================================
# Connect
# =============================================================================

class TestConnect:

    @pytest.mark.asyncio
    async def test_returns_drone_once_connected(self, mock_drone):
        mock_drone.core.connection_state = _stream(
            SimpleNamespace(is_connected=False), SimpleNamespace(is_connected=True))

        with patch(f'{MODULE}.System', return_value=mock_drone):
            drone = await connect_px4('udp://:14540', timeout_s=1.0)

        assert drone is mock_drone
        mock_drone.connect.assert_awaited_once_with(system_address='udp://:14540')

    @pytest.mark.asyncio
    async def test_no_heartbeat_times_out(self, mock_drone):
        mock_drone.core.connection_state = _stream(SimpleNamespace(is_connected=False), repeat_last=True)

        with patch(f'{MODULE}.System', return_value=mock_drone):
            with pytest.raises(VehicleNotReadyError, match='no heartbeat'):
                await connect_px4('udp://:14540', timeout_s=0.05)


# =============================================================================
# Armable
# =============================================================================

class TestWaitArmable:

    @pytest.mark.asyncio
    async def test_waits_for_local_position(self, mock_drone):
        mock_drone.telemetry.health = _stream(
            _health(False, False), _health(True, False), _health(True, True))

        await wait_armable(mock_drone, timeout_s=1.0, sleep_s=0.0)

    @pytest.mark.asyncio
    async def test_never_armable_times_out(self, mock_drone):
        mock_drone.telemetry.health = _stream(_health(True, False), repeat_last=True)

        with pytest.raises(VehicleNotReadyError, match='not armable'):
            await wait_armable(mock_drone, timeout_s=0.05, sleep_s=0.0)


def test_arm_and_takeoff_order(mock_drone):
    order = []
    mock_drone.action.set_takeoff_altitude.side_effect = lambda alt: order.append(('alt', alt))
    mock_drone.action.arm.side_effect = lambda: order.append('arm')
    mock_drone.action.takeoff.side_effect = lambda: order.append('takeoff')

    asyncio.run(arm_and_takeoff(mock_drone, 2.5, settle_s=0.0))

    assert order == [('alt', 2.5), 'arm', 'takeoff']
