"""
Per-shape motion routines.

The square visits waypoints 1..5 and finishes when the index reaches 6.
Sweep shapes (circle, eight, ellipse) first seek their start point, then
step the angle one degree at a time, waiting for convergence at each step,
and finish at the upper bound of the sweep.

Every routine ends in one of the RunOutcome values. Reaching the end of a
path requests a full stop of the run through SharedState.
"""

from typing import Optional

from ..trajectories.path_generator import SweepTrajectory, trajectory_for
from ..trajectories.square import SquareTrajectory
from ..utils.shared_state import SharedState
from .convergence_gate import ConvergenceGate
from .mode_adapter import UnsupportedModeError
from .types import ControlMode, GateResult, PathShape, RunOutcome

TEST_COMPLETE = "Test complete"


class Sequencer:
    def __init__(self, shape: PathShape, mode: ControlMode, gate: ConvergenceGate, state: SharedState):
        self.shape = shape
        self.mode = mode
        self.gate = gate
        self.state = state

    async def run(self) -> RunOutcome:
        print(f"{self.mode.value.capitalize()} control mode selected.")
        if not self.mode.supported:
            print(f"⚠️ Control mode: {self.mode.value} control mode not supported in PX4 current Firmware.")
            self.state.mission_phase = "ABORTED"
            return RunOutcome.UNSUPPORTED_MODE

        print(f"Test option: {self.shape.value}-shaped path...")
        if self.shape is PathShape.SQUARE:
            return await self.square_path_motion()
        return await self.sweep_path_motion(trajectory_for(self.shape))

    async def square_path_motion(self, trajectory: Optional[SquareTrajectory] = None) -> RunOutcome:
        trajectory = trajectory or trajectory_for(PathShape.SQUARE)
        self.state.mission_phase = "SQUARE"
        print("Testing...")

        index = trajectory.FIRST_INDEX
        while self.state.running:
            if index == trajectory.TERMINAL_INDEX:
                return self._complete()

            target = trajectory.waypoint(index)
            self._mark(target, index)
            outcome = await self._converge(target)
            if outcome is not None:
                return outcome

            print(f"[WP] Reached waypoint {index}: x={target.x:.2f}, y={target.y:.2f}, z={target.z:.2f}")
            index += 1

        return RunOutcome.STOPPED

    async def sweep_path_motion(self, trajectory: SweepTrajectory) -> RunOutcome:
        print("Testing...")

        # starting point
        start = trajectory.start_point()
        self.state.mission_phase = "SEEK_START"
        self._mark(start, None)
        print(f"[SEEK] Going to start point: x={start.x:.2f}, y={start.y:.2f}, z={start.z:.2f}")
        outcome = await self._converge(start)
        if outcome is not None:
            return outcome

        # motion routine
        self.state.mission_phase = "SWEEP"
        angles = trajectory.angles()
        last = angles[-1]
        for theta in angles:
            if not self.state.running:
                return RunOutcome.STOPPED

            target = trajectory.position_xyz(theta)
            self._mark(target, theta)
            outcome = await self._converge(target)
            if outcome is not None:
                return outcome

            if theta == last:
                return self._complete()

        return RunOutcome.STOPPED

    # -------------------------------------------------------

    def _mark(self, target, progression) -> None:
        self.state.target = target
        self.state.progression = progression

    async def _converge(self, target):
        """None when converged, otherwise the outcome that ends the routine."""
        try:
            result = await self.gate.run_until_converged(target)
        except UnsupportedModeError as e:
            print(f"⚠️ {e}")
            self.state.mission_phase = "ABORTED"
            return RunOutcome.UNSUPPORTED_MODE

        if result is GateResult.CONVERGED:
            return None
        if result is GateResult.TIMED_OUT:
            self.state.request_stop("CONVERGENCE TIMEOUT")
            return RunOutcome.TIMED_OUT
        return RunOutcome.STOPPED

    def _complete(self) -> RunOutcome:
        print(f"{TEST_COMPLETE}!")
        self.state.mission_phase = "COMPLETE"
        self.state.request_stop(TEST_COMPLETE)
        return RunOutcome.COMPLETE
