import asyncio
import math
import time
from typing import Optional

from ..utils.shared_state import SharedState
from .mode_adapter import adapt
from .types import ControlMode, GateResult, Point3


def distance(a: Point3, b: Point3) -> float:
    return math.sqrt(sum((ai - bi) ** 2 for ai, bi in zip(a, b)))


class ConvergenceGate:
    """
    Keeps streaming the setpoint for one target until the vehicle is within
    `tolerance_m` of it.

    Each iteration adapts the target against the latest feedback, publishes,
    sleeps one period, then checks the distance. With `timeout_s=None` the
    wait is unbounded: if telemetry stalls or the target is unreachable the
    gate blocks until the run is stopped.
    """

    def __init__(
        self,
        link,
        state: SharedState,
        mode: ControlMode,
        *,
        tolerance_m: float = 0.1,
        period_s: float = 0.1,
        timeout_s: Optional[float] = None,
    ):
        self.link = link
        self.state = state
        self.mode = mode
        self.tolerance_m = tolerance_m
        self.period_s = period_s
        self.timeout_s = timeout_s

    async def run_until_converged(self, target: Point3) -> GateResult:
        start = time.monotonic()

        while self.state.running:
            # raises UnsupportedModeError before anything is published
            command = adapt(target, self.state.feedback.latest(), self.mode)
            await self.link.publish(command)

            await asyncio.sleep(self.period_s)

            if distance(self.state.feedback.latest(), target) <= self.tolerance_m:
                return GateResult.CONVERGED

            if self.timeout_s is not None and time.monotonic() - start > self.timeout_s:
                print(f"[GATE] No convergence on {tuple(round(v, 2) for v in target)} after {self.timeout_s:.1f}s")
                return GateResult.TIMED_OUT

        return GateResult.STOPPED
