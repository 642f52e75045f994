import threading
from dataclasses import dataclass, field
from typing import Optional

from ..core.types import ORIGIN, Point3


class PositionFeedback:
    """
    Latest vehicle position (ENU, metres). Last write wins, no history.

    Written by the telemetry watcher, read by the control loop. The lock only
    guards the replace so a writer on another thread never tears a read.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pos = ORIGIN
        self._has_sample = False

    def latest(self) -> Point3:
        with self._lock:
            return self._pos

    def update(self, pos: Point3) -> None:
        pos = Point3(*pos)
        with self._lock:
            self._pos = pos
            self._has_sample = True

    @property
    def has_sample(self) -> bool:
        with self._lock:
            return self._has_sample


@dataclass
class SharedState:
    # Latest position snapshot
    feedback: PositionFeedback = field(default_factory=PositionFeedback)

    # Control flags
    running: bool = True
    stop_reason: str = ""

    # Mission markers for precise analysis
    mission_phase: str = "INIT"
    target: Optional[Point3] = None
    progression: Optional[int] = None

    def request_stop(self, reason: str) -> None:
        self.running = False
        self.stop_reason = reason
