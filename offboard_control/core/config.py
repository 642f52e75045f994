from dataclasses import dataclass
from typing import Optional

from .types import ControlMode, PathShape


class ConfigError(ValueError):
    """Unrecognized run selector. Fatal before the run starts."""


def _lookup(enum_cls, value: str, what: str):
    key = value.strip().lower()
    for member in enum_cls:
        if member.value == key:
            return member
    accepted = ", ".join(m.value for m in enum_cls)
    raise ConfigError(f"{what}: wrong/unexistant name '{value}' (expected one of: {accepted})")


def parse_control_mode(value: str) -> ControlMode:
    return _lookup(ControlMode, value, "Control mode")


def parse_path_shape(value: str) -> PathShape:
    return _lookup(PathShape, value, "Path shape")


@dataclass
class PX4Config:
    system_address: str = "udp://:14540"   # SITL default
    takeoff_alt_m: float = 2.5
    offboard_rate_hz: float = 10.0         # 0.1s
    tolerance_m: float = 0.1
    convergence_timeout_s: Optional[float] = None  # None = wait until converged
    mode: ControlMode = ControlMode.POSITION
    shape: PathShape = PathShape.SQUARE
    yaw_deg: float = 0.0
    log_filename: str = "offboard_path_test_log.csv"
    connect_timeout_s: Optional[float] = 30.0      # connect + armable wait; None = no limit

    def __post_init__(self):
        if self.offboard_rate_hz <= 0:
            raise ConfigError(f"Setpoint rate must be positive, got {self.offboard_rate_hz} Hz")
        if self.tolerance_m < 0:
            raise ConfigError(f"Convergence tolerance must not be negative, got {self.tolerance_m} m")
        if self.convergence_timeout_s is not None and self.convergence_timeout_s <= 0:
            raise ConfigError(f"Convergence timeout must be positive, got {self.convergence_timeout_s} s")
        if self.connect_timeout_s is not None and self.connect_timeout_s <= 0:
            raise ConfigError(f"Connect timeout must be positive, got {self.connect_timeout_s} s")

    @property
    def period_s(self) -> float:
        return 1.0 / self.offboard_rate_hz

    @classmethod
    def from_selectors(cls, mode: str = "position", shape: str = "square", **overrides) -> "PX4Config":
        return cls(
            mode=parse_control_mode(mode),
            shape=parse_path_shape(shape),
            **overrides,
        )
