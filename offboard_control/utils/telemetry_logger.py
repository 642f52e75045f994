import asyncio
import csv
import time
from pathlib import Path
from typing import Optional

from .shared_state import SharedState


async def log_telemetry_csv(
    state: SharedState,
    filename: str,
    logs_dir: Optional[Path] = None,
    rate_hz: float = 10.0,
) -> Path:
    """
    Logs actual vs commanded position to a CSV file.

    Rows carry the live ENU position, the current target and the
    progression value (waypoint index or sweep angle) so each step can be
    analysed afterwards. Defaults to the project-level `logs/` directory,
    independent of the current working directory.
    """

    # --------------------------------------------------
    # Resolve logs directory
    # offboard_control/utils/telemetry_logger.py -> repo_root = parents[2]
    # --------------------------------------------------
    if logs_dir is None:
        logs_dir = Path(__file__).resolve().parents[2] / "logs"
    logs_dir = Path(logs_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_path = logs_dir / filename
    print(f"Telemetry logger started → {log_path}")

    with open(log_path, "w", newline="") as f:
        writer = csv.writer(f)

        writer.writerow([
            "t",
            "x_m", "y_m", "z_m",
            "target_x_m", "target_y_m", "target_z_m",
            "progression",
            "phase",
        ])

        t0 = time.time()

        while state.running:
            now = time.time() - t0

            if state.feedback.has_sample:
                x, y, z = state.feedback.latest()

                tx = ty = tz = ""
                if state.target is not None:
                    tx, ty, tz = (f"{v:.3f}" for v in state.target)

                progression = "" if state.progression is None else state.progression

                writer.writerow([
                    f"{now:.3f}",
                    f"{x:.3f}", f"{y:.3f}", f"{z:.3f}",
                    tx, ty, tz,
                    progression,
                    state.mission_phase,
                ])

            await asyncio.sleep(1.0 / rate_hz)

    return log_path
