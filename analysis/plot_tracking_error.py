"""
Offboard path test: actual vs reference

- Reference: from the path generators (single source of truth)
- Actual: from the telemetry CSV written during the run
- Tracking error: distance between live position and the commanded target

Usage:
    python analysis/plot_tracking_error.py logs/offboard_position_circle_log.csv circle
"""

import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401

from offboard_control.core.config import parse_path_shape
from offboard_control.core.types import PathShape
from offboard_control.trajectories.path_generator import trajectory_for


# --------------------------------------------------
# Paths (repo-consistent)
# --------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
OUTPUT_DIR = REPO_ROOT / "analysis" / "outputs"


def load_log(csv_path) -> pd.DataFrame:
    df = pd.read_csv(csv_path)
    # rows logged before the first target carry no reference
    return df.dropna(subset=["target_x_m", "target_y_m", "target_z_m"]).reset_index(drop=True)


def tracking_error(df: pd.DataFrame) -> pd.Series:
    dx = df["x_m"].values - df["target_x_m"].values
    dy = df["y_m"].values - df["target_y_m"].values
    dz = df["z_m"].values - df["target_z_m"].values
    return pd.Series(np.sqrt(dx**2 + dy**2 + dz**2), index=df.index, name="error_m")


def summarize_by_progression(df: pd.DataFrame) -> pd.DataFrame:
    """Max / mean error and sample count per waypoint index or sweep angle."""
    steps = df.dropna(subset=["progression"]).copy()
    steps["error_m"] = tracking_error(steps)
    steps["progression"] = steps["progression"].astype(int)
    return (
        steps.groupby("progression")["error_m"]
        .agg(max_error_m="max", mean_error_m="mean", samples="count")
        .sort_index()
    )


def reference_path(shape: PathShape) -> np.ndarray:
    traj = trajectory_for(shape)
    if shape is PathShape.SQUARE:
        points = [traj.waypoint(i) for i in traj.indices()]
    else:
        points = [traj.position_xyz(th) for th in traj.angles()]
    return np.asarray(points)


# --------------------------------------------------
# Plots
# --------------------------------------------------

def plot_xyz(df: pd.DataFrame, shape: PathShape, out_png: Path) -> Path:
    ref = reference_path(shape)

    fig = plt.figure(figsize=(9, 7))
    ax = fig.add_subplot(111, projection="3d")

    ax.plot(ref[:, 0], ref[:, 1], ref[:, 2], linestyle="--", linewidth=2, label=f"Reference {shape.value}")
    ax.plot(df["x_m"], df["y_m"], df["z_m"], linewidth=2, label="Actual UAV Trajectory")

    ax.set_xlabel("East [m]")
    ax.set_ylabel("North [m]")
    ax.set_zlabel("Up [m]")
    ax.set_title(f"Offboard {shape.value} path — Actual vs Reference")
    ax.legend()
    ax.view_init(elev=25, azim=135)

    plt.tight_layout()
    plt.savefig(out_png, dpi=200)
    plt.close(fig)
    return out_png


def plot_error_vs_time(df: pd.DataFrame, out_png: Path) -> Path:
    fig = plt.figure(figsize=(8, 4))
    plt.plot(df["t"], tracking_error(df), linewidth=2)
    plt.grid(True)

    plt.xlabel("Time [s]")
    plt.ylabel("Distance to target [m]")
    plt.title("Tracking error to current setpoint")

    plt.savefig(out_png, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return out_png


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 2:
        print(__doc__)
        return 2

    csv_path, shape = Path(argv[0]), parse_path_shape(argv[1])
    df = load_log(csv_path)

    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    stem = csv_path.stem
    for png in (
        plot_xyz(df, shape, OUTPUT_DIR / f"{stem}_xyz.png"),
        plot_error_vs_time(df, OUTPUT_DIR / f"{stem}_error.png"),
    ):
        print(f"Saved plot → {png}")

    summary = summarize_by_progression(df)
    print(summary.describe())
    return 0


if __name__ == "__main__":
    sys.exit(main())
