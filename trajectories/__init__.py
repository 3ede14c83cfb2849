# trajectories/__init__.py

from .base import BaseTrajectory, TrajectoryPoint
from .accel_curve import CurveSegment, J_MAX
from .accel_designer import TrajectoryPlanner
from .diagnostics import Diagnostic, DiagnosticKind
from .utils import to_dataframe, write_csv, write_samples_csv

__all__ = [
    "BaseTrajectory",
    "TrajectoryPoint",
    "CurveSegment",
    "J_MAX",
    "TrajectoryPlanner",
    "Diagnostic",
    "DiagnosticKind",
    "to_dataframe",
    "write_csv",
    "write_samples_csv",
]
