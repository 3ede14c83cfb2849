# trajectories/accel_designer.py
"""
Distance-constrained trajectory: acceleration, optional cruise, deceleration.

The planner picks the peak (cruise) velocity and, when the distance is too
short, the attainable end velocity so that the total displacement matches the
requested distance, then stitches two `CurveSegment` objects together.
"""
import logging
import sys
from typing import List, Optional, TextIO

from .accel_curve import CurveSegment, J_MAX
from .base import BaseTrajectory
from .diagnostics import Diagnostic, DiagnosticCallback, DiagnosticKind, report_diagnostic
from .utils import write_samples_csv

logger = logging.getLogger(__name__)

# tolerances used by the post-condition checks
DISTANCE_TOLERANCE = 0.1   # [mm]
TIME_TOLERANCE = 0.001     # [s]


class TrajectoryPlanner(BaseTrajectory):
    """
    Jerk-limited velocity plan satisfying a travel-distance constraint.

    Args:
        a_max: magnitude of the maximum acceleration [mm/s^2], > 0
        v_start: start velocity [mm/s]
        v_sat: saturation velocity, upper bound on the peak velocity [mm/s]
        v_target: requested end velocity [mm/s]
        distance: travel distance [mm], expected >= 0
        x_start: start position [mm]
        t_start: start time [s]
        j_max: magnitude of the maximum jerk [mm/s^3]
        on_diagnostic: optional callback receiving every `Diagnostic`

    Example usage:
        planner = TrajectoryPlanner(3600.0, 0.0, 720.0, 0.0, 1000.0)
        for t in planner.time_grid(0.001):
            v_ref = planner.v(t)
    """

    def __init__(
        self,
        a_max: float = 0.0,
        v_start: float = 0.0,
        v_sat: float = 0.0,
        v_target: float = 0.0,
        distance: float = 0.0,
        x_start: float = 0.0,
        t_start: float = 0.0,
        *,
        j_max: float = J_MAX,
        on_diagnostic: Optional[DiagnosticCallback] = None,
    ):
        self.ac = CurveSegment()
        self.dc = CurveSegment()
        self.diagnostics: List[Diagnostic] = []
        if a_max > 0:
            self.reset(a_max, v_start, v_sat, v_target, distance, x_start, t_start,
                       j_max=j_max, on_diagnostic=on_diagnostic)
        else:
            # empty profile, call reset() later
            self.t0 = self.t1 = self.t2 = self.t3 = t_start
            self.x0 = self.x3 = x_start
            self.v_max = v_start

    def reset(
        self,
        a_max: float,
        v_start: float,
        v_sat: float,
        v_target: float,
        distance: float,
        x_start: float = 0.0,
        t_start: float = 0.0,
        *,
        j_max: float = J_MAX,
        on_diagnostic: Optional[DiagnosticCallback] = None,
    ) -> List[Diagnostic]:
        """
        Rebuild the whole profile. Every field is overwritten, including after
        a degenerate input.

        Returns:
            List[Diagnostic]: Conditions detected during this reset (also
            kept in `self.diagnostics`).
        """
        self.diagnostics = []

        def collect(diagnostic: Diagnostic) -> None:
            self.diagnostics.append(diagnostic)
            if on_diagnostic is not None:
                on_diagnostic(diagnostic)

        def report(kind, message, **state):
            report_diagnostic(kind, message, collect, **state)

        # tentative peak and end velocities
        v_max = max(v_start, v_sat, v_target)
        v_end = v_target

        if distance <= 0:
            report(DiagnosticKind.INVALID_DISTANCE, "distance must be positive",
                   distance=distance, v_start=v_start)
            v_end = v_max = v_start
            distance = 0.0

        # distance too short to reach v_target: lower the end velocity
        if distance < CurveSegment.calc_min_distance(a_max, v_start, v_end, j_max=j_max):
            v_end = CurveSegment.calc_velocity_end(a_max, v_start, v_target, distance, j_max=j_max)
            v_max = max(v_start, v_end)
            logger.debug("end velocity limited by distance: v_end=%.3f", v_end)

        self.ac.reset(a_max, v_start, v_max, j_max=j_max)
        self.dc.reset(a_max, v_max, v_end, j_max=j_max)

        # no room to reach v_max: solve for the feasible peak velocity
        if distance < self.ac.x_end() + self.dc.x_end():
            v_max = CurveSegment.calc_velocity_max(
                a_max, v_start, v_end, distance, j_max=j_max, on_diagnostic=collect,
            )
            v_max = min(v_max, v_sat)
            # never decelerate before accelerating
            v_max = max(v_max, v_start, v_end)
            self.ac.reset(a_max, v_start, v_max, j_max=j_max)
            self.dc.reset(a_max, v_max, v_end, j_max=j_max)
            logger.debug("peak velocity limited by distance: v_max=%.3f", v_max)

        if self.ac.x_end() + self.dc.x_end() > distance + DISTANCE_TOLERANCE:
            report(DiagnosticKind.CONSTRAINT_VIOLATION, "distance constraint",
                   distance=distance, result=self.ac.x_end() + self.dc.x_end())

        remaining = distance - self.ac.x_end() - self.dc.x_end()
        if v_max != 0:
            t_cruise = remaining / v_max
        else:
            t_cruise = 0.0
            if remaining > DISTANCE_TOLERANCE:
                report(DiagnosticKind.CONSTRAINT_VIOLATION,
                       "distance unreachable with zero peak velocity",
                       distance=distance, remaining=remaining)

        self.a_max = a_max
        self.j_max = j_max
        self.v_max = v_max
        self.x0 = x_start
        self.x3 = x_start + distance
        self.t0 = t_start
        self.t1 = self.t0 + self.ac.t_end()
        self.t2 = self.t1 + t_cruise
        self.t3 = self.t2 + self.dc.t_end()

        e = TIME_TOLERANCE
        if not (self.t0 <= self.t1 + e and self.t1 <= self.t2 + e and self.t2 <= self.t3 + e):
            report(
                DiagnosticKind.CONSTRAINT_VIOLATION, "time points not ordered",
                a_max=a_max, v_start=v_start, v_sat=v_sat, v_target=v_target,
                distance=distance,
                v_max=v_max, v_end=v_end,
                t0=self.t0, t1=self.t1, t2=self.t2, t3=self.t3,
                x0=self.x0, x1=self.x0 + self.ac.x_end(),
                x2=self.x3 - self.dc.x_end(), x3=self.x3,
            )

        logger.debug("%s", self)
        return self.diagnostics

    @property
    def ok(self) -> bool:
        """True when the last reset raised no diagnostic."""
        return not self.diagnostics

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def j(self, t: float) -> float:
        if t < self.t2:
            return self.ac.j(t - self.t0)
        return self.dc.j(t - self.t2)

    def a(self, t: float) -> float:
        if t < self.t2:
            return self.ac.a(t - self.t0)
        return self.dc.a(t - self.t2)

    def v(self, t: float) -> float:
        if t < self.t2:
            return self.ac.v(t - self.t0)
        return self.dc.v(t - self.t2)

    def x(self, t: float) -> float:
        if t < self.t2:
            return self.x0 + self.ac.x(t - self.t0)
        # anchor the deceleration frame on the global end position
        return self.x3 - self.dc.x_end() + self.dc.x(t - self.t2)

    def t_start(self) -> float:
        return self.t0

    def t_end(self) -> float:
        return self.t3

    def v_end(self) -> float:
        return self.dc.v_end()

    def x_end(self) -> float:
        return self.x3

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def print_csv(self, stream: Optional[TextIO] = None, t_interval: float = 0.001) -> None:
        """Write one `t,j,a,v,x` line per sample, from t0 up to (excluding) t_end."""
        write_samples_csv(self, stream if stream is not None else sys.stdout, t_interval)

    def __str__(self) -> str:
        return (
            "TrajectoryPlanner "
            f"\td: {self.x3 - self.x0:g}"
            f"\tvs: {self.ac.v(0):g}"
            f"\tvm: {self.ac.v_end():g}"
            f"\tve: {self.dc.v_end():g}"
            f"\tt0: {self.t0:g}"
            f"\tt1: {self.t1:g}"
            f"\tt2: {self.t2:g}"
            f"\tt3: {self.t3:g}"
        )
