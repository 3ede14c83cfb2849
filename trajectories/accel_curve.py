# trajectories/accel_curve.py
"""
Jerk-limited velocity transition.

Jerk is piecewise constant, acceleration piecewise linear, velocity piecewise
quadratic and position piecewise cubic, so a velocity change from `v_start`
to `v_end` is smooth up to the acceleration.

Units: mm, mm/s, mm/s^2, mm/s^3, s.
"""
import logging
from typing import Optional

import numpy as np

from .base import BaseTrajectory
from .diagnostics import DiagnosticCallback, DiagnosticKind, report_diagnostic

logger = logging.getLogger(__name__)

# default maximum jerk [mm/s^3]
J_MAX = 500000.0


def _cardano_complex_root(a: float, c0: float, c1: float) -> float:
    """Real root of (v + a)^2 (v - a) = b when the Cardano discriminant c0 < 0."""
    c2 = complex(c1 / 2.0, np.sqrt(-c0) / 2.0) ** (1.0 / 3.0)
    return (2.0 * c2.real - a) / 3.0


def _cardano_trigonometric_root(a: float, c0: float, c1: float) -> float:
    """Same root as `_cardano_complex_root`, in polar form without complex numbers."""
    modulus = np.hypot(c1 / 2.0, np.sqrt(-c0) / 2.0)
    phi = np.arctan2(np.sqrt(-c0) / 2.0, c1 / 2.0)
    return (2.0 * np.cbrt(modulus) * np.cos(phi / 3.0) - a) / 3.0


class CurveSegment(BaseTrajectory):
    """
    One bounded acceleration change from `v_start` to `v_end`.

    The time boundaries t0 <= t1 <= t2 <= t3 split the segment into a jerk
    ramp-up, an optional constant-acceleration plateau and a jerk ramp-down.
    The local frame always starts at t0 = 0, x0 = 0.

    Example usage:
        seg = CurveSegment(a_max=3600.0, v_start=0.0, v_end=720.0)
        seg.v(seg.t_end())  # 720.0
    """

    def __init__(self, a_max: float = 0.0, v_start: float = 0.0,
                 v_end: float = 0.0, j_max: float = J_MAX):
        self.reset(a_max, v_start, v_end, j_max=j_max)

    def reset(self, a_max: float, v_start: float, v_end: float,
              j_max: float = J_MAX) -> None:
        """
        Rebuild the segment from the constraints. Every field is overwritten.

        Args:
            a_max (float): Magnitude of the maximum acceleration [mm/s^2], > 0.
            v_start (float): Start velocity [mm/s].
            v_end (float): End velocity [mm/s].
            j_max (float): Magnitude of the maximum jerk [mm/s^3], > 0.
        """
        self.j_max = float(j_max)
        self.tc = self.calc_time_curve(a_max, j_max=j_max)
        rising = v_end - v_start > 0
        self.am = float(a_max) if rising else -float(a_max)
        self.jm = self.j_max if rising else -self.j_max
        self.v0 = float(v_start)
        self.v3 = float(v_end)
        self.t0 = 0.0
        self.x0 = 0.0
        self.tm = (self.v3 - self.v0) / self.am - self.tc if self.am != 0.0 else 0.0

        if self.tm > 0:
            # velocity: curve -> line -> curve
            self.t1 = self.t0 + self.tc
            self.t2 = self.t1 + self.tm
            self.t3 = self.t2 + self.tc
        else:
            # velocity: curve -> curve, no acceleration plateau
            self.t1 = self.t0 + np.sqrt(self.tc / self.am * (self.v3 - self.v0)) if self.am != 0.0 else self.t0
            self.t2 = self.t1
            self.t3 = self.t2 + (self.t1 - self.t0)

        # placeholders so that v()/x() can be evaluated below
        self.v1 = self.v2 = self.v0
        self.x1 = self.x2 = self.x0
        self.x3 = self.x0 + (self.v0 + self.v3) / 2.0 * (self.t3 - self.t0)
        self.v1 = self.v(self.t1)
        self.v2 = self.v(self.t2)
        self.x1 = self.x(self.t1)
        self.x2 = self.x(self.t2)

        logger.debug(
            "CurveSegment: v %.3f -> %.3f tm=%.6f t=(%.6f, %.6f, %.6f) x_end=%.6f",
            self.v0, self.v3, self.tm, self.t1, self.t2, self.t3, self.x3,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def j(self, t: float) -> float:
        if t <= self.t0:
            return 0.0
        elif t <= self.t1:
            return self.jm
        elif t <= self.t2:
            return 0.0
        elif t <= self.t3:
            return -self.jm
        return 0.0

    def a(self, t: float) -> float:
        if t <= self.t0:
            return 0.0
        elif t <= self.t1:
            return self.jm * (t - self.t0)
        elif t <= self.t2:
            return self.am
        elif t <= self.t3:
            return -self.jm * (t - self.t3)
        return 0.0

    def v(self, t: float) -> float:
        if t <= self.t0:
            return self.v0
        elif t <= self.t1:
            return self.v0 + 0.5 * self.jm * (t - self.t0) ** 2
        elif t <= self.t2:
            return self.v1 + self.am * (t - self.t1)
        elif t <= self.t3:
            return self.v3 - 0.5 * self.jm * (t - self.t3) ** 2
        return self.v3

    def x(self, t: float) -> float:
        if t <= self.t0:
            return self.x0 + self.v0 * (t - self.t0)
        elif t <= self.t1:
            return self.x0 + self.v0 * (t - self.t0) + self.jm / 6.0 * (t - self.t0) ** 3
        elif t <= self.t2:
            return self.x1 + self.v1 * (t - self.t1) + self.am / 2.0 * (t - self.t1) ** 2
        elif t <= self.t3:
            return self.x3 + self.v3 * (t - self.t3) - self.jm / 6.0 * (t - self.t3) ** 3
        return self.x3 + self.v3 * (t - self.t3)

    def t_start(self) -> float:
        return self.t0

    def t_end(self) -> float:
        return self.t3

    def v_end(self) -> float:
        return self.v3

    def x_end(self) -> float:
        return self.x3

    # ------------------------------------------------------------------
    # Closed-form solvers
    # ------------------------------------------------------------------
    @staticmethod
    def calc_time_curve(a_max: float, j_max: float = J_MAX) -> float:
        """Duration of one jerk ramp reaching `a_max`."""
        return abs(a_max) / j_max

    @staticmethod
    def calc_min_distance(a_max: float, v_start: float, v_end: float,
                          j_max: float = J_MAX) -> float:
        """
        Displacement needed to change velocity from `v_start` to `v_end`
        without any cruise phase.
        """
        return CurveSegment(a_max, v_start, v_end, j_max=j_max).x_end()

    @staticmethod
    def calc_velocity_end(a_max: float, v_start: float, v_target: float,
                          distance: float, j_max: float = J_MAX) -> float:
        """
        Velocity actually reachable within `distance` when it is too short to
        reach `v_target`.

        Args:
            a_max (float): Magnitude of the maximum acceleration [mm/s^2].
            v_start (float): Start velocity [mm/s].
            v_target (float): Requested end velocity [mm/s].
            distance (float): Available distance [mm].
            j_max (float): Magnitude of the maximum jerk [mm/s^3].

        Returns:
            float: Attainable end velocity [mm/s].
        """
        tc = CurveSegment.calc_time_curve(a_max, j_max=j_max)
        am = a_max if v_target - v_start > 0 else -a_max
        vs = v_start
        d = distance

        if d > (2.0 * vs + am * tc) * tc:
            # curve -> line -> curve: quadratic in v_end
            amtc = am * tc
            D = amtc * amtc - 4.0 * (amtc * vs - vs * vs - 2.0 * am * d)
            ve = (-amtc + np.sqrt(D)) / 2.0
            logger.debug("calc_velocity_end: plateau branch D=%.6g ve=%.6f", D, ve)
            return float(ve)

        # curve -> curve: depressed cubic (v_end + vs)^2 (v_end - vs) = jm d^2
        a = vs
        b = am * d * d / tc
        aaa = a * a * a
        c0 = 27.0 * (32.0 * aaa * b + 27.0 * b * b)
        c1 = 16.0 * aaa + 27.0 * b
        if c0 >= 0:
            c2 = np.cbrt((np.sqrt(c0) + c1) / 2.0)
            if c2 == 0.0:
                return float(a)
            ve = (c2 + 4.0 * a * a / c2 - a) / 3.0
        else:
            # three real roots: principal complex cube root
            ve = _cardano_complex_root(a, c0, c1)
        logger.debug("calc_velocity_end: cubic branch c0=%.6g ve=%.6f", c0, ve)
        return float(ve)

    @staticmethod
    def calc_velocity_max(a_max: float, v_start: float, v_end: float,
                          distance: float, j_max: float = J_MAX,
                          on_diagnostic: Optional[DiagnosticCallback] = None) -> float:
        """
        Peak velocity for which accelerating from `v_start` and decelerating
        to `v_end` covers exactly `distance`.

        A negative discriminant means the inputs are inconsistent; it is
        reported and `v_start` is returned.
        """
        tc = CurveSegment.calc_time_curve(a_max, j_max=j_max)
        amtc = a_max * tc
        D = (amtc * amtc - 2.0 * (v_start + v_end) * amtc + 4.0 * a_max * distance
             + 2.0 * (v_start * v_start + v_end * v_end))
        if D < 0:
            report_diagnostic(
                DiagnosticKind.NUMERIC_DOMAIN_ERROR,
                "negative discriminant in peak velocity",
                on_diagnostic,
                a_max=a_max, v_start=v_start, v_end=v_end,
                distance=distance, discriminant=D,
            )
            return float(v_start)
        return float((-amtc + np.sqrt(D)) / 2.0)
