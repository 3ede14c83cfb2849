# analysis/profile_metrics.py

from typing import Dict, Optional
import numpy as np
from simulation.results import TrackingResult


def compute_profile_metrics(
    samples: np.ndarray,
    j_max: Optional[float] = None,
    a_max: Optional[float] = None,
    tol: float = 1e-6,
) -> Dict[str, float]:
    """
    Peak values of a sampled profile and, when limits are given, whether the
    profile stays within them.

    Parameters
    ----------
    samples : np.ndarray
        Output of ``BaseTrajectory.sample_array``, shape ``(N, 5)`` with columns
        ``[t, j, a, v, x]``.
    j_max, a_max : float, optional
        Limits to check against.
    tol : float
        Relative tolerance of the limit checks.

    Returns
    -------
    Dict[str, float]
        ``duration``, ``distance``, ``peak_jerk``, ``peak_acceleration``,
        ``peak_velocity``, ``min_velocity`` and, when the matching limit is
        given, ``jerk_within_limit`` / ``acceleration_within_limit``.

    Raises
    ------
    ValueError
        If ``samples`` is empty or does not have five columns.

    Example
    -------
    >>> samples = planner.sample_array(planner.time_grid(0.001))
    >>> compute_profile_metrics(samples, a_max=3600.0)["acceleration_within_limit"]
    True
    """
    samples = np.asarray(samples, dtype=float)
    if samples.ndim != 2 or samples.shape[1] != 5 or samples.shape[0] == 0:
        raise ValueError("samples must be a non-empty (N, 5) array [t, j, a, v, x]")

    t, j, a, v, x = samples.T
    metrics = {
        "duration": float(t[-1] - t[0]),
        "distance": float(x[-1] - x[0]),
        "peak_jerk": float(np.max(np.abs(j))),
        "peak_acceleration": float(np.max(np.abs(a))),
        "peak_velocity": float(np.max(v)),
        "min_velocity": float(np.min(v)),
    }
    if j_max is not None:
        metrics["jerk_within_limit"] = bool(metrics["peak_jerk"] <= j_max * (1.0 + tol))
    if a_max is not None:
        metrics["acceleration_within_limit"] = bool(metrics["peak_acceleration"] <= a_max * (1.0 + tol))
    return metrics


def compute_tracking_metrics(result: TrackingResult) -> Dict[str, float]:
    """
    Velocity and position tracking errors of a closed-loop run.

    Returns:
        dict with ``velocity_rms``, ``velocity_max``, ``position_rms``,
        ``position_max`` and ``position_final`` (signed, reference minus plant).
    """
    ev = result.velocity_error
    ex = result.position_error
    return {
        "velocity_rms": float(np.sqrt(np.mean(ev ** 2))),
        "velocity_max": float(np.max(np.abs(ev))),
        "position_rms": float(np.sqrt(np.mean(ex ** 2))),
        "position_max": float(np.max(np.abs(ex))),
        "position_final": float(ex[-1]),
    }
