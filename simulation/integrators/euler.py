import numpy as np

from simulation.results import SimulationResult
from .step import integrate


def euler_integration(
    model,
    x0: np.ndarray,
    u: np.ndarray,
    time_array: np.ndarray,
) -> SimulationResult:
    """
    Open-loop forward Euler run of an axis model under a precomputed command.

    Args:
        model: Axis model, `dx, outputs = model.get_dx__dt(x, u_k)`.
        x0 (np.ndarray): Initial [position, velocity].
        u (np.ndarray): Command held over each period, shape (T, 1).
        time_array (np.ndarray): Uniform time vector, shape (T,), T >= 2.

    Returns:
        SimulationResult: Axis log (states, derivatives, commands, acceleration).
    """
    return integrate(model, x0, u, time_array, method="euler")
