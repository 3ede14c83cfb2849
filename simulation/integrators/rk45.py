import numpy as np

from simulation.results import SimulationResult
from .step import integrate


def rk4_integration(
    model,
    x0: np.ndarray,
    u: np.ndarray,
    time_array: np.ndarray,
) -> SimulationResult:
    """
    Perform Runge–Kutta 4th order (RK4) integration with time-varying
    control inputs. Outputs are logged at the first stage of each step.
    """
    return integrate(model, x0, u, time_array, method="rk4")
