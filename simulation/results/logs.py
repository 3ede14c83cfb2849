from dataclasses import dataclass
from typing import Optional
import numpy as np

@dataclass
class AxisLog:
    """
    Logged axis-level variables over the simulation horizon.

    Attributes:
        time (np.ndarray): Time vector [s], shape (T,).
        x (np.ndarray): State trajectory [position, velocity], shape (T, 2).
        dx (np.ndarray): State derivatives `dx/dt`, shape (T, 2).
        u (np.ndarray): Control inputs applied, shape (T, n_inputs).
        a (Optional[np.ndarray]): Acceleration output of the model [mm/s²], shape (T,).
    """
    time: np.ndarray
    x: np.ndarray
    dx: np.ndarray
    u: np.ndarray

    a: Optional[np.ndarray] = None

@dataclass
class SimulationResult:
    """
    Open-loop simulation result.

    Attributes:
        axis (AxisLog): Axis trajectories and signals.
    """
    axis: AxisLog

@dataclass
class TrackingResult:
    """
    Closed-loop result: reference profile samples next to the plant response.

    Attributes:
        time (np.ndarray): Time vector [s], shape (T,).
        reference (np.ndarray): Reference samples [t, j, a, v, x], shape (T, 5).
        x (np.ndarray): Plant state [position, velocity] at each period, shape (T, 2).
        u (np.ndarray): Command computed at each period, shape (T,).
        u_ff (np.ndarray): Feedforward part of the command, shape (T,), NaN when
            the controller does not expose it.
    """
    time: np.ndarray
    reference: np.ndarray
    x: np.ndarray
    u: np.ndarray
    u_ff: Optional[np.ndarray] = None

    @property
    def velocity_error(self) -> np.ndarray:
        return self.reference[:, 3] - self.x[:, 1]

    @property
    def position_error(self) -> np.ndarray:
        return self.reference[:, 4] - self.x[:, 0]
