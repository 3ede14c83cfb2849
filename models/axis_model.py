from dataclasses import dataclass
import numpy as np

from .base_model import BaseAxisModel


@dataclass
class AxisModelParams:
    """
    First-order velocity response v/u = K / (T1 s + 1).

    Attributes:
        K (float): Steady-state gain [mm/s per input unit].
        T1 (float): Time constant [s], > 0.
    """
    K: float = 1.0
    T1: float = 0.1


class FirstOrderAxisModel(BaseAxisModel):
    """
    Translational axis driven by a velocity command through a first-order lag.

    State: x = [position, velocity]
    Input: u = [command]
    """
    state_keys = {"x": 0, "v": 1}

    def __init__(self, params: AxisModelParams):
        super().__init__(params)
        self.K: float = params.K
        self.T1: float = params.T1

    def get_dx__dt(self, x, u):
        v = x[1]
        u_k = float(np.atleast_1d(u)[0])
        acc = (self.K * u_k - v) / self.T1
        dx = np.array([v, acc])
        return dx, {"a": acc}
