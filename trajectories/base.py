# trajectories/base.py
from abc import ABC, abstractmethod
from dataclasses import dataclass
import numpy as np

@dataclass
class TrajectoryPoint:
    t: float
    j: float        # jerk [mm/s^3]
    a: float        # acceleration [mm/s^2]
    v: float        # velocity [mm/s]
    x: float        # position [mm]

    def to_dict(self) -> dict:
        return dict(t=self.t, j=self.j, a=self.a, v=self.v, x=self.x)

class BaseTrajectory(ABC):
    """
    Abstract base class for one-dimensional reference profiles.

    Subclasses provide closed-form jerk, acceleration, velocity and position
    as functions of time. Sampling on a time grid is shared here.
    """

    @abstractmethod
    def j(self, t: float) -> float:
        """Jerk at time t."""
        pass

    @abstractmethod
    def a(self, t: float) -> float:
        """Acceleration at time t."""
        pass

    @abstractmethod
    def v(self, t: float) -> float:
        """Velocity at time t."""
        pass

    @abstractmethod
    def x(self, t: float) -> float:
        """Position at time t."""
        pass

    @abstractmethod
    def t_start(self) -> float:
        pass

    @abstractmethod
    def t_end(self) -> float:
        pass

    def sample(self, t: float) -> TrajectoryPoint:
        """Return reference at time t."""
        return TrajectoryPoint(t=t, j=self.j(t), a=self.a(t), v=self.v(t), x=self.x(t))

    def time_grid(self, t_interval: float = 0.001) -> np.ndarray:
        """
        Sample instants from t_start up to (excluding) t_end.

        Args:
            t_interval: fixed time step [s], must be positive.
        """
        if t_interval <= 0.0:
            raise ValueError(f"t_interval must be positive, got {t_interval}")
        t0 = self.t_start()
        n = int(np.ceil((self.t_end() - t0) / t_interval))
        # t0 + k*dt instead of accumulating dt to keep the grid drift-free
        grid = t0 + t_interval * np.arange(max(n, 0))
        return grid[grid < self.t_end()]

    def sample_array(self, time_array: np.ndarray) -> np.ndarray:
        """
        Retourne un tableau numpy de forme (N, 5):
        [t, j, a, v, x]
        """
        return np.array([
            [
                tp.t,
                tp.j,
                tp.a,
                tp.v,
                tp.x,
            ]
            for tp in (self.sample(float(t)) for t in time_array)
        ]).reshape(-1, 5)
