from abc import ABC, abstractmethod
import numpy as np
from typing import Dict, Tuple


class BaseAxisModel(ABC):
    """
        Abstract base class for single-axis plant models.

        Subclasses must implement `get_dx__dt`, which defines the state-space
        dynamics of the model. Time integration (Euler, RK4) is handled
        externally in the `simulation.integrators` module.
    """
    state_keys: Dict[str, int] = {}

    def __init__(self, params):
        """
        Args:
            params: Model-specific parameter container (dataclass).
        """
        self.params = params

    @abstractmethod
    def get_dx__dt(
        self,
        x: np.ndarray,
        u: np.ndarray,
        ) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        """
        Compute state derivatives and physical outputs at the current step.

        Args:
            x (np.ndarray): Current state vector, shape (n_states,).
            u (np.ndarray): Current control input vector, shape (n_inputs,).

        Returns:
            Tuple[np.ndarray, Dict[str, np.ndarray]]:
                - dx (np.ndarray): State derivatives dx/dt, shape (n_states,).
                - outputs (Dict[str, np.ndarray]): Variables to be logged.
        """
        raise NotImplementedError
