# controllers/base.py

from abc import ABC, abstractmethod

class BaseController(ABC):
    """
    Abstract base class for axis controllers.

    A controller receives the current measured state and a reference sample
    (as produced by `TrajectoryPoint.to_dict()`) and returns a dict of control
    outputs matching the plant's input interface.

        Example required keys:
            {
                "u",   # command sent to the axis
            }
    """

    @abstractmethod
    def compute(self, state: dict, reference: dict, **kwargs) -> dict:
        """
        Compute control commands given the current axis state and a reference.

        Args:
            state (dict): Measured values, e.g. {"x", "v", "a"}
            reference (dict): Reference sample, e.g. {"t", "j", "a", "v", "x"}
            **kwargs: Optional context (dt, ...)

        Returns:
            dict: {"u": command}
        """
        pass

    def reset(self) -> None:
        """Clear internal state between runs."""
        pass
