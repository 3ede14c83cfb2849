# simulation/closed_loop_runner.py

import logging
import numpy as np
from typing import Dict

from controllers.base import BaseController
from simulation.results import TrackingResult
from simulation.integrators.step import integrate_one_step

logger = logging.getLogger(__name__)


class ClosedLoopRunner:
    """
    Closed-loop simulation runner.

    Orchestration of:
      - axis plant model (FirstOrderAxisModel, ...)
      - reference profile (BaseTrajectory, e.g. TrajectoryPlanner)
      - feedback controller
      - integrator (Euler or RK4)

    At each control period the reference is sampled from the closed-form
    profile, the controller computes the command and the plant is propagated
    by one period with that command held constant.

    Example usage:
        runner = ClosedLoopRunner(model, controller, planner)
        result = runner.run(x0, time_array, method="euler")
    """

    def __init__(
        self,
        axis_model,
        controller: BaseController,
        trajectory,
    ):
        self.axis_model = axis_model
        self.controller = controller
        self.trajectory = trajectory

    def reset(self, trajectory=None):
        """Swap the reference profile and clear the controller state."""
        if trajectory is not None:
            self.trajectory = trajectory
        self.controller.reset()

    def _build_controller_state(self, x: np.ndarray, u_prev: np.ndarray) -> Dict[str, float]:
        """
        Build the measured state dict for the controller from the state vector.

        The measured acceleration is the model derivative under the command
        applied during the previous period.
        """
        sk = getattr(self.axis_model, "state_keys", {})

        def get(name: str, default: float = 0.0) -> float:
            idx = sk.get(name, None)
            if idx is None:
                return default
            return float(x[idx])

        dx, _ = self.axis_model.get_dx__dt(x, u_prev)
        return {
            "x": get("x"),
            "v": get("v"),
            "a": float(dx[sk.get("v", 1)]),
        }

    def run(self, x0: np.ndarray, time_array: np.ndarray, method: str = "euler") -> TrackingResult:
        time_array = np.asarray(time_array, dtype=float)
        if time_array.shape[0] < 2:
            raise ValueError("time_array needs at least two samples")
        dt = time_array[1] - time_array[0]

        n = len(time_array)
        x_log = np.zeros((n, len(x0)))
        u_log = np.zeros(n)
        ff_log = np.full(n, np.nan)
        reference = self.trajectory.sample_array(time_array)

        x = np.array(x0, dtype=float)
        u_prev = np.zeros(1)
        self.controller.reset()

        for k, t in enumerate(time_array):
            ref = dict(zip(("t", "j", "a", "v", "x"), reference[k]))
            state = self._build_controller_state(x, u_prev)

            u_cmd = self.controller.compute(state, ref, dt=dt)
            u_log[k] = u_cmd.get("u", 0.0)
            ff_log[k] = getattr(self.controller, "last_ff", np.nan)
            x_log[k] = x

            u_prev = np.array([u_log[k]])
            x, _ = integrate_one_step(self.axis_model, x, u_prev, dt, method)

        logger.debug(
            "closed loop done: %d steps, final v=%.3f ref=%.3f",
            n, x_log[-1, 1], reference[-1, 3],
        )
        return TrackingResult(
            time=time_array,
            reference=reference,
            x=x_log,
            u=u_log,
            u_ff=ff_log,
        )
