# controllers/feedback.py
import logging
from dataclasses import dataclass

from models.axis_model import AxisModelParams
from .base import BaseController

logger = logging.getLogger(__name__)


@dataclass
class FeedbackGain:
    kp: float = 10.0
    ki: float = 0.0
    kd: float = 0.0


class FeedbackController(BaseController):
    """
    Velocity tracking controller: model-based feedforward plus PID feedback.

    The feedforward inverts the first-order model K / (T1 s + 1), so a plant
    matching the model follows the reference with zero feedback effort:

        u = (T1 * dr + r) / K + kp * e + ki * integral(e) + kd * de
        e = r - y, de = dr - dy

    The reference derivative `dr` comes straight from the closed-form profile
    (a(t) when r = v(t)), no numerical differentiation is needed.
    """

    def __init__(self, model: AxisModelParams, gain: FeedbackGain):
        self.model = model
        self.gain = gain
        self.integral = 0.0
        self.last_ff = 0.0
        self.last_fb = 0.0

    def reset(self):
        self.integral = 0.0
        self.last_ff = 0.0
        self.last_fb = 0.0

    def update(self, r: float, y: float, dr: float, dy: float, dt: float) -> float:
        """
        Args:
            r: reference output
            y: measured output
            dr: reference derivative
            dy: measured derivative
            dt: control period [s]

        Returns:
            float: command u
        """
        e = r - y
        de = dr - dy
        self.integral += e * dt

        ff = (self.model.T1 * dr + r) / self.model.K
        fb = self.gain.kp * e + self.gain.ki * self.integral + self.gain.kd * de
        self.last_ff = ff
        self.last_fb = fb
        logger.debug("FeedbackController: r=%.3f y=%.3f ff=%.3f fb=%.3f", r, y, ff, fb)
        return ff + fb

    def compute(self, state, reference, dt=0.001):
        """
        Args:
            state: dict containing at least {"v", "a"}
            reference: dict containing at least {"v", "a"}
            dt: sampling period [s]

        Returns:
            dict: {"u"}
        """
        u = self.update(reference["v"], state["v"], reference["a"], state["a"], dt)
        return {"u": u}
