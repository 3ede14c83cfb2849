# examples/trajectory_closed_loop.py

import logging

import numpy as np
import matplotlib.pyplot as plt

from analysis import compute_tracking_metrics
from config import load_config
from controllers import FeedbackController, FeedbackGain
from models import AxisModelParams, FirstOrderAxisModel
from simulation import ClosedLoopRunner
from trajectories import TrajectoryPlanner

logging.basicConfig(level=logging.INFO)

config = load_config()
cc = config.controller

# ---------------------------------------------------------
# 1) Setup plant: real gain 10% below the model used by the feedforward
# ---------------------------------------------------------
model_params = AxisModelParams(K=cc.K, T1=cc.T1)
plant = FirstOrderAxisModel(AxisModelParams(K=0.9 * cc.K, T1=cc.T1))

# ---------------------------------------------------------
# 2) Setup controller
# ---------------------------------------------------------
controller = FeedbackController(model_params, FeedbackGain(kp=cc.kp, ki=cc.ki, kd=cc.kd))

# ---------------------------------------------------------
# 3) Create reference profile: 0 -> cruise -> 0 over 1000 mm
# ---------------------------------------------------------
planner = TrajectoryPlanner(
    config.profile.a_max, 0.0, config.profile.v_sat, 0.0, 1000.0,
    j_max=config.profile.j_max,
)
print(planner)

# ---------------------------------------------------------
# 4) Closed-loop runner
# ---------------------------------------------------------
runner = ClosedLoopRunner(plant, controller, planner)

dt = config.simulation.dt
time_array = np.arange(0.0, planner.t_end() + 0.3, dt)
result = runner.run(np.zeros(2), time_array, method=config.simulation.method)

print(compute_tracking_metrics(result))

# ---------------------------------------------------------
# 5) Plot results
# ---------------------------------------------------------
plt.figure(figsize=(12, 5))

plt.subplot(1, 2, 1)
plt.plot(time_array, result.reference[:, 3], "k--", label="Reference speed")
plt.plot(time_array, result.x[:, 1], label="Axis speed")
plt.xlabel("Time [s]")
plt.ylabel("Speed [mm/s]")
plt.title("Closed-loop speed tracking")
plt.grid(True)
plt.legend()

plt.subplot(1, 2, 2)
plt.plot(time_array, result.position_error, label="x_ref - x")
plt.xlabel("Time [s]")
plt.ylabel("Position error [mm]")
plt.title("Closed-loop position error")
plt.grid(True)
plt.legend()

plt.tight_layout()
plt.show()
