# examples/example_accel_designer.py
#
# Plans a few profiles back to back (each one starts where the previous one
# ended) and dumps them to a CSV file, one `t,j,a,v,x` line per millisecond.

import logging

import matplotlib.pyplot as plt

from config import load_config
from trajectories import TrajectoryPlanner
from trajectories.preview import plot_profile

logging.basicConfig(level=logging.INFO)

config = load_config()
j_max = config.profile.j_max
a_max = config.profile.a_max
v_sat = config.profile.v_sat

# (v_target, distance) of each move
moves = [
    (720.0, 90.0),
    (720.0, 270.0),
    (0.0, 90.0),
]

planner = TrajectoryPlanner(a_max, 720.0, 720.0, 0.0, 90.0, j_max=j_max)
print(planner)

axes = None
with open("main.csv", "w", encoding="utf-8") as of:
    planner.print_csv(of, config.profile.t_interval)
    axes = plot_profile(planner, label="decelerate 720 -> 0")

    for v_target, distance in moves:
        planner = TrajectoryPlanner(
            a_max, planner.v_end(), v_sat, v_target, distance,
            planner.x_end(), planner.t_end(), j_max=j_max,
        )
        planner.print_csv(of, config.profile.t_interval)
        print(planner)
        axes = plot_profile(planner, label=f"-> {v_target:g} over {distance:g} mm", axes=axes)

plt.tight_layout()
plt.show()
