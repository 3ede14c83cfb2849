import matplotlib.pyplot as plt

from .utils import to_dataframe

LABELS = {
    "j": "jerk [mm/s³]",
    "a": "acceleration [mm/s²]",
    "v": "velocity [mm/s]",
    "x": "position [mm]",
}


def plot_profile(trajectory, t_interval=0.001, label="Profile", axes=None):
    """Plot j, a, v and x against time on four stacked axes."""
    df = to_dataframe(trajectory, t_interval)
    if axes is None:
        _, axes = plt.subplots(4, 1, sharex=True, figsize=(8, 10))
    for ax, key in zip(axes, LABELS):
        ax.plot(df["t"], df[key], label=label)
        ax.set_ylabel(LABELS[key])
        ax.grid(True)
    axes[-1].set_xlabel("t [s]")
    axes[0].legend()
    return axes
