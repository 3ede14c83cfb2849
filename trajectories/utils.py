import csv
from typing import TextIO

import numpy as np
import pandas as pd

from .base import BaseTrajectory

COLUMNS = ["t", "j", "a", "v", "x"]


def write_samples_csv(trajectory: BaseTrajectory, stream: TextIO,
                      t_interval: float = 0.001, header: bool = False) -> int:
    """
    Dump a profile as comma-separated `t,j,a,v,x` lines, one per sample,
    from t_start up to (excluding) t_end.

    Returns:
        int: number of sample lines written.
    """
    samples = trajectory.sample_array(trajectory.time_grid(t_interval))
    w = csv.writer(stream, lineterminator="\n")
    if header:
        w.writerow(COLUMNS)
    w.writerows(samples.tolist())
    return samples.shape[0]


def write_csv(trajectory: BaseTrajectory, path, t_interval: float = 0.001,
              header: bool = True) -> int:
    with open(path, "w", newline="", encoding="utf-8") as f:
        return write_samples_csv(trajectory, f, t_interval, header=header)


def to_dataframe(trajectory: BaseTrajectory, t_interval: float = 0.001,
                 include_end: bool = True) -> pd.DataFrame:
    """
    Sampled profile as a DataFrame with columns t, j, a, v, x.

    `include_end` appends the terminal sample at t_end, which the CSV dump
    leaves out.
    """
    time_array = trajectory.time_grid(t_interval)
    if include_end:
        time_array = np.append(time_array, trajectory.t_end())
    return pd.DataFrame(trajectory.sample_array(time_array), columns=COLUMNS)
