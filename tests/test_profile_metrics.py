import numpy as np
import pytest

from analysis import compute_profile_metrics, compute_tracking_metrics
from simulation.results import TrackingResult
from trajectories import TrajectoryPlanner


def sample_with_end(planner, t_interval=0.001):
    time_array = np.append(planner.time_grid(t_interval), planner.t_end())
    return planner.sample_array(time_array)


def test_profile_within_limits():
    planner = TrajectoryPlanner(3600.0, 0.0, 720.0, 0.0, 1000.0, j_max=400000.0)
    m = compute_profile_metrics(sample_with_end(planner), j_max=400000.0, a_max=3600.0)

    assert m["duration"] == pytest.approx(planner.t_end() - planner.t_start())
    assert m["distance"] == pytest.approx(1000.0, abs=0.1)
    assert m["peak_velocity"] == pytest.approx(720.0)
    assert m["min_velocity"] == pytest.approx(0.0, abs=1e-9)
    assert m["jerk_within_limit"]
    assert m["acceleration_within_limit"]


def test_limit_flags_detect_violation():
    planner = TrajectoryPlanner(3600.0, 0.0, 720.0, 0.0, 1000.0)
    m = compute_profile_metrics(sample_with_end(planner), j_max=1000.0, a_max=100.0)
    assert not m["jerk_within_limit"]
    assert not m["acceleration_within_limit"]


def test_flags_only_when_limits_given():
    planner = TrajectoryPlanner(3600.0, 0.0, 720.0, 0.0, 100.0)
    m = compute_profile_metrics(sample_with_end(planner))
    assert "jerk_within_limit" not in m
    assert "acceleration_within_limit" not in m


@pytest.mark.parametrize("samples", [
    np.zeros((0, 5)),
    np.zeros((10, 4)),
    np.zeros(5),
])
def test_bad_samples(samples):
    with pytest.raises(ValueError):
        compute_profile_metrics(samples)


def test_tracking_metrics():
    time = np.arange(4) * 0.1
    reference = np.zeros((4, 5))
    reference[:, 3] = [0.0, 1.0, 2.0, 3.0]
    reference[:, 4] = [0.0, 0.0, 0.1, 0.3]
    x = np.zeros((4, 2))
    x[:, 1] = [0.0, 1.0, 1.0, 3.0]
    x[:, 0] = [0.0, 0.0, 0.1, 0.5]
    result = TrackingResult(time=time, reference=reference, x=x, u=np.zeros(4))

    m = compute_tracking_metrics(result)
    assert m["velocity_max"] == pytest.approx(1.0)
    assert m["velocity_rms"] == pytest.approx(0.5)
    assert m["position_max"] == pytest.approx(0.2)
    assert m["position_final"] == pytest.approx(-0.2)


if __name__ == "__main__":
    pytest.main([__file__])
