import io
import logging

import numpy as np
import pytest

from trajectories import CurveSegment, DiagnosticKind, TrajectoryPlanner

logging.basicConfig(level=logging.DEBUG)

A_MAX = 3600.0


@pytest.fixture
def decel_planner():
    """Decelerate from 720 mm/s to standstill over 90 mm."""
    return TrajectoryPlanner(A_MAX, 720.0, 720.0, 0.0, 90.0)


def test_decelerate_to_stop(decel_planner):
    p = decel_planner
    assert p.ok
    assert p.v_max == 720.0
    # already at peak velocity: no acceleration part
    assert p.ac.t_end() == 0.0
    assert p.t1 == p.t0
    assert p.t2 > p.t1
    assert p.v(p.t_start()) == 720.0
    assert p.a(p.t_start()) == 0.0
    assert p.v(p.t_end()) == pytest.approx(0.0, abs=1e-9)
    assert p.x(p.t_end()) == pytest.approx(90.0, abs=1e-6)
    # cruise at 720 then the deceleration covers the rest
    t_cruise = (90.0 - CurveSegment.calc_min_distance(A_MAX, 720.0, 0.0)) / 720.0
    assert p.t2 - p.t1 == pytest.approx(t_cruise)


def test_symmetric_move_with_cruise():
    p = TrajectoryPlanner(A_MAX, 0.0, 720.0, 0.0, 1000.0)
    assert p.ok
    assert p.t0 < p.t1 < p.t2 < p.t3
    assert p.v(0.5 * (p.t1 + p.t2)) == pytest.approx(720.0)
    assert p.a(0.5 * (p.t1 + p.t2)) == 0.0
    assert p.t1 - p.t0 == pytest.approx(p.t3 - p.t2)
    assert p.x_end() == 1000.0
    assert p.v_end() == 0.0


@pytest.mark.parametrize("v_start, v_sat, v_target, distance", [
    (0.0, 720.0, 0.0, 1000.0),
    (0.0, 720.0, 720.0, 500.0),
    (100.0, 720.0, 300.0, 200.0),
    (720.0, 720.0, 0.0, 90.0),
    (0.0, 720.0, 0.0, 20.0),     # peak velocity limited by distance
    (0.0, 720.0, 0.0, 0.1),      # very short move
])
def test_profile_properties(v_start, v_sat, v_target, distance):
    p = TrajectoryPlanner(A_MAX, v_start, v_sat, v_target, distance, x_start=5.0, t_start=2.0)
    assert p.ok
    assert p.t0 <= p.t1 <= p.t2 + 1e-12 <= p.t3 + 2e-12
    assert p.v(p.t0) == v_start
    assert p.x(p.t0) == 5.0
    assert p.x(p.t3) - p.x(p.t0) == pytest.approx(distance, abs=0.1)
    assert p.v_max <= max(v_sat, v_start, v_target) + 1e-9

    # position and velocity are continuous where the two segments meet
    eps = 1e-9
    assert p.x(p.t2 - eps) == pytest.approx(p.x(p.t2), abs=1e-5)
    assert p.v(p.t2 - eps) == pytest.approx(p.v(p.t2), abs=1e-3)

    # limits are honoured everywhere
    for t in np.linspace(p.t0, p.t3, 200):
        assert abs(p.a(t)) <= A_MAX * (1.0 + 1e-9)
        assert abs(p.j(t)) <= p.j_max


def test_peak_velocity_limited_by_distance():
    p = TrajectoryPlanner(A_MAX, 0.0, 720.0, 0.0, 20.0)
    assert p.v_max < 720.0
    assert p.t2 - p.t1 == pytest.approx(0.0, abs=1e-9)
    d = CurveSegment.calc_min_distance(A_MAX, 0.0, p.v_max) * 2.0
    assert d == pytest.approx(20.0, rel=1e-9)


@pytest.mark.parametrize("v_start, v_target", [
    (0.0, 720.0),   # cannot reach 720 within 50 mm
    (720.0, 0.0),   # cannot stop within 50 mm
])
def test_end_velocity_limited_by_distance(v_start, v_target):
    p = TrajectoryPlanner(A_MAX, v_start, 720.0, v_target, 50.0)
    assert p.v_end() != v_target
    assert min(v_start, v_target) < p.v_end() < max(v_start, v_target)
    assert CurveSegment.calc_min_distance(A_MAX, v_start, p.v_end()) == pytest.approx(50.0, rel=1e-6)
    assert p.x(p.t_end()) == pytest.approx(50.0, abs=0.1)


def test_custom_jerk_limit():
    slow = TrajectoryPlanner(A_MAX, 0.0, 720.0, 0.0, 1000.0, j_max=50000.0)
    fast = TrajectoryPlanner(A_MAX, 0.0, 720.0, 0.0, 1000.0)
    assert slow.j_max == 50000.0
    assert slow.ac.t1 == pytest.approx(A_MAX / 50000.0)
    assert slow.t_end() > fast.t_end()


@pytest.mark.parametrize("distance", [0.0, -5.0])
def test_invalid_distance(distance, caplog):
    received = []
    with caplog.at_level(logging.WARNING):
        p = TrajectoryPlanner(A_MAX, 300.0, 720.0, 0.0, distance,
                              x_start=10.0, t_start=1.5, on_diagnostic=received.append)
    assert not p.ok
    assert [d.kind for d in p.diagnostics] == [DiagnosticKind.INVALID_DISTANCE]
    assert received == p.diagnostics
    assert "invalid_distance" in caplog.text

    # degenerate but fully defined profile
    assert p.t_end() == p.t_start() == 1.5
    assert p.x_end() == 10.0
    assert p.v_end() == 300.0
    assert p.v(1.5) == 300.0
    assert p.v(3.0) == 300.0


def test_zero_peak_velocity_cannot_cover_distance():
    p = TrajectoryPlanner(A_MAX, 0.0, 0.0, 0.0, 10.0)
    assert [d.kind for d in p.diagnostics] == [DiagnosticKind.CONSTRAINT_VIOLATION]
    assert p.diagnostics[0].state["remaining"] == pytest.approx(10.0)
    assert p.t_end() == p.t_start()


def test_unordered_time_points_reported():
    # peak velocity below both boundary velocities forces a negative cruise
    p = TrajectoryPlanner(A_MAX, -720.0, -100.0, -720.0, 100.0)
    kinds = [d.kind for d in p.diagnostics]
    assert DiagnosticKind.CONSTRAINT_VIOLATION in kinds
    ordering = [d for d in p.diagnostics if d.message == "time points not ordered"]
    assert len(ordering) == 1
    for key in ("t0", "t1", "t2", "t3", "x0", "x3", "v_max"):
        assert key in ordering[0].state
    # still queryable
    assert np.isfinite(p.v(p.t_start() + 0.01))


def test_reset_is_idempotent():
    p = TrajectoryPlanner(A_MAX, 0.0, 720.0, 0.0, 1000.0)
    p.reset(A_MAX, 0.0, 720.0, 0.0, -1.0)
    assert not p.ok
    p.reset(A_MAX, 100.0, 720.0, 300.0, 200.0, 1.0, 0.5)
    fresh = TrajectoryPlanner(A_MAX, 100.0, 720.0, 300.0, 200.0, 1.0, 0.5)

    assert p.ok
    for name in ("t0", "t1", "t2", "t3", "x0", "x3", "v_max", "a_max", "j_max"):
        assert getattr(p, name) == getattr(fresh, name)
    assert vars(p.ac) == vars(fresh.ac)
    assert vars(p.dc) == vars(fresh.dc)


def test_empty_planner():
    p = TrajectoryPlanner()
    assert p.t_start() == p.t_end() == 0.0
    assert len(p.time_grid(0.001)) == 0


def test_print_csv(decel_planner):
    buf = io.StringIO()
    decel_planner.print_csv(buf, 0.001)
    lines = buf.getvalue().splitlines()

    grid = decel_planner.time_grid(0.001)
    assert len(lines) == len(grid)
    first = [float(v) for v in lines[0].split(",")]
    assert len(first) == 5
    assert first[0] == 0.0
    assert first[3] == 720.0
    last_t = float(lines[-1].split(",")[0])
    assert last_t < decel_planner.t_end()


def test_print_csv_default_stream(decel_planner, capsys):
    decel_planner.print_csv()
    out = capsys.readouterr().out
    assert out.startswith("0.0,")


def test_str(decel_planner):
    s = str(decel_planner)
    assert s.startswith("TrajectoryPlanner")
    assert "d: 90" in s
    assert "vs: 720" in s
    assert "ve: 0" in s


if __name__ == "__main__":
    pytest.main([__file__])
