import numpy as np
import streamlit as st

from analysis import compute_tracking_metrics
from config import load_config
from controllers import FeedbackController, FeedbackGain
from models import AxisModelParams, FirstOrderAxisModel
from simulation import ClosedLoopRunner
from streamlit_app.plots.profile_plot import plot_tracking
from trajectories import TrajectoryPlanner

st.title("Closed Loop: profile tracking")

if "planner_params" not in st.session_state:
    st.warning("Please design a profile first on the main page.")
else:
    params = st.session_state["planner_params"]
    config = load_config()
    cc = config.controller

    st.subheader("Plant model K / (T1 s + 1)")
    K = st.number_input("K", value=cc.K)
    T1 = st.number_input("T1 [s]", min_value=1e-4, value=cc.T1, format="%.4f")
    mismatch = st.slider("Real plant gain / model gain", 0.5, 1.5, 1.0, step=0.05)

    st.subheader("Feedback gains")
    kp = st.number_input("kp", value=cc.kp)
    ki = st.number_input("ki", value=cc.ki)
    kd = st.number_input("kd", value=cc.kd)

    dt = st.number_input("Control period [s]", min_value=1e-4, value=config.simulation.dt, format="%.4f")
    method = st.selectbox("Integrator", ["euler", "rk4"],
                          index=0 if config.simulation.method == "euler" else 1)

    planner = TrajectoryPlanner(**params)
    plant = FirstOrderAxisModel(AxisModelParams(K=K * mismatch, T1=T1))
    controller = FeedbackController(AxisModelParams(K=K, T1=T1), FeedbackGain(kp=kp, ki=ki, kd=kd))
    runner = ClosedLoopRunner(plant, controller, planner)

    t_end = planner.t_end() + 0.2
    time_array = np.arange(planner.t_start(), t_end, dt)
    if len(time_array) < 2:
        st.warning("Profile too short for this control period.")
    else:
        x0 = np.array([planner.x(time_array[0]), planner.v(time_array[0])])
        result = runner.run(x0, time_array, method=method)

        metrics = compute_tracking_metrics(result)
        col1, col2, col3 = st.columns(3)
        col1.metric("Velocity RMS error [mm/s]", f"{metrics['velocity_rms']:.3f}")
        col2.metric("Max position error [mm]", f"{metrics['position_max']:.3f}")
        col3.metric("Final position error [mm]", f"{metrics['position_final']:.3f}")

        st.plotly_chart(
            plot_tracking(result.time, result.reference[:, 3], result.x[:, 1], result.position_error),
            use_container_width=True,
        )
