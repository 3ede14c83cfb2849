import streamlit as st

from config import ProfileConfig


def constraints_ui(defaults: ProfileConfig) -> dict:
    """
    Generate Streamlit UI elements to gather the profile constraints.

    Parameters:
        defaults (ProfileConfig): Values shown initially.

    Returns:
        dict: keyword arguments for `TrajectoryPlanner.reset`
            (a_max, v_start, v_sat, v_target, distance, x_start, t_start, j_max)
    """
    st.subheader("Limits")
    j_max = st.number_input("Max jerk j_max [mm/s³]", min_value=1.0, value=float(defaults.j_max), step=10000.0)
    a_max = st.number_input("Max acceleration a_max [mm/s²]", min_value=1.0, value=float(defaults.a_max), step=100.0)

    st.subheader("Boundary conditions")
    v_start = st.number_input("Start velocity v_start [mm/s]", value=0.0)
    v_sat = st.number_input("Saturation velocity v_sat [mm/s]", value=float(defaults.v_sat))
    v_target = st.number_input("Target velocity v_target [mm/s]", value=0.0)
    distance = st.number_input("Distance [mm]", value=180.0)
    x_start = st.number_input("Start position x_start [mm]", value=0.0)
    t_start = st.number_input("Start time t_start [s]", value=0.0)

    return dict(
        a_max=a_max, v_start=v_start, v_sat=v_sat, v_target=v_target,
        distance=distance, x_start=x_start, t_start=t_start, j_max=j_max,
    )
