import logging

import streamlit as st

from config import load_config
from trajectories import TrajectoryPlanner, to_dataframe
from streamlit_app.plots.profile_plot import plot_profile
from streamlit_app.ui.constraints_ui import constraints_ui

logging.basicConfig(level=logging.INFO)

st.set_page_config(page_title="Accel Designer", layout="wide")
st.title("Accel Designer")
st.markdown("""
Jerk-limited velocity profile satisfying a travel-distance constraint.

**Navigation**:
- 👉 Set limits and boundary conditions in the sidebar.
- ⚙️ Track the profile with a feedback controller on the Closed Loop page.
""")

config = load_config()

with st.sidebar:
    params = constraints_ui(config.profile)

diagnostics = []
planner = TrajectoryPlanner(**params, on_diagnostic=diagnostics.append)
st.session_state["planner_params"] = params

for d in diagnostics:
    st.warning(str(d))

col1, col2, col3, col4 = st.columns(4)
col1.metric("Duration [s]", f"{planner.t_end() - planner.t_start():.4f}")
col2.metric("Peak velocity [mm/s]", f"{planner.v_max:.1f}")
col3.metric("End velocity [mm/s]", f"{planner.v_end():.1f}")
col4.metric("End position [mm]", f"{planner.x_end():.2f}")

df = to_dataframe(planner, config.profile.t_interval)
st.plotly_chart(plot_profile(df, [planner.t0, planner.t1, planner.t2, planner.t3]),
                use_container_width=True)

st.download_button("Download CSV", df.to_csv(index=False), file_name="profile.csv")
