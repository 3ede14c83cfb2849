# profile_plot.py

import plotly.graph_objects as go
from plotly.subplots import make_subplots
import pandas as pd

LABELS = {
    "j": "Jerk [mm/s³]",
    "a": "Acceleration [mm/s²]",
    "v": "Velocity [mm/s]",
    "x": "Position [mm]",
}


def plot_profile(df: pd.DataFrame, boundaries=None):
    """Plot j, a, v, x over time, one row each, with optional phase boundaries."""
    fig = make_subplots(rows=4, cols=1, shared_xaxes=True,
                        subplot_titles=list(LABELS.values()))
    for row, key in enumerate(LABELS, start=1):
        fig.add_trace(go.Scatter(x=df["t"], y=df[key], name=key), row=row, col=1)
        for tb in boundaries or []:
            fig.add_vline(x=tb, line=dict(dash="dot", color="gray"), row=row, col=1)

    fig.update_layout(
        height=900,
        showlegend=False,
        template="plotly_white"
    )
    fig.update_xaxes(title_text="Time [s]", row=4, col=1)
    return fig


def plot_tracking(time_array, v_ref, v_meas, x_err):
    """Reference vs measured velocity, and position error."""
    fig = make_subplots(rows=2, cols=1, shared_xaxes=True,
                        subplot_titles=["Velocity [mm/s]", "Position error [mm]"])
    fig.add_trace(go.Scatter(x=time_array, y=v_ref, name="Reference", line=dict(dash="dash")), row=1, col=1)
    fig.add_trace(go.Scatter(x=time_array, y=v_meas, name="Axis"), row=1, col=1)
    fig.add_trace(go.Scatter(x=time_array, y=x_err, name="x_ref - x"), row=2, col=1)
    fig.update_layout(
        height=600,
        legend=dict(x=0, y=1.1, orientation="h"),
        template="plotly_white"
    )
    fig.update_xaxes(title_text="Time [s]", row=2, col=1)
    return fig
