"""
ReefHeat - Exceedance Chart

Grouped bar chart of the estimated SST for each accumulation window,
one group per region, with the MMM and bleaching threshold marked.
"""

import numpy as np
import plotly.graph_objects as go
from config.constants import MATRIX_WINDOWS, MMM_THRESHOLDS, REGION_NAMES, REGION_ORDER

WINDOW_COLORS = {12: "#f4d35e", 8: "#ee964b", 4: "#e74c3c"}


def build_exceedance_chart(exceedance_matrix: np.ndarray) -> go.Figure:
    """
    Parameters
    ----------
    exceedance_matrix : ndarray (4, 3), columns [12, 8, 4] weeks

    Returns
    -------
    plotly.graph_objects.Figure
    """
    matrix = np.asarray(exceedance_matrix, dtype=float)
    labels = [REGION_NAMES[k] for k in REGION_ORDER]

    fig = go.Figure()
    for j, weeks in enumerate(MATRIX_WINDOWS):
        values = matrix[:, j]
        fig.add_trace(go.Bar(
            x=labels,
            y=values,
            name=f"{weeks} weeks",
            marker=dict(color=WINDOW_COLORS[weeks], line=dict(color="white", width=1)),
            text=[f"{v:.1f}" for v in values],
            textposition="outside",
            hovertemplate=f"<b>%{{x}}</b> · {weeks} weeks: %{{y:.2f}}°C<extra></extra>",
        ))

    mmm = [MMM_THRESHOLDS[k] for k in REGION_ORDER]
    fig.add_trace(go.Scatter(
        x=labels, y=mmm,
        mode="markers+lines",
        name="MMM",
        line=dict(color="#333", dash="dot", width=1),
        marker=dict(symbol="line-ew-open", size=24),
        hovertemplate="<b>%{x}</b> MMM: %{y:.2f}°C<extra></extra>",
    ))
    fig.add_trace(go.Scatter(
        x=labels, y=[v + 1.0 for v in mmm],
        mode="markers+lines",
        name="Bleaching threshold",
        line=dict(color="#1e6bb8", dash="dash", width=1),
        marker=dict(symbol="line-ew-open", size=24),
        hovertemplate="<b>%{x}</b> threshold: %{y:.2f}°C<extra></extra>",
    ))

    low = min(min(mmm), float(matrix.min())) - 0.5
    high = max(max(mmm) + 1.0, float(matrix.max())) + 0.8
    fig.update_layout(
        barmode="group",
        yaxis=dict(range=[low, high], title="SST (°C)", gridcolor="#f0f0f0"),
        xaxis=dict(title=""),
        height=320,
        margin=dict(l=10, r=10, t=15, b=30),
        paper_bgcolor="white",
        plot_bgcolor="white",
        font=dict(family="Inter, sans-serif", size=12),
        legend=dict(orientation="h", y=-0.15),
    )
    return fig
