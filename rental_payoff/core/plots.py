from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

import plotly.graph_objects as go

from .scenarios import Scenario
from .simulator import Trajectory
from .utils import rgba


CHART_TITLE = "Loan Amount vs Rental Income Over Time"
ZERO_LINE_COLOR = "rgba(0, 0, 0, 0.32)"
GRID_COLOR = "#e0e0e0"


def balance_curves(
    scenarios: Sequence[Scenario],
    trajectories: Mapping[str, Trajectory],
    y_range: Optional[Tuple[float, float]] = None,
    title: str = CHART_TITLE,
) -> go.Figure:
    """Plot one loan-balance line per scenario against the year.

    trajectories: mapping scenario id -> Trajectory, all on the same horizon.
    y_range: fixed (min, max) for the y axis; autoscaled when None.
    """
    fig = go.Figure()
    for scenario in scenarios:
        trajectory = trajectories.get(scenario.id)
        if trajectory is None:
            continue
        fig.add_trace(
            go.Scatter(
                x=list(trajectory.years),
                y=list(trajectory.balances),
                mode="lines+markers",
                name=scenario.name,
                line=dict(color=scenario.color),
                marker=dict(color=rgba(scenario.color, 0.2), line=dict(color=scenario.color, width=1)),
            )
        )

    fig.update_layout(
        title=title,
        xaxis_title="Year",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5),
        plot_bgcolor="white",
    )
    fig.update_xaxes(type="category", gridcolor=GRID_COLOR)
    # Emphasise y=0, where the loan is paid off
    fig.update_yaxes(
        tickformat=",.0f",
        gridcolor=GRID_COLOR,
        zeroline=True,
        zerolinecolor=ZERO_LINE_COLOR,
        zerolinewidth=3,
    )
    if y_range is None:
        fig.update_yaxes(rangemode="tozero")
    else:
        fig.update_yaxes(range=list(y_range))
    return fig
