# solar_forecast/dashboard/forecast_panel.py

import streamlit as st
import pandas as pd
import numpy as np
import plotly.graph_objects as go
from typing import Optional

from solar_forecast.dashboard.utils import (
    get_ui_logger,
    CHART_FILL_COLOR,
    CHART_HEIGHT,
    CHART_LINE_COLOR,
)

logger = get_ui_logger(__name__)


# -------------------------------
# Chart series
# -------------------------------
def generate_chart_series(
    points: int = 24,
    scale: float = 10.0,
    rng: Optional[np.random.Generator] = None,
) -> pd.DataFrame:
    """
    Draw an hourly curve of independent uniform values.

    The series is not derived from the trained network or the sliders.

    Args:
        points (int): Number of hourly points (labelled 0..points-1).
        scale (float): Values fall in [0, scale).
        rng (Optional[np.random.Generator]): Random source; a fresh unseeded one by default.

    Returns:
        pd.DataFrame: Columns 'hour' and 'production_kw'.
    """
    if points < 1:
        raise ValueError(f"points must be positive, got {points}")

    rng = rng or np.random.default_rng()
    values = rng.random(points) * scale
    return pd.DataFrame({"hour": np.arange(points), "production_kw": values})


# -------------------------------
# Forecast Panel Class
# -------------------------------
class ForecastPanel:
    """
    Displays the 24-hour production curve.
    """

    def __init__(self, points: int = 24, scale: float = 10.0, unit: str = "kW"):
        self.points: int = points
        self.scale: float = scale
        self.unit: str = unit
        self.series: Optional[pd.DataFrame] = None

    def simulate_forecast(self) -> pd.DataFrame:
        """
        Regenerate the series. Called on every render.
        """
        self.series = generate_chart_series(self.points, self.scale)
        logger.info(f"Simulated {self.points}-point forecast curve")
        return self.series

    def build_figure(self) -> go.Figure:
        """
        Build the line chart for the current series.
        """
        if self.series is None:
            raise ValueError("No forecast series to plot; call simulate_forecast() first.")

        fig = go.Figure()
        fig.add_trace(go.Scatter(
            x=self.series["hour"],
            y=self.series["production_kw"],
            mode="lines+markers",
            name=f"Predicted Production ({self.unit})",
            line=dict(color=CHART_LINE_COLOR),
            marker=dict(color=CHART_FILL_COLOR),
        ))

        fig.update_layout(
            xaxis_title="Hour",
            yaxis_title=f"Production ({self.unit})",
            template="plotly_white",
            height=CHART_HEIGHT,
            legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="center", x=0.5),
        )
        return fig

    def render_forecast(self) -> None:
        """
        Main method to render forecast panel.
        """
        st.subheader("24-Hour Forecast")
        self.simulate_forecast()
        st.plotly_chart(self.build_figure(), use_container_width=True)
