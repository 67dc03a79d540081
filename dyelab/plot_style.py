# plot_style.py
"""
DyeLab Predictor - Plot Styling
===============================

Consistent styling for the response-curve and contribution charts.

Usage:
    from dyelab.plot_style import create_response_curve_plot, COLORS

    fig = create_response_curve_plot(curve_df, "time", current_x=90, current_y=99.0)
"""

from typing import Any

import numpy as np
import pandas as pd
import plotly.graph_objects as go

from .config import (
    DIMENSION_LABELS,
    DIMENSION_UNITS,
    EFFICIENCY_MAX,
    EFFICIENCY_MIN,
    FONT_FAMILY,
    NOMINAL_RANGES,
    PLOT_TEMPLATE,
)

__all__ = [
    # Color schemes
    "COLORS",
    "DIMENSION_COLORS",
    # Style dictionaries
    "MARKERS",
    "AXIS_STYLE",
    # Color utilities
    "hex_to_rgba",
    # Plot creation functions
    "create_response_curve_plot",
    "create_contribution_plot",
    # Styling functions
    "apply_professional_style",
]

COLORS = {
    "operating_point": "#000000",
    "operating_point_edge": "#000000",
    "nominal_band": "#2E86AB",
    "clamp_line": "#757575",
    "background": "#FFFFFF",
    "grid": "#E0E0E0",
    "tick_text": "#424242",
    "positive": "#2ca02c",
    "negative": "#d62728",
    "intercept": "#9467bd",
}

DIMENSION_COLORS = {
    "time": "#1f77b4",
    "dose": "#ff7f0e",
    "concentration": "#2ca02c",
}

MARKERS = {
    "operating_point": {
        "size": 12,
        "color": COLORS["operating_point"],
        "line": {"width": 1.5, "color": COLORS["operating_point_edge"]},
        "symbol": "circle",
    },
}

AXIS_STYLE = {
    "showgrid": False,
    "gridwidth": 1,
    "gridcolor": COLORS["grid"],
    "showline": True,
    "linewidth": 2,
    "linecolor": "black",
    "zeroline": False,
    "mirror": True,
    "ticks": "outside",
    "tickfont": {"size": 11, "family": FONT_FAMILY, "color": COLORS["tick_text"]},
}


def hex_to_rgba(hex_color: str, alpha: float = 1.0) -> str:
    """
    Convert hex color to rgba format for Plotly compatibility.

    Args:
        hex_color: Hex color string (e.g., '#2E86AB')
        alpha: Alpha/opacity value from 0.0 to 1.0

    Returns:
        RGBA string (e.g., 'rgba(46, 134, 171, 0.25)')
    """
    hex_color = hex_color.lstrip("#")
    r = int(hex_color[0:2], 16)
    g = int(hex_color[2:4], 16)
    b = int(hex_color[4:6], 16)
    return f"rgba({r}, {g}, {b}, {alpha})"


def apply_professional_style(
    fig: go.Figure,
    title: str | None = None,
    x_title: str | None = None,
    y_title: str | None = None,
    height: int = 450,
    show_legend: bool = True,
    legend_position: str = "lower right",
) -> go.Figure:
    """
    Apply house styling to an existing Plotly figure.

    Parameters
    ----------
    fig : go.Figure
        Existing Plotly figure to style
    title : str, optional
        Override title
    x_title : str, optional
        Override x-axis title
    y_title : str, optional
        Override y-axis title
    height : int
        Figure height in pixels
    show_legend : bool
        Whether to show legend
    legend_position : str
        Legend position: 'upper left', 'upper right', 'lower left', 'lower right'

    Returns
    -------
    go.Figure
        Styled figure
    """
    position_map = {
        "upper left": (0.02, 0.98, "left", "top"),
        "upper right": (0.98, 0.98, "right", "top"),
        "lower left": (0.02, 0.02, "left", "bottom"),
        "lower right": (0.98, 0.02, "right", "bottom"),
    }
    x, y, xanchor, yanchor = position_map.get(legend_position, (0.98, 0.02, "right", "bottom"))

    layout_update: dict[str, Any] = {
        "height": height,
        "showlegend": show_legend,
        "plot_bgcolor": "white",
        "paper_bgcolor": "white",
        "font": {"family": FONT_FAMILY, "size": 12},
        "margin": {"l": 70, "r": 40, "t": 60, "b": 60},
        "xaxis": AXIS_STYLE.copy(),
        "yaxis": AXIS_STYLE.copy(),
        "legend": {
            "x": x,
            "y": y,
            "xanchor": xanchor,
            "yanchor": yanchor,
            "bgcolor": "rgba(255, 255, 255, 0.9)",
            "bordercolor": "black",
            "borderwidth": 1,
            "font": {"size": 11, "family": FONT_FAMILY},
        },
    }

    if title:
        layout_update["title"] = {
            "text": f"<b>{title}</b>",
            "font": {"size": 16, "family": FONT_FAMILY},
        }

    if x_title:
        layout_update["xaxis"]["title"] = {
            "text": x_title,
            "font": {"size": 14, "family": FONT_FAMILY},
        }

    if y_title:
        layout_update["yaxis"]["title"] = {
            "text": y_title,
            "font": {"size": 14, "family": FONT_FAMILY},
        }

    fig.update_layout(template=PLOT_TEMPLATE, **layout_update)

    for tr in fig.data:
        if getattr(tr, "type", "") == "bar":
            tr.update(marker_line_color="#000000", marker_line_width=1.0, cliponaxis=False)

    return fig


def create_response_curve_plot(
    curve: pd.DataFrame,
    dimension: str,
    current_x: float | None = None,
    current_y: float | None = None,
    height: int = 400,
) -> go.Figure:
    """
    Predicted removal against one swept input.

    Parameters
    ----------
    curve : pd.DataFrame
        Output of ``utils.response_curve`` (columns: dimension, ``removal_%``)
    dimension : str
        Swept dimension
    current_x, current_y : float, optional
        Current operating point, marked when both are finite
    height : int
        Figure height in pixels

    Returns
    -------
    go.Figure
    """
    label = DIMENSION_LABELS[dimension]
    unit = DIMENSION_UNITS[dimension]
    color = DIMENSION_COLORS.get(dimension, COLORS["nominal_band"])

    x = np.asarray(curve[dimension], dtype=float)
    y = np.asarray(curve["removal_%"], dtype=float)
    msk = np.isfinite(x) & np.isfinite(y)

    fig = go.Figure()

    lo, hi = NOMINAL_RANGES[dimension]
    fig.add_vrect(
        x0=lo,
        x1=hi,
        fillcolor=hex_to_rgba(COLORS["nominal_band"], 0.08),
        line_width=0,
        layer="below",
    )

    fig.add_trace(
        go.Scatter(
            x=x[msk],
            y=y[msk],
            mode="lines",
            name="Model",
            line={"color": color, "width": 2.5},
            hovertemplate=f"{label}: %{{x:.3g}} {unit}<br>Removal: %{{y:.1f}}%<extra></extra>",
        )
    )

    for level in (EFFICIENCY_MIN, EFFICIENCY_MAX):
        fig.add_hline(
            y=level, line={"color": COLORS["clamp_line"], "width": 1, "dash": "dot"}
        )

    if (
        current_x is not None
        and current_y is not None
        and np.isfinite(current_x)
        and np.isfinite(current_y)
    ):
        fig.add_trace(
            go.Scatter(
                x=[current_x],
                y=[current_y],
                mode="markers",
                name="Current conditions",
                marker=MARKERS["operating_point"],
                hovertemplate=f"{label}: %{{x:.3g}} {unit}<br>Removal: %{{y:.1f}}%<extra></extra>",
            )
        )

    fig = apply_professional_style(
        fig,
        title=f"Effect of {label.lower()}",
        x_title=f"{label} ({unit})",
        y_title="Removal (%)",
        height=height,
    )
    fig.update_yaxes(range=[EFFICIENCY_MIN - 5, EFFICIENCY_MAX + 5])
    return fig


def create_contribution_plot(contributions: dict[str, float], height: int = 400) -> go.Figure:
    """
    Bar chart of the model terms for the current inputs (before clamping).

    Parameters
    ----------
    contributions : dict
        Output of ``models.term_contributions``
    height : int
        Figure height in pixels
    """
    names = list(contributions.keys())
    values = [float(contributions[n]) for n in names]

    colors = []
    for name, value in zip(names, values):
        if name == "intercept":
            colors.append(COLORS["intercept"])
        elif name in DIMENSION_COLORS:
            colors.append(DIMENSION_COLORS[name])
        else:
            colors.append(COLORS["positive"] if value >= 0 else COLORS["negative"])

    labels = [DIMENSION_LABELS.get(n, n.replace("_", " ").capitalize()) for n in names]

    fig = go.Figure(
        go.Bar(
            x=labels,
            y=values,
            marker_color=colors,
            text=[f"{v:+.2f}" for v in values],
            textposition="outside",
            hovertemplate="%{x}: %{y:.2f} %<extra></extra>",
        )
    )
    fig = apply_professional_style(
        fig,
        title="Model term contributions",
        y_title="Contribution (% removal)",
        height=height,
        show_legend=False,
    )
    return fig
