# tabs/response_tab.py
"""
Response Curves Tab - DyeLab Predictor
======================================

Sweeps each operating condition across its slider range while holding the
other two at the current prediction inputs.
"""

import streamlit as st

from ..config import DIMENSION_LABELS, DIMENSIONS, RESPONSE_CURVE_POINTS
from ..plot_style import create_response_curve_plot
from ..prediction import PredictionInputs
from ..utils import get_predictor_view, response_curves


@st.cache_data
def _cached_curves(time: float, dose: float, concentration: float, n_points: int):
    return response_curves(PredictionInputs(time, dose, concentration), n_points)


def render():
    st.subheader("📈 Response Curves")

    view = get_predictor_view()
    if view is None or not view.is_valid:
        st.info("📥 Run a valid prediction to explore response curves.")
        return

    inputs = view.outcome.inputs
    n_points = int(st.session_state.get("response_points", RESPONSE_CURVE_POINTS))
    curves = _cached_curves(inputs.time, inputs.dose, inputs.concentration, n_points)

    st.caption(
        "Shaded band: recommended lab range. Dotted lines: 60 % and 99 % output limits."
    )

    current = inputs.as_dict()
    for dim in DIMENSIONS:
        fig = create_response_curve_plot(
            curves[dim],
            dim,
            current_x=current[dim],
            current_y=view.outcome.result,
        )
        st.plotly_chart(fig, use_container_width=True, key=f"response_{dim}")

    with st.expander("🔢 Curve data", expanded=False):
        dim = st.selectbox(
            "Swept condition",
            list(DIMENSIONS),
            format_func=lambda d: DIMENSION_LABELS[d],
            key="response_table_dimension",
        )
        st.dataframe(curves[dim].round(4), hide_index=True, use_container_width=True)
