"""
DyeLab Predictor - Sidebar User Interface
=========================================

Features:
- Numeric field + slider pair per operating condition
- Preset (typical optimal conditions) and Predict actions

Widget callbacks run before the script reruns, so they are the only place that
writes widget keys in ``st.session_state``. Each callback copies widget values
into the ``PredictorView``, runs the matching handler, and writes the view back.
"""

import logging

import streamlit as st

from .config import DIMENSION_LABELS, DIMENSION_UNITS, DIMENSIONS, NOMINAL_RANGES
from .utils import get_predictor_view
from .view_state import (
    PredictorView,
    on_number_commit,
    on_predict_click,
    on_preset_click,
    on_slider_input,
)

logger = logging.getLogger(__name__)

__all__ = [
    "number_key",
    "slider_key",
    "push_view_to_widgets",
    "render_sidebar_content",
]


def number_key(dimension: str) -> str:
    return f"{dimension}_input"


def slider_key(dimension: str) -> str:
    return f"{dimension}_range"


# =============================================================================
# SESSION <-> VIEW BRIDGE
# =============================================================================
def push_view_to_widgets(view: PredictorView) -> None:
    """Write every field pair of the view to its widget keys."""
    for dim, pair in view.fields.items():
        st.session_state[number_key(dim)] = pair.number_text
        st.session_state[slider_key(dim)] = float(pair.slider_value)


def _pull_widgets_to_view(view: PredictorView) -> None:
    """Copy current widget values into the view without running handlers."""
    for dim, pair in view.fields.items():
        if number_key(dim) in st.session_state:
            pair.number_text = st.session_state[number_key(dim)]
        if slider_key(dim) in st.session_state:
            pair.slider_value = float(st.session_state[slider_key(dim)])


# =============================================================================
# CALLBACKS
# =============================================================================
def _on_slider_change(dimension: str) -> None:
    view = get_predictor_view()
    pair = view.fields[dimension]
    pair.slider_value = float(st.session_state[slider_key(dimension)])
    on_slider_input(view, dimension)
    st.session_state[number_key(dimension)] = pair.number_text


def _on_number_change(dimension: str) -> None:
    view = get_predictor_view()
    pair = view.fields[dimension]
    pair.number_text = st.session_state[number_key(dimension)]
    on_number_commit(view, dimension)
    st.session_state[slider_key(dimension)] = float(pair.slider_value)


def _on_preset() -> None:
    view = get_predictor_view()
    on_preset_click(view)
    push_view_to_widgets(view)


def _on_predict() -> None:
    view = get_predictor_view()
    _pull_widgets_to_view(view)
    report = on_predict_click(view)
    if report.has_warnings:
        logger.debug(f"Prediction warnings: {[w.message for w in report.warnings]}")


# =============================================================================
# MAIN SIDEBAR CONTENT
# =============================================================================
def _render_field_pair(dimension: str) -> None:
    view = get_predictor_view()
    pair = view.fields[dimension]
    label = DIMENSION_LABELS[dimension]
    unit = DIMENSION_UNITS[dimension]
    lo, hi = NOMINAL_RANGES[dimension]

    st.sidebar.text_input(
        f"{label} ({unit})",
        key=number_key(dimension),
        on_change=_on_number_change,
        args=(dimension,),
        help=f"Recommended lab range: {lo:g}–{hi:g} {unit}. Press Enter to apply.",
    )
    st.sidebar.slider(
        f"{label} slider",
        min_value=float(pair.slider_min),
        max_value=float(pair.slider_max),
        step=float(pair.slider_step),
        key=slider_key(dimension),
        on_change=_on_slider_change,
        args=(dimension,),
        label_visibility="collapsed",
    )


def render_sidebar_content() -> None:
    """Render operating-condition inputs and the two actions."""
    for dim in DIMENSIONS:
        _render_field_pair(dim)

    st.sidebar.markdown("---")

    col1, col2 = st.sidebar.columns(2)
    with col1:
        st.button(
            "⭐ Optimal preset",
            key="preset_button",
            on_click=_on_preset,
            help="Contact time 90 min, dose 0.75 g/L, concentration 40 mg/L",
        )
    with col2:
        st.button(
            "🔮 Predict",
            key="predict_button",
            type="primary",
            on_click=_on_predict,
        )
