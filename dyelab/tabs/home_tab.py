# tabs/home_tab.py
"""
About Tab - DyeLab Predictor
============================

Model description, recommended ranges and usage notes.
"""

import pandas as pd
import streamlit as st

from ..config import (
    DIMENSION_LABELS,
    DIMENSION_UNITS,
    DIMENSIONS,
    FALLBACK_QUALITY_TAG,
    INTERPRETATION_THRESHOLDS,
    NOMINAL_RANGES,
    PRESET_VALUES,
    QUALITY_TAGS,
)


def render():
    """Render the model overview."""
    st.subheader("ℹ️ About the Model")

    st.markdown(
        "The predictor is a linear screening model over normalized operating conditions:"
    )
    st.latex(
        r"R(\%) = 60 + 30\,\frac{t}{120} + 20\,\frac{m}{1} + 10\,\frac{80 - C_0}{70}"
    )
    st.markdown(
        "The result is clamped to **60–99 %** and rounded to one decimal. "
        "Any non-positive input is rejected as *Invalid input*."
    )

    st.markdown("### 📏 Recommended lab range")
    rows = []
    for dim in DIMENSIONS:
        lo, hi = NOMINAL_RANGES[dim]
        low_cut, high_cut = INTERPRETATION_THRESHOLDS[dim]
        rows.append(
            {
                "Condition": DIMENSION_LABELS[dim],
                "Unit": DIMENSION_UNITS[dim],
                "Range": f"{lo:g} – {hi:g}",
                "Typical band": f"{low_cut:g} – {high_cut:g}",
                "Preset": f"{PRESET_VALUES[dim]:g}",
            }
        )
    st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

    st.markdown("### 🏷️ Quality tags")
    lines = [f"- **{t['label']}**: ≥ {t['min_removal']:g} %" for t in QUALITY_TAGS]
    lines.append(f"- **{FALLBACK_QUALITY_TAG[0]}**: < {QUALITY_TAGS[-1]['min_removal']:g} %")
    st.markdown("\n".join(lines))

    st.info(
        "💡 This is an empirical screening tool. Confirm designs with batch "
        "adsorption experiments."
    )
