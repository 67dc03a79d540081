# tabs/report_tab.py
"""
Export Tab - DyeLab Predictor
=============================

CSV and Word downloads of the current prediction.
"""

import logging
import re

import streamlit as st

from ..config import DIMENSION_LABELS, DIMENSIONS
from ..plot_style import create_response_curve_plot
from ..utils import (
    export_outcome_csv,
    get_predictor_view,
    interpretation_to_dataframe,
    outcome_to_dataframe,
    response_curve,
)

logger = logging.getLogger(__name__)


def _safe_filename(title: str) -> str:
    name = re.sub(r"[^A-Za-z0-9_-]+", "_", title.strip()).strip("_")
    return name or "dye_removal_prediction"


def render():
    st.subheader("📦 Export")

    view = get_predictor_view()
    if view is None or not view.is_valid:
        st.info("📥 Run a valid prediction to enable exports.")
        return

    outcome = view.outcome

    st.markdown("### 📋 Summary")
    st.dataframe(outcome_to_dataframe(outcome), hide_index=True, use_container_width=True)
    st.dataframe(interpretation_to_dataframe(outcome), hide_index=True, use_container_width=True)

    title = st.text_input("Report title", key="report_title")
    filename = _safe_filename(title)

    st.markdown("---")
    col_csv, col_docx = st.columns(2)

    with col_csv:
        st.markdown("#### 📄 CSV")
        csv_result = export_outcome_csv(outcome)
        if csv_result.success:
            st.download_button(
                "⬇️ Download CSV",
                data=csv_result.data,
                file_name=f"{filename}.csv",
                mime="text/csv",
                key="download_csv",
            )
        else:
            st.warning(f"Could not export CSV: {csv_result.error}")

    with col_docx:
        st.markdown("#### 📝 Word report")
        include_figures = st.checkbox(
            "Include response-curve figures (requires kaleido)",
            value=False,
            key="report_include_figures",
        )
        if st.button("Build Word report", key="build_docx"):
            _build_docx(outcome, title, include_figures)

        docx_report = st.session_state.get("docx_report")
        if docx_report and docx_report[0] == outcome:
            docx_bytes = docx_report[1]
            st.download_button(
                "⬇️ Download DOCX",
                data=docx_bytes,
                file_name=f"{filename}.docx",
                mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                key="download_docx",
            )


def _build_docx(outcome, title: str, include_figures: bool) -> None:
    from ..docx_report import create_docx_report

    figures = {}
    if include_figures:
        current = outcome.inputs.as_dict()
        for dim in DIMENSIONS:
            fig = create_response_curve_plot(
                response_curve(dim, outcome.inputs),
                dim,
                current_x=current[dim],
                current_y=outcome.result,
            )
            figures[f"Effect of {DIMENSION_LABELS[dim].lower()}"] = fig

    try:
        docx_bytes, warnings = create_docx_report(outcome, title=title, figures=figures)
    except Exception as e:
        logger.error(f"Failed to build Word report: {e}")
        st.session_state["docx_report"] = None
        st.warning(f"Could not build Word report: {e}")
        return

    st.session_state["docx_report"] = (outcome, docx_bytes)
    for w in warnings:
        st.warning(w)
    st.success("Word report ready.")
