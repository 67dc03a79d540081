# tabs/predictor_tab.py
"""
Predictor Tab - DyeLab Predictor
================================

Result region, quality and lab-range tags, input warnings, interpretation
bullets and the term-contribution chart for the current prediction.
"""

from html import escape as html_escape

import streamlit as st

from ..config import TAG_STYLES
from ..models import term_contributions
from ..plot_style import create_contribution_plot
from ..prediction import Tag
from ..utils import get_predictor_view
from ..validation import format_validation_errors


def tag_html(tag: Tag) -> str:
    """Badge markup for a tag, colored by its style category."""
    style = TAG_STYLES[tag.style]
    return (
        f'<span class="dyelab-tag dyelab-tag-{tag.style.value}" '
        f'style="background: {style["background"]}; color: {style["color"]}; '
        f'border: 1px solid {style["border"]}; border-radius: 12px; '
        f'padding: 4px 12px; margin-right: 8px; font-weight: 600; display: inline-block;">'
        f"{html_escape(tag.text)}</span>"
    )


def render():
    st.subheader("🧪 Removal Efficiency Prediction")

    view = get_predictor_view()
    if view is None:
        st.info("Set the operating conditions in the sidebar and click **Predict**.")
        return

    col_result, col_tags = st.columns([1, 2])
    with col_result:
        st.metric("Predicted removal (%)", view.result_text or "--")
    with col_tags:
        badges = [tag_html(t) for t in (view.quality_tag, view.range_tag) if t is not None]
        if badges:
            st.markdown(
                f'<div style="margin-top: 28px;">{"".join(badges)}</div>',
                unsafe_allow_html=True,
            )

    if view.validation is not None and view.validation.has_warnings:
        st.warning(format_validation_errors(view.validation), icon="⚠️")

    st.markdown("---")
    st.markdown("### 💡 Interpretation")
    if view.interpretation:
        st.markdown("\n".join(f"- {line}" for line in view.interpretation))
    else:
        st.caption("No interpretation available yet.")

    if view.is_valid:
        inputs = view.outcome.inputs
        with st.expander("📊 Model term contributions", expanded=False):
            fig = create_contribution_plot(
                term_contributions(inputs.time, inputs.dose, inputs.concentration)
            )
            st.plotly_chart(fig, use_container_width=True)
            st.caption(
                "Contributions are summed before the result is clamped to the model's "
                "60–99 % output range."
            )
