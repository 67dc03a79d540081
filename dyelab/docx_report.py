# docx_report.py
"""DOCX report generation for DyeLab Predictor.

This module powers the "Word report" export in the Export tab. It is:
- Streamlit-independent (pure functions returning bytes)
- Flexible: callers pass figures as a mapping of ready-made Plotly figures or
  PNG bytes, so it can be tested without Kaleido.

The report records the operating conditions, the predicted removal, both tags,
the interpretation bullets and the model equation.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from io import BytesIO
from typing import Any

import pandas as pd
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Inches

from .config import EFFICIENCY_MAX, EFFICIENCY_MIN, VERSION
from .models import term_contributions
from .prediction import PredictionOutcome
from .utils import outcome_to_dataframe

logger = logging.getLogger(__name__)

__all__ = [
    "DocxReportConfig",
    "MODEL_EQUATION_TEXT",
    "create_docx_report",
]

MODEL_EQUATION_TEXT = (
    "R(%) = 60 + 30·(t/120) + 20·(m/1) + 10·((80 − C0)/70), "
    f"clamped to [{EFFICIENCY_MIN:g}, {EFFICIENCY_MAX:g}] % and rounded to one decimal."
)


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class DocxReportConfig:
    """Configuration for DOCX report generation."""

    # Plotly export settings (when a figure object supports .to_image)
    img_format: str = "png"
    img_width_px: int = 1400
    img_height_px: int = 900
    img_scale: float = 2.0

    # Document layout settings
    figure_width_in: float = 6.0

    # Table rendering limits (avoid huge DOCX)
    max_table_rows: int = 60

    # Numeric formatting
    float_format: str = "{:.4g}"


# =============================================================================
# Helpers for document construction
# =============================================================================


def _add_caption(doc: Any, caption: str) -> None:
    cap_par = doc.add_paragraph(caption, style="Caption")
    cap_par.alignment = WD_ALIGN_PARAGRAPH.CENTER
    doc.add_paragraph(" ")  # spacer


def _add_dataframe_table(
    doc: Any,
    df: pd.DataFrame,
    caption: str,
    config: DocxReportConfig,
) -> None:
    """Insert a table from a DataFrame."""
    if len(df) > config.max_table_rows:
        df = df.iloc[: config.max_table_rows]

    table = doc.add_table(rows=1, cols=len(df.columns))
    table.style = "Light Grid Accent 1"

    hdr_cells = table.rows[0].cells
    for i, col in enumerate(df.columns):
        hdr_cells[i].text = str(col)

    for _, row in df.iterrows():
        row_cells = table.add_row().cells
        for i, val in enumerate(row):
            if isinstance(val, float):
                row_cells[i].text = "" if pd.isna(val) else config.float_format.format(val)
            else:
                row_cells[i].text = str(val)

    _add_caption(doc, caption)


def _coerce_image_bytes(fig_obj: Any, config: DocxReportConfig) -> bytes:
    """PNG bytes as-is, or a Plotly figure rendered through its Kaleido export."""
    if isinstance(fig_obj, (bytes, bytearray)):
        return bytes(fig_obj)
    return fig_obj.to_image(
        format=config.img_format,
        width=config.img_width_px,
        height=config.img_height_px,
        scale=config.img_scale,
    )


def _add_figure(doc: Any, fig_bytes: bytes, caption: str, config: DocxReportConfig) -> None:
    """Insert an image and caption."""
    doc.add_picture(BytesIO(fig_bytes), width=Inches(config.figure_width_in))
    doc.paragraphs[-1].alignment = WD_ALIGN_PARAGRAPH.CENTER
    _add_caption(doc, caption)


# =============================================================================
# Public API
# =============================================================================


def create_docx_report(
    outcome: PredictionOutcome,
    *,
    title: str = "Dye Removal Prediction",
    figures: Mapping[str, Any] | None = None,
    config: DocxReportConfig | None = None,
) -> tuple[bytes, list[str]]:
    """Create a Word summary of one prediction and return it as bytes.

    Parameters
    ----------
    outcome : PredictionOutcome
        A valid prediction outcome
    title : str
        Document title
    figures : Mapping[str, Any], optional
        Caption -> Plotly figure or PNG bytes
    config : DocxReportConfig, optional

    Returns:
        (docx_bytes, warnings)
    """
    if not outcome.is_valid:
        raise ValueError("Cannot build a report for an invalid prediction.")

    cfg = config or DocxReportConfig()
    warnings: list[str] = []

    doc = Document()

    doc.add_heading(title, level=0)
    doc.add_paragraph(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    doc.add_paragraph(f"Produced by DyeLab Predictor v{VERSION}")
    doc.add_paragraph(" ")

    # Result
    doc.add_heading("Prediction", level=1)
    headline = doc.add_paragraph()
    headline.add_run("Predicted removal efficiency: ").bold = True
    headline.add_run(f"{outcome.display_text} %")

    tags = doc.add_paragraph()
    tags.add_run("Assessment: ").bold = True
    tag_texts = [outcome.quality_tag.text]
    if outcome.range_tag is not None:
        tag_texts.append(outcome.range_tag.text)
    tags.add_run(" · ".join(tag_texts))

    _add_dataframe_table(
        doc, outcome_to_dataframe(outcome), "Table 1. Operating conditions and result", cfg
    )

    # Interpretation
    doc.add_heading("Interpretation", level=1)
    for line in outcome.interpretation or ():
        doc.add_paragraph(line, style="List Bullet")
    doc.add_paragraph(" ")

    # Model
    doc.add_heading("Model", level=1)
    doc.add_paragraph(MODEL_EQUATION_TEXT)
    inputs = outcome.inputs
    terms = term_contributions(inputs.time, inputs.dose, inputs.concentration)
    terms_df = pd.DataFrame(
        {"Term": [k.capitalize() for k in terms], "Contribution (%)": list(terms.values())}
    )
    _add_dataframe_table(doc, terms_df, "Table 2. Model term contributions (before clamping)", cfg)

    # Figures
    if figures:
        doc.add_heading("Figures", level=1)
        for idx, (caption, fig_obj) in enumerate(figures.items(), start=1):
            try:
                img_bytes = _coerce_image_bytes(fig_obj, cfg)
            except Exception as e:
                logger.warning(f"Failed to export figure '{caption}': {e}")
                warnings.append(f"Figure '{caption}' export failed: {e}")
                continue
            _add_figure(doc, img_bytes, f"Figure {idx}. {caption}", cfg)

    # Notes / warnings
    if warnings:
        doc.add_heading("Notes", level=1)
        doc.add_paragraph("Some items could not be included:")
        for w in warnings:
            doc.add_paragraph(w, style="List Bullet")

    out = BytesIO()
    doc.save(out)
    out.seek(0)
    return out.getvalue(), warnings
