# tests/test_docx_report.py
"""Tests for DOCX report generation."""

from io import BytesIO

import pytest
from docx import Document
from PIL import Image

from dyelab.docx_report import MODEL_EQUATION_TEXT, DocxReportConfig, create_docx_report
from dyelab.prediction import PredictionInputs, compute_outcome


@pytest.fixture
def png_bytes():
    # Dummy PNG bytes (no kaleido dependency)
    img = Image.new("RGB", (120, 80))
    bio = BytesIO()
    img.save(bio, format="PNG")
    return bio.getvalue()


@pytest.fixture
def outcome():
    return compute_outcome(PredictionInputs(time=10, dose=0.1, concentration=80))


def _full_text(docx_bytes):
    doc = Document(BytesIO(docx_bytes))
    return doc, "\n".join(p.text for p in doc.paragraphs)


def test_create_docx_report_produces_valid_docx(outcome, png_bytes):
    docx_bytes, warnings = create_docx_report(
        outcome,
        title="DyeLab - Unit Test Report",
        figures={"Demo figure": png_bytes},
        config=DocxReportConfig(max_table_rows=10),
    )

    assert isinstance(docx_bytes, bytes | bytearray)
    assert len(docx_bytes) > 1000
    assert warnings == []

    doc, full_text = _full_text(docx_bytes)
    assert "Unit Test Report" in full_text
    assert "64.5 %" in full_text
    assert "Moderate removal" in full_text
    assert "Within recommended lab range" in full_text
    assert MODEL_EQUATION_TEXT in full_text
    assert "Figures" in full_text
    assert "Figure 1. Demo figure" in full_text
    assert len(doc.tables) == 2
    assert len(doc.inline_shapes) == 1


def test_report_contains_interpretation(outcome):
    docx_bytes, _ = create_docx_report(outcome)
    _, full_text = _full_text(docx_bytes)
    for line in outcome.interpretation:
        assert line in full_text
    assert "Figures" not in full_text


def test_failed_figure_export_is_reported(outcome):
    class BrokenFigure:
        def to_image(self, **_kwargs):
            raise RuntimeError("no renderer")

    docx_bytes, warnings = create_docx_report(outcome, figures={"Broken": BrokenFigure()})

    assert len(warnings) == 1
    assert "no renderer" in warnings[0]
    _, full_text = _full_text(docx_bytes)
    assert "Notes" in full_text


def test_invalid_outcome_rejected():
    invalid = compute_outcome(PredictionInputs(time=0, dose=0.1, concentration=80))
    with pytest.raises(ValueError):
        create_docx_report(invalid)
