# tests/test_prediction.py
"""
Unit Tests for Prediction Outcomes
==================================

Tests for result formatting, quality and lab-range tags, and the
interpretation bullets derived from a single prediction.
"""

import math
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dyelab.config import (
    INTERPRETATION_DISCLAIMER,
    INTERPRETATION_MESSAGES,
    StyleCategory,
)
from dyelab.prediction import (
    PredictionInputs,
    Tag,
    build_interpretation,
    classify_quality,
    classify_range,
    compute_outcome,
    format_result,
    interpret_dimension,
    is_within_nominal_range,
)

PRESET = PredictionInputs(time=90, dose=0.75, concentration=40)


# =============================================================================
# RESULT FORMATTING
# =============================================================================


class TestFormatResult:
    def test_one_decimal(self):
        assert format_result(64.5) == "64.5"
        assert format_result(99.0) == "99.0"

    def test_nan_placeholder(self):
        assert format_result(float("nan")) == "--"


# =============================================================================
# QUALITY TAG
# =============================================================================


class TestClassifyQuality:
    """Thresholds are inclusive lower bounds, evaluated top-down."""

    @pytest.mark.parametrize(
        "result,text,style",
        [
            (99.0, "Excellent removal", StyleCategory.DEFAULT),
            (95.0, "Excellent removal", StyleCategory.DEFAULT),
            (94.9, "Very good removal", StyleCategory.DEFAULT),
            (90.0, "Very good removal", StyleCategory.DEFAULT),
            (89.9, "Good removal", StyleCategory.SECONDARY),
            (85.0, "Good removal", StyleCategory.SECONDARY),
            (84.9, "Moderate removal", StyleCategory.WARNING),
            (60.0, "Moderate removal", StyleCategory.WARNING),
        ],
    )
    def test_thresholds(self, result, text, style):
        assert classify_quality(result) == Tag(text, style)

    def test_nan_is_invalid_input(self):
        assert classify_quality(float("nan")) == Tag("Invalid input", StyleCategory.DANGER)

    def test_model_results_on_boundaries(self):
        """Operating points whose model output lands exactly on a threshold."""
        assert compute_outcome(PredictionInputs(120, 0.25, 80)).quality_tag.text == (
            "Excellent removal"
        )
        assert compute_outcome(PredictionInputs(60, 0.75, 80)).quality_tag.text == (
            "Very good removal"
        )
        assert compute_outcome(PredictionInputs(60, 0.5, 80)).quality_tag.text == "Good removal"


# =============================================================================
# LAB RANGE TAG
# =============================================================================


class TestClassifyRange:
    def test_preset_within_range(self):
        assert is_within_nominal_range(PRESET)
        assert classify_range(PRESET) == Tag(
            "Within recommended lab range", StyleCategory.SECONDARY
        )

    def test_documents_inclusive_bounds(self):
        assert "inclusive" in classify_range.__doc__

    def test_bounds_inclusive(self):
        assert is_within_nominal_range(PredictionInputs(10, 0.1, 10))
        assert is_within_nominal_range(PredictionInputs(120, 1.0, 80))

    @pytest.mark.parametrize(
        "inputs",
        [
            PredictionInputs(9.9, 0.75, 40),
            PredictionInputs(121, 0.75, 40),
            PredictionInputs(90, 0.05, 40),
            PredictionInputs(90, 1.01, 40),
            PredictionInputs(90, 0.75, 9),
            PredictionInputs(90, 0.75, 81),
        ],
    )
    def test_any_dimension_outside_flips_tag(self, inputs):
        assert not is_within_nominal_range(inputs)
        assert classify_range(inputs) == Tag("Outside typical lab range", StyleCategory.WARNING)


# =============================================================================
# INTERPRETATION
# =============================================================================


class TestInterpretDimension:
    """Buckets use exclusive bounds; thresholds themselves are typical."""

    @pytest.mark.parametrize(
        "dimension,value,bucket",
        [
            ("time", 39.9, "low"),
            ("time", 40, "typical"),
            ("time", 100, "typical"),
            ("time", 100.1, "high"),
            ("dose", 0.2, "low"),
            ("dose", 0.25, "typical"),
            ("dose", 0.8, "typical"),
            ("dose", 0.85, "high"),
            ("concentration", 19, "low"),
            ("concentration", 20, "typical"),
            ("concentration", 60, "typical"),
            ("concentration", 61, "high"),
        ],
    )
    def test_buckets(self, dimension, value, bucket):
        assert interpret_dimension(dimension, value) == INTERPRETATION_MESSAGES[dimension][bucket]


class TestBuildInterpretation:
    def test_four_bullets_in_order(self):
        bullets = build_interpretation(PredictionInputs(10, 0.1, 80))
        assert len(bullets) == 4
        assert bullets[0] == INTERPRETATION_MESSAGES["time"]["low"]
        assert bullets[1] == INTERPRETATION_MESSAGES["dose"]["low"]
        assert bullets[2] == INTERPRETATION_MESSAGES["concentration"]["high"]
        assert bullets[3] == INTERPRETATION_DISCLAIMER

    def test_disclaimer_always_last(self):
        for inputs in (PRESET, PredictionInputs(200, 2.0, 5)):
            assert build_interpretation(inputs)[-1] == INTERPRETATION_DISCLAIMER

    def test_preset_bullets(self):
        bullets = build_interpretation(PRESET)
        assert bullets[0] == INTERPRETATION_MESSAGES["time"]["typical"]
        assert bullets[1] == INTERPRETATION_MESSAGES["dose"]["typical"]
        assert bullets[2] == INTERPRETATION_MESSAGES["concentration"]["typical"]


# =============================================================================
# FULL OUTCOME
# =============================================================================


class TestComputeOutcome:
    def test_preset_outcome(self):
        outcome = compute_outcome(PRESET)
        assert outcome.is_valid
        assert outcome.result == 99.0
        assert outcome.display_text == "99.0"
        assert outcome.quality_tag.text == "Excellent removal"
        assert outcome.range_tag.text == "Within recommended lab range"
        assert len(outcome.interpretation) == 4

    def test_low_corner_outcome(self):
        outcome = compute_outcome(PredictionInputs(10, 0.1, 80))
        assert outcome.display_text == "64.5"
        assert outcome.quality_tag == Tag("Moderate removal", StyleCategory.WARNING)

    def test_out_of_range_still_predicts(self):
        outcome = compute_outcome(PredictionInputs(200, 0.5, 40))
        assert outcome.is_valid
        assert outcome.range_tag.text == "Outside typical lab range"

    def test_invalid_outcome(self):
        """Rejected inputs set only result, text and quality tag."""
        outcome = compute_outcome(PredictionInputs(0, 0.75, 40))
        assert not outcome.is_valid
        assert math.isnan(outcome.result)
        assert outcome.display_text == "--"
        assert outcome.quality_tag == Tag("Invalid input", StyleCategory.DANGER)
        assert outcome.range_tag is None
        assert outcome.interpretation is None

    def test_inputs_recorded(self):
        assert compute_outcome(PRESET).inputs == PRESET
