# prediction.py
"""
DyeLab Predictor - Prediction Outcome
=====================================

Pure derivation of everything the result panel shows from one set of inputs:
removal efficiency, quality tag, lab-range tag and interpretation bullets.

No Streamlit imports here; the view layer applies a ``PredictionOutcome`` in a
single step.
"""

import math
from dataclasses import dataclass

from .config import (
    DIMENSIONS,
    INTERPRETATION_DISCLAIMER,
    INTERPRETATION_MESSAGES,
    INTERPRETATION_THRESHOLDS,
    INVALID_RESULT_TEXT,
    INVALID_TAG,
    NOMINAL_RANGES,
    RANGE_TAGS,
    RESULT_DECIMALS,
    StyleCategory,
    get_quality_tag,
)
from .models import predict

__all__ = [
    "PredictionInputs",
    "Tag",
    "PredictionOutcome",
    "format_result",
    "classify_quality",
    "is_within_nominal_range",
    "classify_range",
    "interpret_dimension",
    "build_interpretation",
    "compute_outcome",
]


@dataclass(frozen=True)
class PredictionInputs:
    """Operating conditions of one prediction (min, g/L, mg/L)."""

    time: float
    dose: float
    concentration: float

    def as_dict(self) -> dict[str, float]:
        return {"time": self.time, "dose": self.dose, "concentration": self.concentration}


@dataclass(frozen=True)
class Tag:
    """Text of a tag region plus its styling category."""

    text: str
    style: StyleCategory


@dataclass(frozen=True)
class PredictionOutcome:
    """
    Everything derived from one prediction.

    Attributes
    ----------
    inputs : PredictionInputs
        Inputs the outcome was computed from
    result : float
        Removal efficiency (%), NaN when the inputs are outside the model domain
    display_text : str
        Result formatted for display ("--" when invalid)
    quality_tag : Tag
        Quality classification ("Invalid input" when invalid)
    range_tag : Tag or None
        Lab-range classification; None when invalid (region left untouched)
    interpretation : tuple[str, ...] or None
        Four bullets; None when invalid (region left untouched)
    """

    inputs: PredictionInputs
    result: float
    display_text: str
    quality_tag: Tag
    range_tag: Tag | None
    interpretation: tuple[str, ...] | None

    @property
    def is_valid(self) -> bool:
        return not math.isnan(self.result)


def format_result(result: float) -> str:
    """Format a removal efficiency with one decimal, or the placeholder when NaN."""
    if math.isnan(result):
        return INVALID_RESULT_TEXT
    return f"{result:.{RESULT_DECIMALS}f}"


def classify_quality(result: float) -> Tag:
    """Quality tag from inclusive lower thresholds, evaluated top-down."""
    if math.isnan(result):
        return Tag(*INVALID_TAG)
    return Tag(*get_quality_tag(result))


def is_within_nominal_range(inputs: PredictionInputs) -> bool:
    """True iff every dimension lies inside its nominal range (bounds inclusive)."""
    values = inputs.as_dict()
    return all(
        NOMINAL_RANGES[dim][0] <= values[dim] <= NOMINAL_RANGES[dim][1] for dim in DIMENSIONS
    )


def classify_range(inputs: PredictionInputs) -> Tag:
    """Lab-range tag; within only when every dimension is inside its bounds (inclusive)."""
    return Tag(*RANGE_TAGS[is_within_nominal_range(inputs)])


def interpret_dimension(dimension: str, value: float) -> str:
    """
    Interpretation bullet for one dimension.

    Buckets use exclusive bounds: below the low threshold -> "low", above the
    high threshold -> "high", anything in [low, high] -> "typical".
    """
    low, high = INTERPRETATION_THRESHOLDS[dimension]
    messages = INTERPRETATION_MESSAGES[dimension]

    if value < low:
        return messages["low"]
    if value > high:
        return messages["high"]
    return messages["typical"]


def build_interpretation(inputs: PredictionInputs) -> tuple[str, ...]:
    """Time, dose and concentration bullets followed by the fixed disclaimer."""
    values = inputs.as_dict()
    bullets = [interpret_dimension(dim, values[dim]) for dim in DIMENSIONS]
    bullets.append(INTERPRETATION_DISCLAIMER)
    return tuple(bullets)


def compute_outcome(inputs: PredictionInputs) -> PredictionOutcome:
    """
    Run the model and derive tags and bullets.

    When the model rejects the inputs only the result, display text and quality
    tag are set; ``range_tag`` and ``interpretation`` stay None.
    """
    result = predict(inputs.time, inputs.dose, inputs.concentration)

    if math.isnan(result):
        return PredictionOutcome(
            inputs=inputs,
            result=result,
            display_text=INVALID_RESULT_TEXT,
            quality_tag=classify_quality(result),
            range_tag=None,
            interpretation=None,
        )

    return PredictionOutcome(
        inputs=inputs,
        result=result,
        display_text=format_result(result),
        quality_tag=classify_quality(result),
        range_tag=classify_range(inputs),
        interpretation=build_interpretation(inputs),
    )
