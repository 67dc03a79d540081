# view_state.py
"""
DyeLab Predictor - Presentation State
=====================================

Explicit view context for the predictor page and the event handlers that
mutate it:

- ``on_slider_input(view, dimension)``   slider moved -> numeric field follows
- ``on_number_commit(view, dimension)``  numeric field committed -> slider follows (clamped)
- ``on_preset_click(view)``              typical optimal conditions
- ``on_predict_click(view)``             parse, predict, apply outcome

The context is a plain dataclass so handlers can be exercised without
Streamlit; ``sidebar_ui`` copies widget values in and out of it.
"""

import logging
import math
from dataclasses import dataclass, field

import numpy as np

from .config import (
    DIMENSIONS,
    INPUT_ERROR_MESSAGE,
    PRESET_VALUES,
    SLIDER_BOUNDS,
)
from .prediction import PredictionInputs, PredictionOutcome, Tag, compute_outcome
from .validation import (
    ValidationReport,
    clamp,
    parse_float,
    read_field,
    validate_prediction_inputs,
)

logger = logging.getLogger(__name__)

__all__ = [
    "FieldPair",
    "PredictorView",
    "format_field_value",
    "on_slider_input",
    "on_number_commit",
    "on_preset_click",
    "on_predict_click",
    "initialize_view",
]


def format_field_value(value: float) -> str:
    """Shortest text that reads back as the same float ("90", "0.75")."""
    return np.format_float_positional(float(value), trim="-")


@dataclass
class FieldPair:
    """Free-form numeric field and bounded slider bound to the same quantity."""

    number_text: str
    slider_value: float
    slider_min: float
    slider_max: float
    slider_step: float

    @classmethod
    def for_dimension(cls, dimension: str) -> "FieldPair":
        bounds = SLIDER_BOUNDS[dimension]
        return cls(
            number_text="",
            slider_value=bounds["min"],
            slider_min=bounds["min"],
            slider_max=bounds["max"],
            slider_step=bounds["step"],
        )


@dataclass
class PredictorView:
    """
    Display state of the predictor page.

    Attributes
    ----------
    fields : dict[str, FieldPair]
        Input controls per dimension
    result_text : str
        Result region
    quality_tag, range_tag : Tag or None
        Tag regions (None until first written)
    interpretation : tuple[str, ...]
        Interpretation list region
    alert : str or None
        Pending blocking notice, consumed by the renderer
    outcome : PredictionOutcome or None
        Outcome most recently applied
    validation : ValidationReport or None
        Report of the most recent accepted prediction
    """

    fields: dict[str, FieldPair] = field(
        default_factory=lambda: {dim: FieldPair.for_dimension(dim) for dim in DIMENSIONS}
    )
    result_text: str = ""
    quality_tag: Tag | None = None
    range_tag: Tag | None = None
    interpretation: tuple[str, ...] = ()
    alert: str | None = None
    outcome: PredictionOutcome | None = None
    validation: ValidationReport | None = None

    @property
    def is_valid(self) -> bool:
        """True when the last applied outcome carries a numeric result."""
        return self.outcome is not None and self.outcome.is_valid

    def read_values(self) -> dict[str, float | None]:
        """Parsed value per dimension (None when unparseable)."""
        return {
            dim: read_field(pair.number_text, pair.slider_value)
            for dim, pair in self.fields.items()
        }

    def apply_outcome(self, outcome: PredictionOutcome) -> None:
        """
        Write an outcome to the output regions in one step.

        Range tag and interpretation are only replaced when the outcome carries
        them; an invalid outcome leaves both as they were.
        """
        self.outcome = outcome
        self.result_text = outcome.display_text
        self.quality_tag = outcome.quality_tag
        if outcome.range_tag is not None:
            self.range_tag = outcome.range_tag
        if outcome.interpretation is not None:
            self.interpretation = tuple(outcome.interpretation)

    def pop_alert(self) -> str | None:
        alert, self.alert = self.alert, None
        return alert


# =============================================================================
# EVENT HANDLERS
# =============================================================================


def on_slider_input(view: PredictorView, dimension: str) -> None:
    """Numeric field takes the slider's value verbatim."""
    pair = view.fields[dimension]
    pair.number_text = format_field_value(pair.slider_value)


def on_number_commit(view: PredictorView, dimension: str) -> None:
    """Slider follows a committed numeric field, clamped into its bounds.

    Unparseable or non-finite text is ignored silently.
    """
    pair = view.fields[dimension]
    value = parse_float(pair.number_text)
    if value is None or not math.isfinite(value):
        return
    pair.slider_value = clamp(value, pair.slider_min, pair.slider_max)


def on_preset_click(view: PredictorView) -> None:
    """Set every numeric field and slider to the typical optimal conditions."""
    for dim, value in PRESET_VALUES.items():
        pair = view.fields[dim]
        pair.slider_value = value
        pair.number_text = format_field_value(value)


def on_predict_click(view: PredictorView) -> ValidationReport:
    """
    Parse the fields, run the model and apply the outcome.

    If any field cannot be parsed the view gets a blocking alert and its output
    regions are left unchanged.

    Returns
    -------
    ValidationReport
        Parse errors and nominal-range warnings for the attempt
    """
    values = view.read_values()
    report = validate_prediction_inputs(values)

    if not report.is_valid:
        logger.info("Prediction rejected: %s", [e.field for e in report.errors])
        view.alert = INPUT_ERROR_MESSAGE
        return report

    view.alert = None
    view.validation = report
    inputs = PredictionInputs(
        time=values["time"],  # type: ignore[arg-type]
        dose=values["dose"],  # type: ignore[arg-type]
        concentration=values["concentration"],  # type: ignore[arg-type]
    )
    outcome = compute_outcome(inputs)
    logger.debug("Prediction %s -> %s", inputs, outcome.display_text)

    view.apply_outcome(outcome)
    return report


def initialize_view() -> PredictorView:
    """Initial page state: preset applied, then one prediction."""
    view = PredictorView()
    on_preset_click(view)
    on_predict_click(view)
    return view
