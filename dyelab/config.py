# config.py
"""
DyeLab Predictor - Configuration Module
=======================================

Centralized configuration for model coefficients, input ranges, tag thresholds,
interpretation messages and session defaults.
"""

from enum import Enum
from typing import Any, TypedDict


class StyleCategory(Enum):
    """Styling category of an output region (mapped to badge colors by the UI)."""

    DEFAULT = "default"
    SECONDARY = "secondary"
    WARNING = "warning"
    DANGER = "danger"


class QualityTagInfo(TypedDict):
    """Type definition for a quality tag threshold row."""

    min_removal: float
    label: str
    style: StyleCategory


class SliderBounds(TypedDict):
    """Type definition for slider bounds of one input dimension."""

    min: float
    max: float
    step: float


# =============================================================================
# VERSION INFO
# =============================================================================
from . import __version__ as VERSION

__all__ = [
    # Version
    "VERSION",
    # Styling
    "StyleCategory",
    "TAG_STYLES",
    # Model
    "MODEL_COEFFICIENTS",
    "EFFICIENCY_MIN",
    "EFFICIENCY_MAX",
    "RESULT_DECIMALS",
    "INVALID_RESULT_TEXT",
    # Inputs
    "DIMENSIONS",
    "DIMENSION_LABELS",
    "DIMENSION_UNITS",
    "NOMINAL_RANGES",
    "SLIDER_BOUNDS",
    "PRESET_VALUES",
    "INPUT_ERROR_MESSAGE",
    # Tags
    "QUALITY_TAGS",
    "FALLBACK_QUALITY_TAG",
    "INVALID_TAG",
    "RANGE_TAGS",
    # Interpretation
    "INTERPRETATION_THRESHOLDS",
    "INTERPRETATION_MESSAGES",
    "INTERPRETATION_DISCLAIMER",
    # Plot settings
    "PLOT_TEMPLATE",
    "FONT_FAMILY",
    "RESPONSE_CURVE_POINTS",
    # Session state
    "VIEW_STATE_KEY",
    "DEFAULT_SESSION_STATE",
    # Functions
    "get_quality_tag",
]

# =============================================================================
# EMPIRICAL MODEL
# =============================================================================
# eff = intercept + time_weight * t/time_scale + dose_weight * d/dose_scale
#       + conc_weight * (conc_reference - c)/conc_span
# =============================================================================
MODEL_COEFFICIENTS: dict[str, float] = {
    "intercept": 60.0,
    "time_weight": 30.0,
    "time_scale": 120.0,  # min
    "dose_weight": 20.0,
    "dose_scale": 1.0,  # g/L
    "conc_weight": 10.0,
    "conc_reference": 80.0,  # mg/L
    "conc_span": 70.0,  # mg/L
}
EFFICIENCY_MIN = 60.0  # %
EFFICIENCY_MAX = 99.0  # %
RESULT_DECIMALS = 1
INVALID_RESULT_TEXT = "--"

# =============================================================================
# INPUT DIMENSIONS
# =============================================================================
DIMENSIONS: tuple[str, ...] = ("time", "dose", "concentration")

DIMENSION_LABELS: dict[str, str] = {
    "time": "Contact time",
    "dose": "Adsorbent dose",
    "concentration": "Initial dye concentration",
}

DIMENSION_UNITS: dict[str, str] = {
    "time": "min",
    "dose": "g/L",
    "concentration": "mg/L",
}

# Band the empirical model was fitted to (inclusive)
NOMINAL_RANGES: dict[str, tuple[float, float]] = {
    "time": (10.0, 120.0),
    "dose": (0.1, 1.0),
    "concentration": (10.0, 80.0),
}

SLIDER_BOUNDS: dict[str, SliderBounds] = {
    "time": {"min": 10.0, "max": 120.0, "step": 1.0},
    "dose": {"min": 0.1, "max": 1.0, "step": 0.05},
    "concentration": {"min": 10.0, "max": 80.0, "step": 1.0},
}

# Typical optimal conditions
PRESET_VALUES: dict[str, float] = {
    "time": 90.0,
    "dose": 0.75,
    "concentration": 40.0,
}

INPUT_ERROR_MESSAGE = "Please enter valid numeric values for all fields."

# =============================================================================
# TAGS
# =============================================================================
# Evaluated top-down, inclusive lower bound, first match wins
QUALITY_TAGS: list[QualityTagInfo] = [
    {"min_removal": 95.0, "label": "Excellent removal", "style": StyleCategory.DEFAULT},
    {"min_removal": 90.0, "label": "Very good removal", "style": StyleCategory.DEFAULT},
    {"min_removal": 85.0, "label": "Good removal", "style": StyleCategory.SECONDARY},
]
FALLBACK_QUALITY_TAG: tuple[str, StyleCategory] = ("Moderate removal", StyleCategory.WARNING)
INVALID_TAG: tuple[str, StyleCategory] = ("Invalid input", StyleCategory.DANGER)

RANGE_TAGS: dict[bool, tuple[str, StyleCategory]] = {
    True: ("Within recommended lab range", StyleCategory.SECONDARY),
    False: ("Outside typical lab range", StyleCategory.WARNING),
}

# Badge colors per style category
TAG_STYLES: dict[StyleCategory, dict[str, str]] = {
    StyleCategory.DEFAULT: {"background": "#E3F2E8", "color": "#1B7A3D", "border": "#1B7A3D"},
    StyleCategory.SECONDARY: {"background": "#E8F1F8", "color": "#2E86AB", "border": "#2E86AB"},
    StyleCategory.WARNING: {"background": "#FFF4E0", "color": "#B36B00", "border": "#F18F01"},
    StyleCategory.DANGER: {"background": "#FDECEA", "color": "#C73E1D", "border": "#C73E1D"},
}

# =============================================================================
# INTERPRETATION
# =============================================================================
# Exclusive bounds: values equal to a threshold fall in the typical bucket
INTERPRETATION_THRESHOLDS: dict[str, tuple[float, float]] = {
    "time": (40.0, 100.0),
    "dose": (0.25, 0.8),
    "concentration": (20.0, 60.0),
}

INTERPRETATION_MESSAGES: dict[str, dict[str, str]] = {
    "time": {
        "low": "Contact time is relatively low; increasing time may improve removal.",
        "high": "Contact time is high; system may already be near equilibrium.",
        "typical": "Contact time is in a typical equilibrium range for adsorption studies.",
    },
    "dose": {
        "low": "Adsorbent dose is low; higher dose usually increases removal efficiency.",
        "high": "Adsorbent dose is high; additional dose may give diminishing returns.",
        "typical": "Adsorbent dose is in a balanced range for efficient removal.",
    },
    "concentration": {
        "low": "Initial dye concentration is low; high percentage removal is easier to achieve.",
        "high": (
            "Initial dye concentration is high; percentage removal may decrease "
            "due to site saturation."
        ),
        "typical": "Initial dye concentration is in a moderate range.",
    },
}

INTERPRETATION_DISCLAIMER = (
    "This is a simulation based on an empirical model. "
    "For final design, confirm with experimental data."
)

# =============================================================================
# PLOT SETTINGS
# =============================================================================
PLOT_TEMPLATE = "simple_white"
FONT_FAMILY = "Times New Roman"
RESPONSE_CURVE_POINTS = 111

# =============================================================================
# DEFAULT SESSION STATE (root-level st.session_state)
# =============================================================================
VIEW_STATE_KEY = "predictor_view"

DEFAULT_SESSION_STATE: dict[str, Any] = {
    "first_time": True,
    "response_points": RESPONSE_CURVE_POINTS,
    "report_title": "Dye Removal Prediction",
}


def get_quality_tag(result: float) -> tuple[str, StyleCategory]:
    """
    Get the quality tag for a removal efficiency.

    Parameters
    ----------
    result : float
        Predicted removal efficiency (%)

    Returns
    -------
    tuple
        (label, style category)
    """
    for info in QUALITY_TAGS:
        if result >= info["min_removal"]:
            return info["label"], info["style"]
    return FALLBACK_QUALITY_TAG
