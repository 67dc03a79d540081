# utils.py
"""
DyeLab Predictor - Utility Functions
====================================

Utility module providing:
- Response curves (one-dimensional sweeps of the model)
- Tabular summaries of a prediction outcome
- CSV export for download buttons
- Session state helpers
"""

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd

from .config import (
    DIMENSION_LABELS,
    DIMENSION_UNITS,
    DIMENSIONS,
    RESPONSE_CURVE_POINTS,
    SLIDER_BOUNDS,
    VIEW_STATE_KEY,
)
from .models import removal_efficiency_model
from .prediction import PredictionInputs, PredictionOutcome

logger = logging.getLogger(__name__)

__all__ = [
    # Data classes
    "CalculationResult",
    # Response curves
    "response_curve",
    "response_curves",
    # Tables
    "outcome_to_dataframe",
    "interpretation_to_dataframe",
    # Export utilities
    "convert_df_to_csv",
    "export_outcome_csv",
    # Session state helpers
    "get_predictor_view",
]


@dataclass
class CalculationResult:
    """Result wrapper for calculations that may fail in the UI."""

    success: bool
    data: Any = None
    error: str | None = None


# =============================================================================
# RESPONSE CURVES
# =============================================================================
def response_curve(
    dimension: str,
    inputs: PredictionInputs,
    n_points: int = RESPONSE_CURVE_POINTS,
) -> pd.DataFrame:
    """
    Sweep one input across its slider range, holding the others fixed.

    Parameters
    ----------
    dimension : str
        Dimension to sweep ("time", "dose" or "concentration")
    inputs : PredictionInputs
        Current operating point (supplies the fixed dimensions)
    n_points : int
        Number of points in the sweep (at least 2)

    Returns
    -------
    pd.DataFrame
        Columns: the swept dimension and ``removal_%``
    """
    if dimension not in DIMENSIONS:
        raise ValueError(f"Unknown dimension: {dimension!r}")

    bounds = SLIDER_BOUNDS[dimension]
    sweep = np.linspace(bounds["min"], bounds["max"], max(int(n_points), 2))

    values: dict[str, Any] = inputs.as_dict()
    values[dimension] = sweep
    removal = removal_efficiency_model(values["time"], values["dose"], values["concentration"])

    return pd.DataFrame({dimension: sweep, "removal_%": removal})


def response_curves(
    inputs: PredictionInputs, n_points: int = RESPONSE_CURVE_POINTS
) -> dict[str, pd.DataFrame]:
    """Response curve for every dimension."""
    return {dim: response_curve(dim, inputs, n_points) for dim in DIMENSIONS}


# =============================================================================
# TABLES
# =============================================================================
def outcome_to_dataframe(outcome: PredictionOutcome) -> pd.DataFrame:
    """
    One row per reported quantity: inputs, result and tags.

    Columns: ``Parameter``, ``Value``, ``Unit``.
    """
    rows = []
    values = outcome.inputs.as_dict()
    for dim in DIMENSIONS:
        rows.append(
            {
                "Parameter": DIMENSION_LABELS[dim],
                "Value": f"{values[dim]:g}",
                "Unit": DIMENSION_UNITS[dim],
            }
        )

    rows.append({"Parameter": "Predicted removal", "Value": outcome.display_text, "Unit": "%"})
    rows.append({"Parameter": "Quality", "Value": outcome.quality_tag.text, "Unit": ""})
    if outcome.range_tag is not None:
        rows.append({"Parameter": "Lab range", "Value": outcome.range_tag.text, "Unit": ""})

    return pd.DataFrame(rows, columns=["Parameter", "Value", "Unit"])


def interpretation_to_dataframe(outcome: PredictionOutcome) -> pd.DataFrame:
    """Numbered interpretation bullets (empty when the outcome has none)."""
    bullets = list(outcome.interpretation or ())
    return pd.DataFrame({"#": range(1, len(bullets) + 1), "Interpretation": bullets})


# =============================================================================
# EXPORT UTILITIES
# =============================================================================
def convert_df_to_csv(df: pd.DataFrame) -> bytes:
    """Convert DataFrame to CSV bytes for download."""
    return df.to_csv(index=False, sep=";").encode("utf-8")


def export_outcome_csv(outcome: PredictionOutcome | None) -> CalculationResult:
    """
    CSV summary of a prediction for the download button.

    Returns
    -------
    CalculationResult
        ``data`` holds the CSV bytes on success
    """
    if outcome is None or not outcome.is_valid:
        return CalculationResult(success=False, error="No valid prediction to export.")

    try:
        summary = outcome_to_dataframe(outcome)
        notes = pd.DataFrame(
            {
                "Parameter": "Interpretation",
                "Value": list(outcome.interpretation or ()),
                "Unit": "",
            }
        )
        table = pd.concat([summary, notes], ignore_index=True)
        return CalculationResult(success=True, data=convert_df_to_csv(table))
    except Exception as e:
        logger.warning(f"CSV export failed: {e}")
        return CalculationResult(success=False, error=str(e))


# =============================================================================
# SESSION STATE HELPERS
# =============================================================================
def get_predictor_view() -> Any:
    """Retrieve the ``PredictorView`` stored in the current Streamlit session (or None)."""
    import streamlit as st

    return st.session_state.get(VIEW_STATE_KEY)
