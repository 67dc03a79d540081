# tests/test_utils.py
"""
Unit Tests for Utility Functions
================================

Tests for response curves, tabular summaries, CSV export and plot helpers.
"""

import math
import os
import sys

import numpy as np
import pandas as pd
import plotly.graph_objects as go
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dyelab.models import term_contributions
from dyelab.plot_style import (
    create_contribution_plot,
    create_response_curve_plot,
    hex_to_rgba,
)
from dyelab.prediction import PredictionInputs, compute_outcome
from dyelab.utils import (
    CalculationResult,
    convert_df_to_csv,
    export_outcome_csv,
    interpretation_to_dataframe,
    outcome_to_dataframe,
    response_curve,
    response_curves,
)


@pytest.fixture
def preset_inputs():
    return PredictionInputs(time=90, dose=0.75, concentration=40)


@pytest.fixture
def low_inputs():
    return PredictionInputs(time=10, dose=0.1, concentration=80)


# =============================================================================
# RESPONSE CURVES
# =============================================================================


class TestResponseCurve:
    def test_sweeps_slider_range(self, low_inputs):
        df = response_curve("time", low_inputs, n_points=12)
        assert list(df.columns) == ["time", "removal_%"]
        assert len(df) == 12
        assert df["time"].iloc[0] == pytest.approx(10.0)
        assert df["time"].iloc[-1] == pytest.approx(120.0)

    def test_holds_other_inputs(self, low_inputs):
        df = response_curve("dose", low_inputs, n_points=5)
        assert df["removal_%"].iloc[0] == pytest.approx(64.5)

    def test_monotonic_directions(self, low_inputs):
        assert np.all(np.diff(response_curve("time", low_inputs)["removal_%"]) >= 0)
        assert np.all(np.diff(response_curve("dose", low_inputs)["removal_%"]) >= 0)
        assert np.all(np.diff(response_curve("concentration", low_inputs)["removal_%"]) <= 0)

    def test_all_curves(self, preset_inputs):
        curves = response_curves(preset_inputs, n_points=7)
        assert set(curves) == {"time", "dose", "concentration"}
        assert all(len(df) == 7 for df in curves.values())

    def test_minimum_two_points(self, preset_inputs):
        assert len(response_curve("time", preset_inputs, n_points=0)) == 2

    def test_unknown_dimension(self, preset_inputs):
        with pytest.raises(ValueError, match="Unknown dimension"):
            response_curve("ph", preset_inputs)


# =============================================================================
# TABLES AND EXPORT
# =============================================================================


class TestOutcomeTables:
    def test_summary_rows(self, preset_inputs):
        df = outcome_to_dataframe(compute_outcome(preset_inputs))
        assert list(df.columns) == ["Parameter", "Value", "Unit"]
        values = dict(zip(df["Parameter"], df["Value"]))
        assert values["Contact time"] == "90"
        assert values["Adsorbent dose"] == "0.75"
        assert values["Predicted removal"] == "99.0"
        assert values["Quality"] == "Excellent removal"
        assert values["Lab range"] == "Within recommended lab range"

    def test_invalid_outcome_has_no_range_row(self):
        df = outcome_to_dataframe(compute_outcome(PredictionInputs(0, 0.75, 40)))
        assert "Lab range" not in df["Parameter"].tolist()
        assert df.loc[df["Parameter"] == "Predicted removal", "Value"].item() == "--"

    def test_interpretation_table(self, preset_inputs):
        df = interpretation_to_dataframe(compute_outcome(preset_inputs))
        assert df["#"].tolist() == [1, 2, 3, 4]

    def test_interpretation_table_empty(self):
        df = interpretation_to_dataframe(compute_outcome(PredictionInputs(-1, 0.75, 40)))
        assert df.empty


class TestCsvExport:
    def test_convert_df_to_csv(self):
        df = pd.DataFrame({"A": [1, 2], "B": [3, 4]})
        csv = convert_df_to_csv(df)
        assert isinstance(csv, bytes)
        assert csv.decode("utf-8").splitlines()[0] == "A;B"

    def test_export_valid_outcome(self, low_inputs):
        result = export_outcome_csv(compute_outcome(low_inputs))
        assert isinstance(result, CalculationResult)
        assert result.success
        text = result.data.decode("utf-8")
        assert "Predicted removal;64.5;%" in text
        assert text.count("Interpretation;") == 4

    def test_export_none(self):
        result = export_outcome_csv(None)
        assert not result.success
        assert result.error

    def test_export_invalid_outcome(self):
        result = export_outcome_csv(compute_outcome(PredictionInputs(60, 0, 40)))
        assert not result.success


# =============================================================================
# PLOTS
# =============================================================================


class TestPlotStyle:
    def test_hex_to_rgba(self):
        assert hex_to_rgba("#2E86AB", 0.25) == "rgba(46, 134, 171, 0.25)"

    def test_response_curve_plot(self, preset_inputs):
        fig = create_response_curve_plot(
            response_curve("dose", preset_inputs), "dose", current_x=0.75, current_y=99.0
        )
        assert isinstance(fig, go.Figure)
        assert [t.name for t in fig.data] == ["Model", "Current conditions"]

    def test_response_curve_plot_without_point(self, preset_inputs):
        fig = create_response_curve_plot(
            response_curve("time", preset_inputs), "time", current_x=90, current_y=math.nan
        )
        assert len(fig.data) == 1

    def test_contribution_plot(self):
        fig = create_contribution_plot(term_contributions(60, 0.5, 50))
        assert isinstance(fig, go.Figure)
        assert len(fig.data[0].x) == 5
