# tests/test_ui_streamlit.py
"""
Streamlit UI Tests
==================

Tests for Streamlit UI components using AppTest.
These tests run the actual Streamlit app in headless mode.
"""

import os
import sys

import pytest

# Add parent directory to path
ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

# Check if streamlit.testing is available
try:
    from streamlit.testing.v1 import AppTest

    APPTEST_AVAILABLE = True
except ImportError:
    APPTEST_AVAILABLE = False

APP_MAIN = os.path.join(ROOT, "dyelab", "app_main.py")


# =============================================================================
# TAB IMPORT TESTS
# =============================================================================


class TestTabImports:
    """Test that all tabs can be imported without errors."""

    @pytest.mark.parametrize("name", ["home_tab", "predictor_tab", "response_tab", "report_tab"])
    def test_import_tab(self, name):
        import dyelab.tabs as tabs

        module = getattr(tabs, name)
        assert callable(module.render)

    def test_unknown_tab(self):
        import dyelab.tabs as tabs

        with pytest.raises(AttributeError):
            tabs.calibration_tab  # noqa: B018


class TestSidebarUI:
    """Test sidebar helpers."""

    def test_widget_keys(self):
        from dyelab.sidebar_ui import number_key, slider_key

        assert number_key("time") == "time_input"
        assert slider_key("dose") == "dose_range"

    def test_tag_html_escapes_text(self):
        from dyelab.config import StyleCategory
        from dyelab.prediction import Tag
        from dyelab.tabs.predictor_tab import tag_html

        html = tag_html(Tag("<b>x</b>", StyleCategory.WARNING))
        assert "&lt;b&gt;" in html
        assert "dyelab-tag-warning" in html


# =============================================================================
# APPTEST TESTS
# =============================================================================


@pytest.mark.skipif(not APPTEST_AVAILABLE, reason="streamlit.testing not available")
class TestStreamlitApp:
    """Integration tests using Streamlit AppTest."""

    def _run_app(self):
        at = AppTest.from_file(APP_MAIN, default_timeout=30)
        at.run()
        assert not at.exception
        return at

    def test_app_starts_with_preset_prediction(self):
        at = self._run_app()
        assert at.text_input(key="time_input").value == "90"
        assert at.text_input(key="dose_input").value == "0.75"
        assert at.text_input(key="concentration_input").value == "40"
        assert at.metric[0].value == "99.0"

    def test_app_has_tabs(self):
        at = self._run_app()
        assert len(at.tabs) == 4

    def test_predict_updates_result(self):
        at = self._run_app()
        at.text_input(key="time_input").set_value("10")
        at.text_input(key="dose_input").set_value("0.1")
        at.text_input(key="concentration_input").set_value("80")
        at.button(key="predict_button").click()
        at.run()

        assert not at.exception
        assert at.metric[0].value == "64.5"
        assert at.slider(key="time_range").value == 10.0

    def test_number_commit_clamps_slider(self):
        at = self._run_app()
        at.text_input(key="time_input").input("500").run()
        assert at.slider(key="time_range").value == 120.0
        assert at.text_input(key="time_input").value == "500"

    def test_invalid_input_shows_alert(self):
        at = self._run_app()
        at.text_input(key="dose_input").set_value("abc")
        at.button(key="predict_button").click()
        at.run()

        assert not at.exception
        assert any("valid numeric values" in e.value for e in at.error)
        assert at.metric[0].value == "99.0"

    def test_preset_restores_fields(self):
        at = self._run_app()
        at.text_input(key="time_input").input("15").run()
        at.button(key="preset_button").click().run()
        assert at.text_input(key="time_input").value == "90"
        assert at.slider(key="time_range").value == 90.0
