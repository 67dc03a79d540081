# app_main.py
"""
DyeLab Predictor - Dye Removal Efficiency Calculator
====================================================

Streamlit page estimating dye-removal efficiency of an adsorption experiment
from contact time, adsorbent dose and initial dye concentration.

Layout:
- Sidebar: numeric field + slider per condition, preset and predict actions
- Tabs: prediction result, response curves, export, model overview
"""

import copy
import sys
from html import escape as html_escape
from pathlib import Path

import streamlit as st

# Add the parent directory to path so the package can be found
# when running directly with streamlit
_repo_root = Path(__file__).resolve().parent.parent
if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))
from dyelab.config import DEFAULT_SESSION_STATE, VERSION, VIEW_STATE_KEY

# =============================================================================
# PAGE CONFIGURATION
# =============================================================================
APP_VERSION = VERSION
APP_TITLE = "DyeLab Predictor"

# Pre-escaped for safe injection into unsafe_allow_html contexts
_APP_VERSION_SAFE = html_escape(str(APP_VERSION))

st.set_page_config(
    page_title=APP_TITLE, page_icon="🧪", layout="wide", initial_sidebar_state="expanded"
)

# =============================================================================
# LOCAL IMPORTS
# =============================================================================
from dyelab import sidebar_ui
from dyelab.tabs import home_tab, predictor_tab, report_tab, response_tab
from dyelab.view_state import initialize_view

# =============================================================================
# SESSION STATE
# =============================================================================
for _k, _v in DEFAULT_SESSION_STATE.items():
    if _k not in st.session_state:
        st.session_state[_k] = copy.deepcopy(_v)

# Initial state: preset applied, then one prediction. Must run before the
# sidebar widgets are created so their keys can be seeded.
if VIEW_STATE_KEY not in st.session_state:
    st.session_state[VIEW_STATE_KEY] = initialize_view()
    sidebar_ui.push_view_to_widgets(st.session_state[VIEW_STATE_KEY])

view = st.session_state[VIEW_STATE_KEY]

# =============================================================================
# MAIN APPLICATION HEADER
# =============================================================================
col_title, col_badge = st.columns([4, 1])
with col_title:
    st.title(f"🧪 {APP_TITLE}")
with col_badge:
    st.markdown(
        f"""
    <div style="background: linear-gradient(90deg, #2E86AB, #A23B72);
                padding: 8px 16px; border-radius: 20px; text-align: center;
                color: white; font-weight: bold; margin-top: 20px;">
        v{_APP_VERSION_SAFE}
    </div>
    """,
        unsafe_allow_html=True,
    )

st.markdown("""
**Dye Removal Efficiency Calculator**
*Empirical estimate from contact time, adsorbent dose and initial dye concentration*
""")

# Blocking notice from the last Predict click (shown once)
_alert = view.pop_alert()
if _alert:
    st.error(_alert, icon="🚫")

st.markdown("---")

# =============================================================================
# SIDEBAR
# =============================================================================
st.sidebar.header("⚙️ Operating Conditions")
sidebar_ui.render_sidebar_content()

with st.sidebar.expander("📈 Response curve settings", expanded=False):
    st.slider(
        "Points per curve",
        min_value=21,
        max_value=401,
        step=10,
        key="response_points",
    )

# =============================================================================
# MAIN TABS
# =============================================================================
tab_predict, tab_response, tab_export, tab_about = st.tabs(
    [
        "🧪 Prediction",
        "📈 Response Curves",
        "📦 Export",
        "ℹ️ About",
    ]
)

with tab_predict:
    predictor_tab.render()

with tab_response:
    response_tab.render()

with tab_export:
    report_tab.render()

with tab_about:
    home_tab.render()

# =============================================================================
# FOOTER
# =============================================================================
st.markdown("---")
st.markdown(
    f"""
<div style="text-align: center; color: #666; padding: 20px;">
    <p><strong>DyeLab Predictor v{_APP_VERSION_SAFE}</strong></p>
    <p style="font-size: 0.8em;">
        Simulation based on an empirical model. Confirm designs with experimental data.
    </p>
</div>
""",
    unsafe_allow_html=True,
)

# =============================================================================
# FIRST-TIME USER WELCOME
# =============================================================================
if st.session_state.get("first_time", True):
    st.session_state["first_time"] = False
    st.toast(
        f"Welcome to DyeLab Predictor v{APP_VERSION}! Adjust the conditions and click Predict.",
        icon="👋",
    )
