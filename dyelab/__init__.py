# dyelab/__init__.py
"""
DyeLab Predictor - Dye Removal Efficiency Calculator
====================================================

A small Streamlit application estimating dye-removal efficiency of an adsorption
experiment from three empirical inputs:
- Contact time
- Adsorbent dose
- Initial dye concentration

The result is accompanied by a quality tag, a lab-range tag and interpretation
bullets, and can be explored with response curves or exported as CSV/Word.

Usage:
    # Run the Streamlit app
    dyelab  # CLI command after pip install

    # Or via Python
    python -m dyelab

    # Or programmatic access
    from dyelab import models, prediction

Example:
    >>> from dyelab.models import predict
    >>> predict(10, 0.1, 80)
    64.5
"""

try:
    from importlib.metadata import version
    __version__ = version("dyelab-predictor")
except Exception:
    __version__ = "dev"
__license__ = "MIT"

# Public API - lazy imports for fast startup
__all__ = [
    "__version__",
    "main",
    "models",
    "prediction",
    "validation",
    "config",
]


def main() -> None:
    """
    Launch the DyeLab Predictor Streamlit application.

    This is the entry point for the `dyelab` console script.
    Extra command line arguments are passed through to ``streamlit run``.
    """
    import subprocess
    import sys
    from pathlib import Path

    app_path = Path(__file__).parent / "app.py"

    sys.exit(
        subprocess.call(
            [
                sys.executable,
                "-m",
                "streamlit",
                "run",
                str(app_path),
                "--server.headless=true",
                "--browser.gatherUsageStats=false",
                *sys.argv[1:],
            ]
        )
    )


import types as types_module


def _lazy_import(name: str) -> types_module.ModuleType:
    """Lazy import submodules for faster startup."""
    import importlib

    return importlib.import_module(f".{name}", __package__)


def __getattr__(name: str) -> types_module.ModuleType:
    """Enable lazy loading of submodules."""
    if name in ("models", "prediction", "validation", "config"):
        return _lazy_import(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
