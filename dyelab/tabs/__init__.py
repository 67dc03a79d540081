# tabs/__init__.py
"""
DyeLab Predictor - Tab Modules
==============================

Each tab module exposes ``render()``. Modules are resolved lazily (PEP 562) so
the app only imports Plotly/python-docx when the tab that needs them renders.
"""

import importlib
from typing import Any

__all__ = [
    "home_tab",
    "predictor_tab",
    "response_tab",
    "report_tab",
]


def __getattr__(name: str) -> Any:
    """Lazy-load tab modules on first access."""
    if name in __all__:
        return importlib.import_module(f"{__name__}.{name}")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list:
    """List available modules for IDE autocompletion."""
    return __all__
