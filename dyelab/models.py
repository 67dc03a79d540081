# models.py
"""
DyeLab Predictor - Empirical Removal Model
==========================================

Affine removal-efficiency model over normalized operating conditions:

    R(%) = 60 + 30 × t/120 + 20 × m/1 + 10 × (80 − C0)/70

clamped to [60, 99] % and rounded half-up to one decimal.

Parameters
----------
t  : contact time (min)
m  : adsorbent dose (g/L)
C0 : initial dye concentration (mg/L)

The model is a screening estimate, not a fitted isotherm/kinetic model.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .config import EFFICIENCY_MAX, EFFICIENCY_MIN, MODEL_COEFFICIENTS, RESULT_DECIMALS

__all__ = [
    "removal_efficiency_model",
    "predict",
    "round_half_up",
    "term_contributions",
]


def round_half_up(value: ArrayLike, decimals: int = RESULT_DECIMALS) -> NDArray[np.floating[Any]]:
    """Round half-up (ties towards +inf) to the given number of decimals."""
    scale = 10**decimals
    return np.floor(np.asarray(value, dtype=float) * scale + 0.5) / scale


def removal_efficiency_model(
    time: ArrayLike, dose: ArrayLike, concentration: ArrayLike
) -> NDArray[np.floating[Any]]:
    """
    Vectorized removal efficiency (%).

    Inputs broadcast against each other. Any element with a non-positive or
    non-finite input yields NaN.

    Parameters
    ----------
    time : contact time (min)
    dose : adsorbent dose (g/L)
    concentration : initial dye concentration (mg/L)

    Returns
    -------
    np.ndarray
        Removal efficiency in [60, 99] %, one decimal, NaN where invalid
    """
    t, d, c = np.broadcast_arrays(
        np.asarray(time, dtype=float),
        np.asarray(dose, dtype=float),
        np.asarray(concentration, dtype=float),
    )
    k = MODEL_COEFFICIENTS

    valid = np.isfinite(t) & np.isfinite(d) & np.isfinite(c) & (t > 0) & (d > 0) & (c > 0)

    with np.errstate(invalid="ignore", over="ignore"):
        t_norm = t / k["time_scale"]
        d_norm = d / k["dose_scale"]
        c_norm = (k["conc_reference"] - c) / k["conc_span"]

        eff = (
            k["intercept"]
            + k["time_weight"] * t_norm
            + k["dose_weight"] * d_norm
            + k["conc_weight"] * c_norm
        )
        eff = np.clip(eff, EFFICIENCY_MIN, EFFICIENCY_MAX)
        eff = round_half_up(eff)

    return np.where(valid, eff, np.nan)


def term_contributions(time: float, dose: float, concentration: float) -> dict[str, float]:
    """
    Individual model terms (% removal) before clamping and rounding.

    Returns
    -------
    dict
        intercept, time, dose, concentration and their unclamped total;
        all NaN when the inputs are outside the model domain
    """
    k = MODEL_COEFFICIENTS
    names = ("intercept", "time", "dose", "concentration", "total")

    try:
        t, d, c = float(time), float(dose), float(concentration)
    except (TypeError, ValueError, OverflowError):
        return dict.fromkeys(names, float("nan"))
    if not all(np.isfinite(v) and v > 0 for v in (t, d, c)):
        return dict.fromkeys(names, float("nan"))

    terms = {
        "intercept": k["intercept"],
        "time": k["time_weight"] * t / k["time_scale"],
        "dose": k["dose_weight"] * d / k["dose_scale"],
        "concentration": k["conc_weight"] * (k["conc_reference"] - c) / k["conc_span"],
    }
    terms["total"] = sum(terms.values())
    return terms


def predict(time: float, dose: float, concentration: float) -> float:
    """
    Predict removal efficiency (%) for a single operating point.

    Returns NaN when any input is ≤ 0 or not finite; never raises for numeric
    input.

    Example:
        >>> predict(10, 0.1, 80)
        64.5
        >>> predict(90, 0.75, 40)
        99.0
    """
    try:
        t, d, c = float(time), float(dose), float(concentration)
    except (TypeError, ValueError, OverflowError):
        return float("nan")
    return float(removal_efficiency_model(t, d, c))
