# validation.py
"""
DyeLab Predictor - Input Validation Module
==========================================

Parsing and validation of the three operating-condition fields.
Provides:
- Lenient numeric parsing of free-form field text
- Positivity and nominal-range checks
- Aggregated validation reports for the UI

Unparseable fields are errors (they block a prediction); values outside the
nominal range are warnings only.
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .config import DIMENSION_LABELS, DIMENSIONS, NOMINAL_RANGES

__all__ = [
    # Classes
    "ValidationLevel",
    "ValidationResult",
    "ValidationReport",
    # Parsing
    "parse_float",
    "read_field",
    "clamp",
    # Validators
    "validate_positive",
    "validate_range",
    "validate_prediction_inputs",
    # Utilities
    "format_validation_errors",
]

# Leading decimal literal, optionally signed, optionally with exponent
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_PREFIX = re.compile(r"^([+-]?)Infinity")

# =============================================================================
# VALIDATION RESULT CLASSES
# =============================================================================


class ValidationLevel(Enum):
    """Validation severity levels."""

    ERROR = "error"  # Critical - blocks prediction
    WARNING = "warning"  # Potential issue - allows continuation
    INFO = "info"  # Informational only


@dataclass
class ValidationResult:
    """
    Result of a validation check.

    Attributes
    ----------
    is_valid : bool
        Whether the validation passed
    level : ValidationLevel
        Severity level of any issues
    message : str
        Human-readable description
    field : str
        Name of the field/parameter being validated
    value : Any
        The actual value that was validated
    suggestion : str, optional
        Suggested fix for the issue
    """

    is_valid: bool
    level: ValidationLevel
    message: str
    field: str
    value: Any = None
    suggestion: str | None = None

    def __bool__(self) -> bool:
        return self.is_valid


@dataclass
class ValidationReport:
    """
    Aggregated validation results.

    Attributes
    ----------
    is_valid : bool
        True if no errors (warnings allowed)
    errors : list[ValidationResult]
        Critical validation failures
    warnings : list[ValidationResult]
        Non-critical issues
    info : list[ValidationResult]
        Informational messages
    """

    is_valid: bool
    errors: list[ValidationResult]
    warnings: list[ValidationResult]
    info: list[ValidationResult]

    def __bool__(self) -> bool:
        return self.is_valid

    @property
    def error_count(self) -> int:
        """Number of critical validation errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of non-critical warnings."""
        return len(self.warnings)

    @property
    def has_warnings(self) -> bool:
        """Check if report contains any warnings."""
        return self.warning_count > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": [{"message": e.message, "field": e.field} for e in self.errors],
            "warnings": [{"message": w.message, "field": w.field} for w in self.warnings],
            "info": [{"message": i.message, "field": i.field} for i in self.info],
        }


# =============================================================================
# PARSING
# =============================================================================


def parse_float(raw: Any) -> float | None:
    """
    Parse the leading number of a field value.

    Mirrors browser ``parseFloat`` semantics: leading whitespace is skipped and
    trailing garbage after a valid number is ignored ("12 min" -> 12.0,
    "0,5" -> 0.0). Integers too large for a float read as +/-inf.

    Returns
    -------
    float or None
        None when no number can be read
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        try:
            return float(raw)
        except OverflowError:
            return float("inf") if raw > 0 else float("-inf")
    if isinstance(raw, float):
        return None if math.isnan(raw) else float(raw)

    text = str(raw).strip()
    match = _NUMBER_PREFIX.match(text)
    if match:
        return float(match.group(0))

    match = _INFINITY_PREFIX.match(text)
    if match:
        return float("-inf") if match.group(1) == "-" else float("inf")
    return None


def read_field(number_text: Any, slider_value: Any) -> float | None:
    """Read one dimension: numeric field first, slider value when the field is empty."""
    if number_text is None or str(number_text) == "":
        return parse_float(slider_value)
    return parse_float(number_text)


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a number into [min_val, max_val]."""
    return min(max(value, min_val), max_val)


# =============================================================================
# BASIC VALIDATORS
# =============================================================================


def validate_positive(value: float | int | None, field: str) -> ValidationResult:
    """
    Validate that a value is a positive finite number.

    Parameters
    ----------
    value : float or int
        Value to validate
    field : str
        Name of the field for error messages

    Returns
    -------
    ValidationResult
    """
    try:
        val = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return ValidationResult(
            is_valid=False,
            level=ValidationLevel.ERROR,
            message=f"{field} must be a number",
            field=field,
            value=value,
            suggestion=f"Enter a valid positive number for {field}",
        )

    if not math.isfinite(val):
        return ValidationResult(
            is_valid=False,
            level=ValidationLevel.ERROR,
            message=f"{field} cannot be NaN or infinite",
            field=field,
            value=value,
        )

    if val <= 0:
        return ValidationResult(
            is_valid=False,
            level=ValidationLevel.ERROR,
            message=f"{field} must be positive (got {val:g})",
            field=field,
            value=val,
            suggestion="Use a positive value",
        )

    return ValidationResult(
        is_valid=True,
        level=ValidationLevel.INFO,
        message=f"{field} is valid",
        field=field,
        value=val,
    )


def validate_range(
    value: float | int,
    field: str,
    min_val: float | None = None,
    max_val: float | None = None,
) -> ValidationResult:
    """
    Validate that a value is within an inclusive range.

    Parameters
    ----------
    value : float or int
        Value to validate
    field : str
        Name of the field
    min_val : float, optional
        Minimum allowed value
    max_val : float, optional
        Maximum allowed value

    Returns
    -------
    ValidationResult
    """
    try:
        val = float(value)
    except (TypeError, ValueError, OverflowError):
        return ValidationResult(
            is_valid=False,
            level=ValidationLevel.ERROR,
            message=f"{field} must be a number",
            field=field,
            value=value,
        )

    if min_val is not None and not val >= min_val:
        return ValidationResult(
            is_valid=False,
            level=ValidationLevel.ERROR,
            message=f"{field} must be ≥ {min_val:g} (got {val:g})",
            field=field,
            value=val,
        )

    if max_val is not None and not val <= max_val:
        return ValidationResult(
            is_valid=False,
            level=ValidationLevel.ERROR,
            message=f"{field} must be ≤ {max_val:g} (got {val:g})",
            field=field,
            value=val,
        )

    return ValidationResult(
        is_valid=True,
        level=ValidationLevel.INFO,
        message=f"{field} is within valid range",
        field=field,
        value=val,
    )


# =============================================================================
# PREDICTION INPUT VALIDATION
# =============================================================================


def validate_prediction_inputs(values: dict[str, float | None]) -> ValidationReport:
    """
    Validate parsed operating conditions before a prediction.

    Parameters
    ----------
    values : dict
        Parsed value per dimension (None when the field could not be parsed)

    Returns
    -------
    ValidationReport
        Errors for unparseable fields; warnings for non-positive values and
        values outside the nominal range.
    """
    errors: list[ValidationResult] = []
    warnings: list[ValidationResult] = []
    info: list[ValidationResult] = []

    for dim in DIMENSIONS:
        label = DIMENSION_LABELS[dim]
        value = values.get(dim)

        if value is None:
            errors.append(
                ValidationResult(
                    is_valid=False,
                    level=ValidationLevel.ERROR,
                    message=f"{label} is not a valid number",
                    field=dim,
                    value=value,
                    suggestion=f"Enter a numeric value for {label.lower()}",
                )
            )
            continue

        positive = validate_positive(value, label)
        if not positive:
            positive.level = ValidationLevel.WARNING
            positive.field = dim
            warnings.append(positive)
            continue

        lo, hi = NOMINAL_RANGES[dim]
        in_range = validate_range(value, label, lo, hi)
        if in_range:
            info.append(in_range)
        else:
            in_range.level = ValidationLevel.WARNING
            in_range.field = dim
            in_range.suggestion = f"The model was fitted for {lo:g}–{hi:g}"
            warnings.append(in_range)

    return ValidationReport(
        is_valid=len(errors) == 0,
        errors=errors,
        warnings=warnings,
        info=info,
    )


def format_validation_errors(report: ValidationReport) -> str:
    """
    Format a validation report as markdown for display.

    Parameters
    ----------
    report : ValidationReport
        Report to format

    Returns
    -------
    str
        Markdown-formatted message
    """
    lines = []

    if report.errors:
        lines.append("**❌ Errors:**")
        for e in report.errors:
            lines.append(f"- {e.message}")
            if e.suggestion:
                lines.append(f"  - 💡 {e.suggestion}")

    if report.warnings:
        lines.append("**⚠️ Warnings:**")
        for w in report.warnings:
            lines.append(f"- {w.message}")
            if w.suggestion:
                lines.append(f"  - 💡 {w.suggestion}")

    if not lines:
        lines.append("✅ All validations passed")

    return "\n".join(lines)
