"""
Input validation for the recommendation core.
Every check fails fast with InvalidInputError naming the field; nothing is clamped.
"""

import numpy as np

from krishimitra.config import (
    PH_MIN,
    PH_MAX,
    PCT_MIN,
    PCT_MAX,
    TEMPERATURE_MIN_C,
    TEMPERATURE_MAX_C,
    RAINFALL_MIN_MM,
)
from krishimitra.errors import InvalidInputError


def _as_finite(value, field: str) -> float:
    """Coerce to float and reject NaN / inf / non-numeric values."""
    if isinstance(value, bool):
        raise InvalidInputError(field, f"{field} must be a number, got {value!r}")
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(field, f"{field} must be a number, got {value!r}") from None
    if not np.isfinite(v):
        raise InvalidInputError(field, f"{field} must be finite, got {v}")
    return v


def _in_range(value, field: str, lo: float | None, hi: float | None) -> float:
    v = _as_finite(value, field)
    if lo is not None and v < lo:
        raise InvalidInputError(field, f"{field}={v} is below the allowed minimum {lo}")
    if hi is not None and v > hi:
        raise InvalidInputError(field, f"{field}={v} is above the allowed maximum {hi}")
    return v


def validate_ph(ph, field: str = "soil_ph") -> float:
    return _in_range(ph, field, PH_MIN, PH_MAX)


def validate_percentage(value, field: str) -> float:
    return _in_range(value, field, PCT_MIN, PCT_MAX)


def validate_temperature(temperature_c, field: str = "temperature_c") -> float:
    return _in_range(temperature_c, field, TEMPERATURE_MIN_C, TEMPERATURE_MAX_C)


def validate_rainfall(rainfall_mm, field: str = "rainfall_mm") -> float:
    return _in_range(rainfall_mm, field, RAINFALL_MIN_MM, None)
