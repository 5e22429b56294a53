"""
Irrigation advisor: single-shot decision from soil moisture, recent rain and temperature.

    effective_moisture = moisture_pct + rainfall_mm × 0.3
    threshold          = category moisture threshold (50 for unknown categories)
    adjusted_threshold = threshold + 10 when temperature > 32 °C
    irrigation_needed  = effective_moisture < adjusted_threshold
"""

import logging

from krishimitra.config import (
    CROP_CATEGORY_TABLE,
    DEFAULT_MOISTURE_THRESHOLD,
    RAINFALL_MOISTURE_WEIGHT,
    HOT_WEATHER_IRRIGATION_C,
    HOT_WEATHER_THRESHOLD_BUMP,
)
from krishimitra.catalog import CropCategory
from krishimitra.inputs import validate_percentage, validate_rainfall, validate_temperature

log = logging.getLogger(__name__)


def moisture_threshold(category: CropCategory | str | None) -> float:
    """Threshold for a category object or id; unknown ids fall back to the default."""
    if isinstance(category, CropCategory):
        return category.moisture_threshold
    row = CROP_CATEGORY_TABLE.get((category or "").strip().lower())
    if row is None:
        log.debug("No moisture threshold for category %r, using default %.0f", category, DEFAULT_MOISTURE_THRESHOLD)
        return DEFAULT_MOISTURE_THRESHOLD
    return float(row["moisture"])


def effective_moisture(moisture_pct: float, rainfall_mm: float) -> float:
    return moisture_pct + rainfall_mm * RAINFALL_MOISTURE_WEIGHT


def adjusted_threshold(threshold: float, temperature_c: float) -> float:
    if temperature_c > HOT_WEATHER_IRRIGATION_C:
        return threshold + HOT_WEATHER_THRESHOLD_BUMP
    return threshold


def decide(
    category: CropCategory | str | None,
    moisture_pct: float,
    rainfall_mm: float,
    temperature_c: float,
) -> bool:
    """True when the field needs irrigation."""
    moisture_pct = validate_percentage(moisture_pct, "soil_moisture_pct")
    rainfall_mm = validate_rainfall(rainfall_mm)
    temperature_c = validate_temperature(temperature_c)

    effective = effective_moisture(moisture_pct, rainfall_mm)
    bar = adjusted_threshold(moisture_threshold(category), temperature_c)
    return effective < bar
