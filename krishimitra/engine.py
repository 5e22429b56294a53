"""
Recommendation engine: expose compute_recommendation().

Returns, for one crop variety, soil pH and weather snapshot:
  - fertilizer tier (Low / Medium / High) and NPK dosage in kg/ha
  - irrigation decision
  - pH compatibility with the variety's optimal band (advisory only)
  - explanation text

Pure and synchronous: no I/O, no shared state. Weather is fetched by the
caller (see krishimitra.weather) and passed in.
"""

import logging

from krishimitra.catalog import lookup_category, lookup_variety
from krishimitra.compatibility import check_compatibility
from krishimitra.fertilizer import estimate
from krishimitra.inputs import validate_ph, validate_percentage, validate_rainfall, validate_temperature
from krishimitra.irrigation import decide
from krishimitra.models import Recommendation, WeatherSnapshot
from krishimitra.soil_health import build_explanation

log = logging.getLogger(__name__)


def _validate_weather(weather: WeatherSnapshot) -> WeatherSnapshot:
    """Check every numeric weather field up front so the error names the first bad one."""
    validate_temperature(weather.temperature_c)
    validate_rainfall(weather.rainfall_mm)
    validate_percentage(weather.humidity_pct, "humidity_pct")
    validate_percentage(weather.soil_moisture_pct, "soil_moisture_pct")
    return weather


def compute_recommendation(
    variety_id: str,
    soil_ph: float,
    weather: WeatherSnapshot,
) -> Recommendation:
    """
    Full recommendation for one request.

    Parameters
    ----------
    variety_id : str
        Catalog id, e.g. "rice_miniket".
    soil_ph : float
        Soil pH in [4.0, 9.0].
    weather : WeatherSnapshot
        Temperature, rainfall, humidity and soil moisture.

    Raises
    ------
    NotFoundError      : unknown variety (or its category)
    InvalidInputError  : NaN / out-of-range numeric input
    """
    variety = lookup_variety(variety_id)
    category = lookup_category(variety.category)
    soil_ph = validate_ph(soil_ph)
    _validate_weather(weather)

    compatibility = check_compatibility(variety, soil_ph)
    fert = estimate(category, soil_ph, weather.temperature_c)
    irrigate = decide(category, weather.soil_moisture_pct, weather.rainfall_mm, weather.temperature_c)

    explanation = build_explanation(
        category.id,
        fert.tier,
        irrigate,
        soil_ph,
        weather.soil_moisture_pct,
        weather.temperature_c,
        weather.rainfall_mm,
    )

    log.debug(
        "variety=%s ph=%.2f temp=%.1f -> tier=%s npk=%d irrigate=%s compatible=%s",
        variety.id, soil_ph, weather.temperature_c, fert.tier.value,
        fert.npk.total, irrigate, compatibility.is_compatible,
    )

    return Recommendation(
        fertilizer_tier=fert.tier,
        npk=fert.npk,
        irrigation_needed=irrigate,
        variety_id=variety.id,
        category_id=category.id,
        soil_ph=soil_ph,
        compatibility=compatibility,
        explanation=explanation,
    )
