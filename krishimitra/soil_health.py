"""
Soil and weather interpretation for display.
- THRESHOLDS: approximate agronomic ranges used for warning messages.
- ph_label: the acidic / good / alkaline badge shown next to the pH slider.
- condition_messages: list of warnings for the current soil pH and weather.
- build_explanation: deterministic paragraph explaining a recommendation.
None of this feeds back into the fertilizer or irrigation decision.
"""

from krishimitra.config import PH_EXTREME_LOW, PH_EXTREME_HIGH, PH_OPTIMAL_LOW, PH_OPTIMAL_HIGH
from krishimitra.models import FertilizerTier, WeatherSnapshot

THRESHOLDS = {
    "ph": {"low": PH_EXTREME_LOW, "high": PH_EXTREME_HIGH},
    "temperature_c": {"low": 18, "high": 32},
    "rainfall_mm": {"low": 0, "high": 50},
    "humidity_pct": {"low": 40, "high": 90},
    "soil_moisture_pct": {"low": 30, "high": 85},
}

MESSAGES = {
    ("ph", "low"): "Soil is acidic. Nutrient availability may be limited; consider liming to raise pH gradually.",
    ("ph", "high"): "Soil is alkaline. Micronutrient uptake (zinc, iron) may suffer.",
    ("temperature_c", "low"): "Low temperature. Nutrient uptake slows; split nitrogen doses.",
    ("temperature_c", "high"): "High temperature. Water demand rises; irrigate early morning or evening.",
    ("rainfall_mm", "high"): "Heavy rain recorded. Delay fertilizer application to avoid nutrient runoff.",
    ("humidity_pct", "low"): "Low humidity. Mulching helps keep soil moisture.",
    ("humidity_pct", "high"): "Very high humidity. Avoid foliar sprays; watch for fungal disease.",
    ("soil_moisture_pct", "low"): "Soil is dry. Check irrigation channels before the next application.",
    ("soil_moisture_pct", "high"): "Soil is waterlogged. Ensure field drainage.",
}


def _get_level(value: float, key: str) -> str:
    """Return 'low', 'ok', or 'high' based on thresholds."""
    t = THRESHOLDS.get(key, {})
    if not t:
        return "ok"
    if value < t["low"]:
        return "low"
    if value > t["high"]:
        return "high"
    return "ok"


def ph_label(ph: float) -> str:
    """'acidic', 'alkaline', 'good' (optimal band) or 'ok'."""
    if ph < PH_EXTREME_LOW:
        return "acidic"
    if ph > PH_EXTREME_HIGH:
        return "alkaline"
    if PH_OPTIMAL_LOW <= ph <= PH_OPTIMAL_HIGH:
        return "good"
    return "ok"


def condition_messages(ph: float, weather: WeatherSnapshot | None = None) -> list[str]:
    values = {"ph": ph}
    if weather is not None:
        values.update({
            "temperature_c":     weather.temperature_c,
            "rainfall_mm":       weather.rainfall_mm,
            "humidity_pct":      weather.humidity_pct,
            "soil_moisture_pct": weather.soil_moisture_pct,
        })
    messages = []
    for key, value in values.items():
        level = _get_level(value, key)
        msg = MESSAGES.get((key, level))
        if msg:
            messages.append(msg)
    return messages


def build_explanation(
    crop_name: str,
    tier: FertilizerTier,
    irrigation_needed: bool,
    ph: float,
    moisture_pct: float,
    temperature_c: float,
    rainfall_mm: float,
) -> str:
    crop = (crop_name or "").strip().capitalize()
    parts = [f"Based on the analysis of your {crop} field conditions: "]

    if ph < PH_OPTIMAL_LOW:
        parts.append(
            f"Your soil pH of {ph:.1f} is slightly acidic, which may limit nutrient availability. "
            "Consider applying lime to raise pH gradually. "
        )
    elif ph > PH_EXTREME_HIGH:
        parts.append(f"Your soil pH of {ph:.1f} is alkaline, which can affect micronutrient uptake. ")
    else:
        parts.append(f"Your soil pH of {ph:.1f} is within the optimal range for {crop}. ")

    parts.append(
        f"A {tier.value.lower()} fertilizer application is recommended based on crop "
        "requirements and current soil conditions. "
    )

    if irrigation_needed:
        parts.append(
            f"With soil moisture at {moisture_pct:g}% and recent rainfall of {rainfall_mm:g}mm, "
            f"irrigation is needed to support optimal {crop} growth"
        )
        if temperature_c > 30:
            parts.append(
                f", especially given the high temperature of {temperature_c:g}°C which increases water demand."
            )
        else:
            parts.append(".")
    else:
        parts.append(
            f"Current moisture levels ({moisture_pct:g}%) combined with {rainfall_mm:g}mm rainfall "
            "provide adequate water for your crop. Monitor conditions and reassess in 2-3 days."
        )
    return "".join(parts)
