"""
Fertilizer estimator: adjusted N, P, K dosage (kg/ha) and a Low/Medium/High tier.

Adjustment:
    N = round(base_N × ph_multiplier × temperature_multiplier)
    P = round(base_P × ph_multiplier)
    K = round(base_K × ph_multiplier)

    ph_multiplier          : 1.3 outside [5.5, 7.5], 0.9 inside [6.0, 7.0], else 1.0
    temperature_multiplier : 0.8 above 35 °C, 0.85 below 20 °C, else 1.0 (nitrogen only)

Tier on total = N + P + K:
    total < 100        → Low
    100 ≤ total < 180  → Medium
    total ≥ 180        → High
"""

import numpy as np

from krishimitra.config import (
    PH_EXTREME_LOW,
    PH_EXTREME_HIGH,
    PH_OPTIMAL_LOW,
    PH_OPTIMAL_HIGH,
    PH_MULT_EXTREME,
    PH_MULT_OPTIMAL,
    PH_MULT_NEUTRAL,
    HOT_TEMPERATURE_C,
    COLD_TEMPERATURE_C,
    TEMP_MULT_HOT,
    TEMP_MULT_COLD,
    TEMP_MULT_NEUTRAL,
    TIER_MEDIUM_MIN,
    TIER_HIGH_MIN,
)
from krishimitra.catalog import CropCategory
from krishimitra.inputs import validate_ph, validate_temperature
from krishimitra.models import FertilizerEstimate, FertilizerTier, NPKDosage


def ph_multiplier(ph: float) -> float:
    if ph < PH_EXTREME_LOW or ph > PH_EXTREME_HIGH:
        return PH_MULT_EXTREME
    if PH_OPTIMAL_LOW <= ph <= PH_OPTIMAL_HIGH:
        return PH_MULT_OPTIMAL
    return PH_MULT_NEUTRAL


def temperature_multiplier(temperature_c: float) -> float:
    if temperature_c > HOT_TEMPERATURE_C:
        return TEMP_MULT_HOT
    if temperature_c < COLD_TEMPERATURE_C:
        return TEMP_MULT_COLD
    return TEMP_MULT_NEUTRAL


def round_half_up(value: float) -> int:
    """Nearest integer, ties away from zero (Python's round() would go to even)."""
    return int(np.sign(value) * np.floor(abs(value) + 0.5))


def classify_tier(total_npk: int) -> FertilizerTier:
    if total_npk < TIER_MEDIUM_MIN:
        return FertilizerTier.LOW
    if total_npk < TIER_HIGH_MIN:
        return FertilizerTier.MEDIUM
    return FertilizerTier.HIGH


def estimate(category: CropCategory, ph: float, temperature_c: float) -> FertilizerEstimate:
    """
    Compute NPK dosage and tier for a crop category.

    Raises InvalidInputError for NaN / out-of-range pH or temperature.
    """
    ph = validate_ph(ph)
    temperature_c = validate_temperature(temperature_c)

    ph_mult = ph_multiplier(ph)
    temp_mult = temperature_multiplier(temperature_c)

    npk = NPKDosage(
        nitrogen_kg_ha=round_half_up(category.base_nitrogen * ph_mult * temp_mult),
        phosphorus_kg_ha=round_half_up(category.base_phosphorus * ph_mult),
        potassium_kg_ha=round_half_up(category.base_potassium * ph_mult),
    )
    return FertilizerEstimate(tier=classify_tier(npk.total), npk=npk)


def format_dosage(kg_per_ha: int) -> str:
    """Presentation helper: 72 → '72 kg/ha'."""
    return f"{kg_per_ha} kg/ha"
