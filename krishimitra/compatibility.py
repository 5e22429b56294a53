"""Variety pH compatibility: advisory annotation only, never blocks a recommendation."""

from krishimitra.catalog import CropVariety
from krishimitra.inputs import validate_ph
from krishimitra.models import CompatibilityResult


def check_compatibility(variety: CropVariety, ph: float) -> CompatibilityResult:
    """True when min_ph <= ph <= max_ph (both bounds inclusive)."""
    ph = validate_ph(ph)
    return CompatibilityResult(
        is_compatible=variety.min_ph <= ph <= variety.max_ph,
        optimal_range=(variety.min_ph, variety.max_ph),
    )
