"""
Irrigation advisor tests: thresholds, rainfall weighting, hot-weather adjustment.
Run from project root: python -m pytest tests/test_irrigation.py -v
"""

import math
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from krishimitra.catalog import lookup_category
from krishimitra.errors import InvalidInputError
from krishimitra.irrigation import adjusted_threshold, decide, effective_moisture, moisture_threshold


def test_rice_dry_field_needs_water():
    """rice threshold 70: moisture 50 → irrigate; moisture 75 → no."""
    rice = lookup_category("rice")
    assert decide(rice, 50, 0, 28) is True
    assert decide(rice, 75, 0, 28) is False


def test_hot_weather_raises_threshold():
    """wheat threshold 45: at 52 % moisture, 33 °C → irrigate (55), 30 °C → no (45)."""
    wheat = lookup_category("wheat")
    assert decide(wheat, 52, 0, 33) is True
    assert decide(wheat, 52, 0, 30) is False


def test_threshold_bump_starts_above_32():
    assert adjusted_threshold(45, 32.0) == 45
    assert adjusted_threshold(45, 32.1) == 55


def test_rainfall_counts_at_thirty_percent():
    """rice at 60 % moisture: dry → irrigate; 40 mm rain → 72 effective → no."""
    rice = lookup_category("rice")
    assert effective_moisture(60, 40) == pytest.approx(72.0)
    assert decide(rice, 60, 0, 28) is True
    assert decide(rice, 60, 40, 28) is False


def test_equal_to_threshold_is_enough_moisture():
    """Strict less-than: moisture exactly at the threshold needs no irrigation."""
    assert decide(lookup_category("maize"), 50, 0, 28) is False
    assert decide(lookup_category("maize"), 49.9, 0, 28) is True


def test_unknown_category_falls_back_to_50():
    """Unknown ids use threshold 50 and do not raise."""
    assert moisture_threshold("sugarcane") == 50
    assert moisture_threshold(None) == 50
    assert decide("sugarcane", 49, 0, 28) is True
    assert decide("sugarcane", 50, 0, 28) is False
    assert decide(None, 45, 0, 33) is True


def test_category_id_string_uses_table():
    assert moisture_threshold("rice") == 70
    assert moisture_threshold(" Potato ") == 55
    assert decide("jute", 59, 0, 28) is True


def test_decide_is_deterministic():
    potato = lookup_category("potato")
    assert decide(potato, 41.3, 12.5, 34.2) == decide(potato, 41.3, 12.5, 34.2)


@pytest.mark.parametrize(
    "moisture, rainfall, temperature, field",
    [
        (101, 0, 28, "soil_moisture_pct"),
        (-1, 0, 28, "soil_moisture_pct"),
        (math.nan, 0, 28, "soil_moisture_pct"),
        (50, -5, 28, "rainfall_mm"),
        (50, math.nan, 28, "rainfall_mm"),
        (50, 0, math.inf, "temperature_c"),
    ],
)
def test_invalid_inputs_fail_fast(moisture, rainfall, temperature, field):
    with pytest.raises(InvalidInputError) as exc_info:
        decide(lookup_category("rice"), moisture, rainfall, temperature)
    assert exc_info.value.field == field


if __name__ == "__main__":
    import subprocess
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", __file__, "-v", "-s"]))
