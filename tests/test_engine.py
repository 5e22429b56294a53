"""
End-to-end recommendation tests: compute_recommendation, explanation text, soil notes.
Run from project root: python -m pytest tests/test_engine.py -v
"""

import math
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from krishimitra.engine import compute_recommendation
from krishimitra.errors import InvalidInputError, NotFoundError
from krishimitra.models import FertilizerTier, WeatherSnapshot
from krishimitra.soil_health import build_explanation, condition_messages, ph_label


def _weather(temperature=28.0, rainfall=0.0, humidity=70.0, moisture=50.0) -> WeatherSnapshot:
    return WeatherSnapshot(
        temperature_c=temperature,
        rainfall_mm=rainfall,
        humidity_pct=humidity,
        soil_moisture_pct=moisture,
        description="clear sky",
        location="Dhaka",
    )


def test_rice_miniket_recommendation():
    rec = compute_recommendation("rice_miniket", 6.5, _weather())
    assert rec.fertilizer_tier == FertilizerTier.MEDIUM
    assert (rec.npk.nitrogen_kg_ha, rec.npk.phosphorus_kg_ha, rec.npk.potassium_kg_ha) == (72, 36, 36)
    assert rec.irrigation_needed is True
    assert rec.category_id == "rice"
    assert rec.compatibility.is_compatible is True
    assert rec.compatibility.optimal_range == (5.5, 7.0)
    assert "Rice" in rec.explanation


def test_incompatible_ph_still_recommends():
    """Compatibility only annotates; fertilizer and irrigation are still computed."""
    rec = compute_recommendation("rice_brri_dhan28", 7.0, _weather(moisture=80))
    assert rec.compatibility.is_compatible is False
    assert rec.fertilizer_tier == FertilizerTier.MEDIUM
    assert rec.irrigation_needed is False


def test_same_inputs_same_output():
    w = _weather(temperature=33.4, rainfall=7.5, moisture=47.2)
    assert compute_recommendation("wheat_bari_gom_30", 7.8, w) == compute_recommendation("wheat_bari_gom_30", 7.8, w)


def test_unknown_variety_is_not_found():
    with pytest.raises(NotFoundError) as exc_info:
        compute_recommendation("rice_golden", 6.5, _weather())
    assert exc_info.value.to_dict()["kind"] == "NotFound"


@pytest.mark.parametrize(
    "ph, weather, field",
    [
        (9.5, _weather(), "soil_ph"),
        (math.nan, _weather(), "soil_ph"),
        (6.5, _weather(temperature=math.nan), "temperature_c"),
        (6.5, _weather(rainfall=-1), "rainfall_mm"),
        (6.5, _weather(humidity=120), "humidity_pct"),
        (6.5, _weather(moisture=101), "soil_moisture_pct"),
    ],
)
def test_invalid_input_names_the_field(ph, weather, field):
    with pytest.raises(InvalidInputError) as exc_info:
        compute_recommendation("maize_pacific_984", ph, weather)
    err = exc_info.value
    assert err.field == field
    assert err.to_dict() == {"kind": "InvalidInput", "message": err.message, "field": field}


def test_to_dict_is_json_ready():
    d = compute_recommendation("maize_bari_hybrid_9", 6.5, _weather()).to_dict()
    assert d["fertilizer_tier"] == "High"
    assert d["npk"] == {"nitrogen_kg_ha": 90, "phosphorus_kg_ha": 45, "potassium_kg_ha": 45}
    assert d["compatibility"] == {"is_compatible": True, "optimal_range": [5.8, 7.0]}
    assert d["irrigation_needed"] is False


def test_ph_label():
    assert ph_label(5.0) == "acidic"
    assert ph_label(8.0) == "alkaline"
    assert ph_label(6.5) == "good"
    assert ph_label(5.7) == "ok"
    assert ph_label(7.3) == "ok"


def test_explanation_acidic_and_hot():
    text = build_explanation("rice", FertilizerTier.HIGH, True, 5.2, 40, 34, 0)
    assert "slightly acidic" in text
    assert "lime" in text
    assert "a high fertilizer application" in text.lower()
    assert "especially given the high temperature of 34°C" in text


def test_explanation_no_irrigation():
    text = build_explanation("wheat", FertilizerTier.LOW, False, 6.5, 60, 25, 10)
    assert "within the optimal range for Wheat" in text
    assert "reassess in 2-3 days" in text


def test_condition_messages():
    msgs = condition_messages(5.0, _weather(temperature=36, rainfall=80, humidity=95, moisture=20))
    joined = " ".join(msgs)
    assert "acidic" in joined
    assert "High temperature" in joined
    assert "Heavy rain" in joined
    assert "humidity" in joined
    assert "dry" in joined
    assert condition_messages(6.5, _weather()) == []


if __name__ == "__main__":
    import subprocess
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", __file__, "-v", "-s"]))
