"""
History store tests: append-only CSV per user and dashboard stats.
Run from project root: python -m pytest tests/test_history.py -v
"""

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from krishimitra.engine import compute_recommendation
from krishimitra.history import COLUMNS, HistoryStore
from krishimitra.models import WeatherSnapshot

WEATHER = WeatherSnapshot(temperature_c=28, rainfall_mm=0, humidity_pct=70, soil_moisture_pct=50, location="Dhaka")


@pytest.fixture
def store(tmp_path):
    return HistoryStore(tmp_path / "history.csv")


def _save(store, user_id, variety_id, ph, advice=""):
    rec = compute_recommendation(variety_id, ph, WEATHER)
    return store.append(user_id, "Dhaka", rec, WEATHER, advice)


def test_empty_store(store):
    assert store.entries_for("nobody").empty
    assert store.dashboard_stats("nobody") == {
        "total": 0, "most_used_crop": None, "avg_soil_ph": None, "last_activity": None,
    }


def test_append_writes_header_once(store):
    _save(store, "u1", "rice_miniket", 6.5)
    _save(store, "u1", "wheat_prodip", 6.0)
    lines = store.path.read_text(encoding="utf-8").splitlines()
    assert lines[0].split(",") == COLUMNS
    assert len(lines) == 3


def test_entries_are_per_user_and_newest_first(store):
    _save(store, "u1", "rice_miniket", 6.5, advice="Irrigate, then apply urea.")
    _save(store, "u2", "jute_robi1", 7.0)
    _save(store, "u1", "potato_granola", 5.4)

    df = store.entries_for("u1")
    assert len(df) == 2
    assert set(df["crop_type"]) == {"rice", "potato"}
    assert list(df["created_at"]) == sorted(df["created_at"], reverse=True)
    assert len(store.entries_for("u2")) == 1


def test_row_round_trip(store):
    row = _save(store, "u1", "rice_miniket", 6.5, advice="Irrigate, then apply urea.")
    df = store.entries_for("u1")
    stored = df.iloc[0]
    assert stored["id"] == row["id"]
    assert stored["fertilizer_level"] == "Medium"
    assert int(stored["nitrogen_kg_ha"]) == 72
    assert bool(stored["irrigation_needed"]) is True
    assert stored["recommendations_text"] == "Irrigate, then apply urea."


def test_dashboard_stats(store):
    _save(store, "u1", "rice_miniket", 6.0)
    _save(store, "u1", "rice_nazirshail", 7.0)
    _save(store, "u1", "wheat_prodip", 6.5)
    stats = store.dashboard_stats("u1")
    assert stats["total"] == 3
    assert stats["most_used_crop"] == "rice"
    assert stats["avg_soil_ph"] == pytest.approx(6.5)
    assert stats["last_activity"] == store.entries_for("u1")["created_at"].iloc[0]


def test_user_id_required(store):
    rec = compute_recommendation("rice_miniket", 6.5, WEATHER)
    with pytest.raises(ValueError):
        store.append("", "Dhaka", rec, WEATHER)


if __name__ == "__main__":
    import subprocess
    sys.exit(subprocess.call([sys.executable, "-m", "pytest", __file__, "-v", "-s"]))
