"""
Recommendation history: append-only CSV store keyed by user id.

Each row records one recommendation as shown to the user (crop, location, pH,
tier, NPK, irrigation, weather, advice text) with a UTC timestamp. Rows are
never rewritten. The recommendation core never reads this store.

Schema (data/recommendations_history.csv):
    id, user_id, created_at, crop_type, variety_id, location, soil_ph,
    fertilizer_level, nitrogen_kg_ha, phosphorus_kg_ha, potassium_kg_ha,
    irrigation_needed, weather_temperature, weather_humidity, weather_rainfall,
    soil_moisture, recommendations_text
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from krishimitra.config import HISTORY_PATH
from krishimitra.models import Recommendation, WeatherSnapshot

log = logging.getLogger(__name__)

COLUMNS = [
    "id", "user_id", "created_at", "crop_type", "variety_id", "location", "soil_ph",
    "fertilizer_level", "nitrogen_kg_ha", "phosphorus_kg_ha", "potassium_kg_ha",
    "irrigation_needed", "weather_temperature", "weather_humidity", "weather_rainfall",
    "soil_moisture", "recommendations_text",
]

_write_lock = threading.Lock()


class HistoryStore:
    def __init__(self, path: Path | None = None):
        self.path = Path(path or HISTORY_PATH)

    def append(
        self,
        user_id: str,
        location: str,
        recommendation: Recommendation,
        weather: WeatherSnapshot,
        advice_text: str = "",
    ) -> dict:
        """Append one row; returns the stored row as a dict."""
        if not user_id:
            raise ValueError("user_id is required to save history")
        row = {
            "id":                   uuid.uuid4().hex,
            "user_id":              str(user_id),
            "created_at":           datetime.now(timezone.utc).isoformat(),
            "crop_type":            recommendation.category_id,
            "variety_id":           recommendation.variety_id,
            "location":             location or weather.location,
            "soil_ph":              recommendation.soil_ph,
            "fertilizer_level":     recommendation.fertilizer_tier.value,
            "nitrogen_kg_ha":       recommendation.npk.nitrogen_kg_ha,
            "phosphorus_kg_ha":     recommendation.npk.phosphorus_kg_ha,
            "potassium_kg_ha":      recommendation.npk.potassium_kg_ha,
            "irrigation_needed":    recommendation.irrigation_needed,
            "weather_temperature":  weather.temperature_c,
            "weather_humidity":     weather.humidity_pct,
            "weather_rainfall":     weather.rainfall_mm,
            "soil_moisture":        weather.soil_moisture_pct,
            "recommendations_text": advice_text or "",
        }
        df = pd.DataFrame([row], columns=COLUMNS)
        with _write_lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            write_header = not self.path.exists()
            df.to_csv(self.path, mode="a", header=write_header, index=False)
        log.info("Saved recommendation %s for user %s to %s", row["id"], user_id, self.path)
        return row

    def _load(self) -> pd.DataFrame:
        if not self.path.exists():
            return pd.DataFrame(columns=COLUMNS)
        df = pd.read_csv(
            self.path,
            dtype={"id": str, "user_id": str, "variety_id": str, "recommendations_text": str},
            keep_default_na=False,
        )
        df["soil_ph"] = pd.to_numeric(df["soil_ph"], errors="coerce")
        df["irrigation_needed"] = df["irrigation_needed"].astype(str).str.lower() == "true"
        return df

    def entries_for(self, user_id: str) -> pd.DataFrame:
        """All rows for a user, newest first."""
        df = self._load()
        df = df[df["user_id"] == str(user_id)]
        return df.sort_values("created_at", ascending=False).reset_index(drop=True)

    def dashboard_stats(self, user_id: str) -> dict:
        """Total count, most-used crop, average soil pH, last activity timestamp."""
        df = self.entries_for(user_id)
        if df.empty:
            return {"total": 0, "most_used_crop": None, "avg_soil_ph": None, "last_activity": None}
        counts = df["crop_type"].value_counts()
        return {
            "total":          int(len(df)),
            "most_used_crop": str(counts.index[0]),
            "avg_soil_ph":    round(float(df["soil_ph"].mean()), 2),
            "last_activity":  str(df["created_at"].iloc[0]),
        }
