"""
Weather provider: current conditions for a Bangladesh location
===============================================================
Source: OpenWeatherMap current weather data
API   : GET https://api.openweathermap.org/data/2.5/weather?q=<location>,BD&units=metric

Usage (from project root):
    python -m krishimitra.weather --location Dhaka
    python -m krishimitra.weather --location Rangpur --api-key YOUR_KEY

Or call from code:
    from krishimitra.weather import get_weather
    snapshot = get_weather("Dhaka")

API key:
    Read from KRISHIMITRA_WEATHER_API_KEY (or .env) unless passed explicitly.

Soil moisture:
    The service does not report soil moisture, so it is estimated from
    humidity and recent rainfall (estimate_soil_moisture). Users can override
    it in the UI.
"""

import argparse
import logging
import os

import requests

from krishimitra.config import (
    WEATHER_API_URL,
    WEATHER_API_KEY_ENV,
    WEATHER_COUNTRY_SUFFIX,
    REQUEST_TIMEOUT,
)
from krishimitra.errors import UpstreamUnavailableError
from krishimitra.models import WeatherSnapshot

log = logging.getLogger(__name__)

# Soil moisture estimate: % = humidity × 0.6 + rainfall_mm × 1.5, capped at 100
HUMIDITY_MOISTURE_WEIGHT = 0.6
RAIN_MOISTURE_WEIGHT     = 1.5


def estimate_soil_moisture(humidity_pct: float, rainfall_mm: float) -> float:
    est = humidity_pct * HUMIDITY_MOISTURE_WEIGHT + rainfall_mm * RAIN_MOISTURE_WEIGHT
    return round(max(0.0, min(100.0, est)), 1)


def _make_request(location: str, api_key: str) -> dict:
    """One GET to the weather API. Returns parsed JSON dict."""
    params = {
        "q":     f"{location},{WEATHER_COUNTRY_SUFFIX}",
        "appid": api_key,
        "units": "metric",
    }
    resp = requests.get(WEATHER_API_URL, params=params, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return resp.json()


def parse_weather(payload: dict, location: str = "") -> WeatherSnapshot:
    """
    Convert an OpenWeatherMap response into a WeatherSnapshot.
    Rainfall is the last hour (rain.1h), else the last three hours (rain.3h), else 0.
    """
    try:
        main = payload["main"]
        temperature = float(main["temp"])
        humidity = float(main["humidity"])
    except (KeyError, TypeError, ValueError) as exc:
        raise UpstreamUnavailableError(f"Malformed weather response for '{location}': {exc}") from exc

    rain = payload.get("rain") or {}
    # A null reading means no rain reported for that window.
    rainfall = rain.get("1h")
    if rainfall is None:
        rainfall = rain.get("3h")
    try:
        rainfall = float(rainfall or 0.0)
    except (TypeError, ValueError) as exc:
        raise UpstreamUnavailableError(f"Malformed rainfall in weather response for '{location}': {exc}") from exc

    weather_list = payload.get("weather") or [{}]
    description = str(weather_list[0].get("description", ""))

    return WeatherSnapshot(
        temperature_c=round(temperature, 1),
        rainfall_mm=round(rainfall, 1),
        humidity_pct=humidity,
        soil_moisture_pct=estimate_soil_moisture(humidity, rainfall),
        description=description,
        location=location,
    )


def get_weather(location: str, api_key: str | None = None) -> WeatherSnapshot:
    """
    Fetch current weather for a location.

    Raises UpstreamUnavailableError when no key is configured, the request
    fails or times out, or the payload cannot be parsed. Never retries.
    """
    key = api_key or os.environ.get(WEATHER_API_KEY_ENV)
    if not key:
        raise UpstreamUnavailableError(
            f"No weather API key configured (set {WEATHER_API_KEY_ENV})."
        )
    if not location or not location.strip():
        raise UpstreamUnavailableError("No location given for weather lookup.")

    location = location.strip()
    log.info("Fetching weather for %s ...", location)
    try:
        payload = _make_request(location, key)
    except requests.RequestException as exc:
        log.warning("Weather lookup failed for %s: %s", location, exc)
        raise UpstreamUnavailableError(f"Weather service unavailable for '{location}': {exc}") from exc

    snapshot = parse_weather(payload, location)
    log.info(
        "Weather for %s: %.1f°C, %.1f mm rain, %.0f%% humidity",
        location, snapshot.temperature_c, snapshot.rainfall_mm, snapshot.humidity_pct,
    )
    return snapshot


# ---------------------------------------------------------------------------
# CLI entrypoint: python -m krishimitra.weather --location Dhaka
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    from dotenv import load_dotenv
    load_dotenv()

    parser = argparse.ArgumentParser(description="Show current weather for a Bangladesh location.")
    parser.add_argument("--location", default="Dhaka", help="District or city name")
    parser.add_argument("--api-key",  default=None,    help="Weather API key (defaults to env)")
    args = parser.parse_args()

    snap = get_weather(args.location, api_key=args.api_key)
    print(f"\n{snap.location}: {snap.description}")
    print(f"  Temperature   : {snap.temperature_c} °C")
    print(f"  Rainfall      : {snap.rainfall_mm} mm")
    print(f"  Humidity      : {snap.humidity_pct} %")
    print(f"  Soil moisture : {snap.soil_moisture_pct} % (estimated)")
