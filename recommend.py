"""
One-command recommendation: variety + soil pH + location → fertilizer, NPK, irrigation, advice.
Run from project root:
    python recommend.py --variety rice_miniket --ph 6.5 --location Dhaka
    python recommend.py --variety wheat_prodip --ph 6.2 --temperature 33 --moisture 52 --rainfall 0
If any of --temperature/--humidity/--moisture/--rainfall is given, weather is not fetched.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from krishimitra.advice import build_advice_context, generate_advice
from krishimitra.catalog import catalog_frame, lookup_variety
from krishimitra.engine import compute_recommendation
from krishimitra.errors import AdvisoryError
from krishimitra.fertilizer import format_dosage
from krishimitra.models import WeatherSnapshot
from krishimitra.weather import estimate_soil_moisture, get_weather


def _parse_args(argv=None):
    p = argparse.ArgumentParser(description="Fertilizer & irrigation recommendation for one field.")
    p.add_argument("--variety", help="Variety id, e.g. rice_miniket (see --list)")
    p.add_argument("--ph", type=float, help="Soil pH (4.0-9.0)")
    p.add_argument("--location", default="Dhaka")
    p.add_argument("--temperature", type=float)
    p.add_argument("--rainfall", type=float)
    p.add_argument("--humidity", type=float)
    p.add_argument("--moisture", type=float)
    p.add_argument("--language", default="en", choices=["en", "bn"])
    p.add_argument("--advice", action="store_true", help="Also request AI advice text")
    p.add_argument("--json", action="store_true", help="Print JSON instead of a summary")
    p.add_argument("--list", action="store_true", help="List crop varieties and exit")
    return p.parse_args(argv)


def _weather_from_args(args) -> WeatherSnapshot:
    manual = [args.temperature, args.rainfall, args.humidity, args.moisture]
    if all(v is None for v in manual):
        return get_weather(args.location)
    humidity = 70.0 if args.humidity is None else args.humidity
    rainfall = 0.0 if args.rainfall is None else args.rainfall
    return WeatherSnapshot(
        temperature_c=28.0 if args.temperature is None else args.temperature,
        rainfall_mm=rainfall,
        humidity_pct=humidity,
        soil_moisture_pct=estimate_soil_moisture(humidity, rainfall) if args.moisture is None else args.moisture,
        location=args.location,
    )


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    load_dotenv()
    args = _parse_args(argv)

    if args.list:
        print(catalog_frame().to_string(index=False))
        return 0
    if not args.variety or args.ph is None:
        print("ERROR: --variety and --ph are required (use --list to see varieties).")
        return 2

    try:
        weather = _weather_from_args(args)
        rec = compute_recommendation(args.variety, args.ph, weather)
    except AdvisoryError as exc:
        print(f"ERROR [{exc.kind}]: {exc.message}")
        return 1

    advice_text = None
    if args.advice:
        context = build_advice_context(rec, weather, lookup_variety(args.variety).name, args.location)
        advice_text = generate_advice(context, language=args.language)

    if args.json:
        out = rec.to_dict()
        out["weather"] = weather.to_dict()
        if advice_text is not None:
            out["advice"] = advice_text
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return 0

    print("KrishiMitra — Recommendation")
    print("=" * 50)
    print(f"  Variety       : {args.variety} ({rec.category_id})")
    print(f"  Soil pH       : {rec.soil_ph} "
          f"({'within' if rec.compatibility.is_compatible else 'outside'} optimal "
          f"{rec.compatibility.optimal_range[0]}-{rec.compatibility.optimal_range[1]})")
    print(f"  Weather       : {weather.temperature_c}°C, {weather.rainfall_mm} mm rain, "
          f"{weather.humidity_pct}% humidity, {weather.soil_moisture_pct}% soil moisture")
    print(f"  Fertilizer    : {rec.fertilizer_tier.value}")
    print(f"    N           : {format_dosage(rec.npk.nitrogen_kg_ha)}")
    print(f"    P           : {format_dosage(rec.npk.phosphorus_kg_ha)}")
    print(f"    K           : {format_dosage(rec.npk.potassium_kg_ha)}")
    print(f"  Irrigation    : {'Irrigate' if rec.irrigation_needed else 'No irrigation needed'}")
    print(f"\n{rec.explanation}")
    if advice_text is not None:
        print(f"\nAdvice: {advice_text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
