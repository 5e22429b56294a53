"""
KrishiMitra HTTP API (FastAPI).

Endpoints:
    GET  /health              liveness probe
    GET  /crops               categories with their varieties
    POST /recommendation      {variety_id, soil_ph, weather} → recommendation JSON
    GET  /weather?location=   current weather snapshot
    POST /advice              {variety_id, soil_ph, weather, language} → {"advice": str}

Errors are returned as {"kind", "message"} (plus "field" for InvalidInput):
    NotFound → 404, InvalidInput → 422, UpstreamUnavailable → 503.

Run with: uvicorn krishimitra.api:app --reload
"""

import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Query
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from krishimitra.advice import build_advice_context, generate_advice
from krishimitra.catalog import categories_of, lookup_variety, varieties_of
from krishimitra.engine import compute_recommendation
from krishimitra.errors import AdvisoryError, InvalidInputError, NotFoundError, UpstreamUnavailableError
from krishimitra.models import WeatherSnapshot
from krishimitra.weather import get_weather

load_dotenv()

log = logging.getLogger(__name__)

app = FastAPI(title="KrishiMitra API", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

_STATUS_BY_KIND = {
    NotFoundError.kind: 404,
    InvalidInputError.kind: 422,
    UpstreamUnavailableError.kind: 503,
}


# --- Request models ---
class WeatherIn(BaseModel):
    temperature_c: float
    rainfall_mm: float
    humidity_pct: float
    soil_moisture_pct: float
    description: Optional[str] = ""
    location: Optional[str] = ""


class RecommendationRequest(BaseModel):
    variety_id: str
    soil_ph: float
    weather: WeatherIn


class AdviceRequest(RecommendationRequest):
    language: str = "en"
    location: Optional[str] = ""


def _snapshot(w: WeatherIn) -> WeatherSnapshot:
    return WeatherSnapshot(
        temperature_c=w.temperature_c,
        rainfall_mm=w.rainfall_mm,
        humidity_pct=w.humidity_pct,
        soil_moisture_pct=w.soil_moisture_pct,
        description=w.description or "",
        location=w.location or "",
    )


@app.exception_handler(AdvisoryError)
def advisory_error_handler(request, exc: AdvisoryError):
    status = _STATUS_BY_KIND.get(exc.kind, 400)
    log.info("%s %s -> %d %s: %s", request.method, request.url.path, status, exc.kind, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
def request_validation_handler(request, exc: RequestValidationError):
    """Body/query rejected by pydantic: same {kind, message, field} shape as core InvalidInput."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [str(part) for part in first.get("loc", ())]
    # Drop the "body"/"query" prefix; nested weather fields come out as "weather.temperature_c".
    field = ".".join(loc[1:]) or (loc[0] if loc else "body")
    err = InvalidInputError(field, first.get("msg", "Invalid request"))
    log.info("%s %s -> 422 %s: %s", request.method, request.url.path, err.kind, err.message)
    return JSONResponse(status_code=422, content=err.to_dict())


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/crops")
def list_crops():
    return [
        {
            "id": c.id,
            "moisture_threshold": c.moisture_threshold,
            "varieties": [
                {"id": v.id, "name": v.name, "min_ph": v.min_ph, "max_ph": v.max_ph}
                for v in varieties_of(c.id)
            ],
        }
        for c in categories_of()
    ]


@app.post("/recommendation")
def recommend(req: RecommendationRequest):
    rec = compute_recommendation(req.variety_id, req.soil_ph, _snapshot(req.weather))
    return rec.to_dict()


@app.get("/weather")
def weather(location: str = Query(..., min_length=1)):
    return get_weather(location).to_dict()


@app.post("/advice")
def advice(req: AdviceRequest):
    snap = _snapshot(req.weather)
    rec = compute_recommendation(req.variety_id, req.soil_ph, snap)
    variety = lookup_variety(req.variety_id)
    context = build_advice_context(rec, snap, variety_name=variety.name, location=req.location or "")
    return {"advice": generate_advice(context, language=req.language)}
