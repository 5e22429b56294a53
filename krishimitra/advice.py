"""
Advice text generator: short farming advice from an LLM chat-completion service.

The text is display-only and never feeds a decision. Every failure (missing
key, rate limit, exhausted credits, network error, empty reply) is logged and
replaced by the language's default placeholder, so callers always get a string.
"""

import logging
import os

import requests

from krishimitra.config import LLM_API_URL, LLM_API_KEY_ENV, LLM_MODEL, REQUEST_TIMEOUT
from krishimitra.i18n import normalise_language, t
from krishimitra.models import Recommendation, WeatherSnapshot

log = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert agricultural advisor for farmers in Bangladesh. {language_instruction} "
    "Give practical, actionable farming advice in 3-4 sentences. Be professional and encouraging. "
    "Focus on immediate actions the farmer should take. IMPORTANT: Do NOT use any religious "
    "greetings or phrases like Namaste, Assalamualaikum, Bismillah, or any other religious words. "
    "Keep the advice purely agricultural and secular."
)

LANGUAGE_INSTRUCTIONS = {
    "en": "Respond in English only.",
    "bn": "Respond in Bengali (বাংলা) language only.",
}

USER_PROMPT = """
Crop: {crop} (variety: {variety})
Location: {location}, Bangladesh
Soil pH: {soil_ph}
Weather: {description}, Temperature: {temperature_c}°C, Humidity: {humidity_pct}%, Rainfall: {rainfall_mm}mm
Soil Moisture: {soil_moisture_pct}%
Fertilizer Level Needed: {fertilizer_tier}
Irrigation Needed: {irrigation}

Provide 3-4 lines of personalized farming advice for this specific situation."""


def build_advice_context(
    recommendation: Recommendation,
    weather: WeatherSnapshot,
    variety_name: str = "",
    location: str = "",
) -> dict:
    """Flatten a recommendation and its weather into the prompt fields."""
    return {
        "crop":              recommendation.category_id,
        "variety":           variety_name or recommendation.variety_id,
        "location":          location or weather.location,
        "soil_ph":           recommendation.soil_ph,
        "description":       weather.description or "n/a",
        "temperature_c":     weather.temperature_c,
        "humidity_pct":      weather.humidity_pct,
        "rainfall_mm":       weather.rainfall_mm,
        "soil_moisture_pct": weather.soil_moisture_pct,
        "fertilizer_tier":   recommendation.fertilizer_tier.value,
        "irrigation_needed": recommendation.irrigation_needed,
    }


def build_messages(context: dict, language: str = "en") -> list[dict]:
    lang = normalise_language(language)
    system = SYSTEM_PROMPT.format(language_instruction=LANGUAGE_INSTRUCTIONS[lang])
    fields = {k: context.get(k, "") for k in (
        "crop", "variety", "location", "soil_ph", "description", "temperature_c",
        "humidity_pct", "rainfall_mm", "soil_moisture_pct", "fertilizer_tier",
    )}
    fields["irrigation"] = "Yes" if context.get("irrigation_needed") else "No"
    return [
        {"role": "system", "content": system},
        {"role": "user", "content": USER_PROMPT.format(**fields)},
    ]


def _post_completion(messages: list[dict], api_key: str) -> requests.Response:
    return requests.post(
        LLM_API_URL,
        headers={"Authorization": f"Bearer {api_key}", "Content-Type": "application/json"},
        json={"model": LLM_MODEL, "messages": messages},
        timeout=REQUEST_TIMEOUT,
    )


def generate_advice(context: dict, language: str = "en", api_key: str | None = None) -> str:
    """Return advice text in the requested language, or the default placeholder."""
    lang = normalise_language(language)
    placeholder = t("result.defaultAdvice", lang)

    key = api_key or os.environ.get(LLM_API_KEY_ENV)
    if not key:
        log.warning("No LLM API key configured (%s); using default advice.", LLM_API_KEY_ENV)
        return placeholder

    log.info("Generating advice for crop=%s location=%s lang=%s",
             context.get("crop"), context.get("location"), lang)
    try:
        resp = _post_completion(build_messages(context, lang), key)
    except requests.RequestException as exc:
        log.warning("Advice service unreachable: %s", exc)
        return placeholder

    if resp.status_code == 429:
        log.warning("Advice service rate limit exceeded.")
        return placeholder
    if resp.status_code == 402:
        log.warning("Advice service credits exhausted.")
        return placeholder
    if not resp.ok:
        log.warning("Advice service error %s: %s", resp.status_code, resp.text[:200])
        return placeholder

    try:
        content = resp.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as exc:
        log.warning("Unexpected advice response: %s", exc)
        return placeholder

    content = (content or "").strip()
    if not content:
        return placeholder
    log.info("Generated advice successfully.")
    return content
