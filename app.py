"""
Streamlit UI — KrishiMitra fertilizer & irrigation advisor.
Home: language, crop + variety, soil pH, district → "Get Advice". Result: fertilizer tier,
NPK in kg/ha, irrigation, pH compatibility, explanation and AI advice. Optional history per user.
Run with: streamlit run app.py
"""

import sys
from pathlib import Path

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(PROJECT_ROOT))

from krishimitra.config import PH_MIN, PH_MAX, DEFAULT_LOCATION, ensure_dirs
from krishimitra.advice import build_advice_context, generate_advice
from krishimitra.catalog import categories_of, lookup_variety, varieties_of
from krishimitra.engine import compute_recommendation
from krishimitra.errors import AdvisoryError, UpstreamUnavailableError
from krishimitra.fertilizer import format_dosage
from krishimitra.history import HistoryStore
from krishimitra.i18n import t, district_options, district_name_en
from krishimitra.models import WeatherSnapshot
from krishimitra.soil_health import ph_label, condition_messages
from krishimitra.weather import get_weather, estimate_soil_moisture

load_dotenv()

_PH_LABEL_KEYS = {"acidic": "form.phAcidic", "alkaline": "form.phAlkaline", "good": "form.phGood", "ok": "form.phOk"}
_PH_LABEL_ICON = {"acidic": "⚠️", "alkaline": "⚠️", "good": "✓", "ok": ""}
_TIER_KEYS = {"Low": "result.low", "Medium": "result.medium", "High": "result.high"}
_TIER_COLOUR = {"Low": "green", "Medium": "orange", "High": "red"}


@st.cache_data(ttl=600, show_spinner=False)
def _cached_weather(location: str) -> dict:
    """Weather is cached per location for 10 minutes; errors are not cached."""
    return get_weather(location).to_dict()


def build_download_df(history: pd.DataFrame) -> pd.DataFrame:
    """History export with display column names."""
    cols = {
        "created_at": "Date (UTC)",
        "crop_type": "Crop",
        "variety_id": "Variety",
        "location": "Location",
        "soil_ph": "Soil pH",
        "fertilizer_level": "Fertilizer",
        "nitrogen_kg_ha": "N (kg/ha)",
        "phosphorus_kg_ha": "P (kg/ha)",
        "potassium_kg_ha": "K (kg/ha)",
        "irrigation_needed": "Irrigation",
        "weather_temperature": "Temperature (°C)",
        "soil_moisture": "Soil moisture (%)",
    }
    return history[list(cols)].rename(columns=cols)


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------

def apply_theme():
    st.markdown("""
    <style>
    /* Light field theme */
    .stApp { background: linear-gradient(180deg, #f4faf0 0%, #ffffff 60%, #eef6fb 100%); }
    h1, h2, h3 { color: #2d5a2d !important; }
    div[data-testid="stExpander"] { border-radius: 8px; border: 1px solid #cfe3c8; }
    .stButton > button { background: #2d7a2d !important; color: white !important; border-radius: 8px; }
    .stButton > button:hover { background: #3d8f3d !important; }
    </style>
    """, unsafe_allow_html=True)


# ---------------------------------------------------------------------------
# Main app
# ---------------------------------------------------------------------------

def main():
    st.set_page_config(page_title="KrishiMitra", page_icon="🌾", layout="wide")
    apply_theme()
    ensure_dirs()

    lang = st.sidebar.radio(
        "Language / ভাষা",
        options=["en", "bn"],
        format_func=lambda code: "English" if code == "en" else "বাংলা",
        horizontal=True,
    )

    st.title("🌾 " + t("app.title", lang))
    st.caption(t("app.caption", lang))

    # -----------------------------------------------------------------------
    # Form: crop, variety, pH, location
    # -----------------------------------------------------------------------
    st.header(t("form.title", lang))
    col1, col2, col3 = st.columns(3)

    with col1:
        category_ids = [c.id for c in categories_of()]
        category_id = st.selectbox(
            t("form.step1", lang),
            options=category_ids,
            format_func=lambda cid: t(f"crop.{cid}", lang),
        )
        varieties = varieties_of(category_id)
        variety_id = st.selectbox(
            t("form.variety", lang),
            options=[v.id for v in varieties],
            format_func=lambda vid: lookup_variety(vid).name,
        )

    with col2:
        soil_ph = st.slider(t("form.step2", lang), min_value=PH_MIN, max_value=PH_MAX, value=6.5, step=0.1)
        label = ph_label(soil_ph)
        st.markdown(f"**{soil_ph:.1f}** — {t(_PH_LABEL_KEYS[label], lang)} {_PH_LABEL_ICON[label]}")
        st.caption("💡 " + t("form.phTip", lang))

    with col3:
        districts = district_options(lang)
        values = [v for v, _ in districts]
        labels = dict(districts)
        default_idx = values.index(DEFAULT_LOCATION.lower()) if DEFAULT_LOCATION.lower() in values else 0
        district = st.selectbox(
            t("form.step3", lang),
            options=values,
            index=default_idx,
            format_func=lambda v: labels[v],
        )
        location = district_name_en(district)
        st.caption("📍 " + t("form.locationHint", lang))

    # -----------------------------------------------------------------------
    # Weather: fetched, with manual fallback
    # -----------------------------------------------------------------------
    weather_dict = None
    manual = st.checkbox(t("form.manualWeather", lang), value=False)
    if not manual:
        try:
            weather_dict = _cached_weather(location)
        except UpstreamUnavailableError as exc:
            st.warning(f"{t('toast.weatherError', lang)} ({exc.message})")
            manual = True

    if manual:
        w1, w2, w3, w4 = st.columns(4)
        temperature = w1.number_input(t("result.temperature", lang) + " (°C)", -10.0, 50.0, 28.0, 0.5)
        rainfall = w2.number_input(t("result.rainfall", lang) + " (mm)", 0.0, 500.0, 0.0, 1.0)
        humidity = w3.number_input(t("result.humidity", lang) + " (%)", 0.0, 100.0, 70.0, 1.0)
        moisture = w4.number_input(
            t("result.soilMoisture", lang) + " (%)", 0.0, 100.0,
            float(estimate_soil_moisture(humidity, rainfall)), 1.0,
        )
        weather_dict = {
            "temperature_c": temperature, "rainfall_mm": rainfall, "humidity_pct": humidity,
            "soil_moisture_pct": moisture, "description": "", "location": location,
        }

    weather = WeatherSnapshot.from_dict(weather_dict)

    st.divider()
    submit = st.button(t("form.submit", lang) + " 🌱", type="primary", use_container_width=True, key="get_advice")

    if submit:
        with st.spinner(t("form.analyzing", lang)):
            try:
                rec = compute_recommendation(variety_id, soil_ph, weather)
            except AdvisoryError as exc:
                st.error(f"{t('toast.error', lang)} {exc.message}")
                st.stop()
            context = build_advice_context(rec, weather, variety_name=lookup_variety(variety_id).name, location=location)
            advice_text = generate_advice(context, language=lang)
        st.session_state["last_result"] = {
            "rec": rec, "weather": weather, "advice": advice_text, "location": location, "lang": lang,
        }

    if "pending_toast" in st.session_state:
        st.toast(st.session_state.pop("pending_toast"))

    # Sidebar first so the user id is in session state before the save button renders.
    _render_sidebar(lang)
    result = st.session_state.get("last_result")
    if result is not None:
        _render_result(result, lang)


def _render_result(result: dict, lang: str):
    rec = result["rec"]
    weather = result["weather"]
    tier = rec.fertilizer_tier.value

    st.success(t("result.ready", lang))

    st.subheader(f"☁️ {t('result.weather', lang)} — {weather.location} {weather.description}")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric(t("result.temperature", lang), f"{weather.temperature_c:g} °C")
    c2.metric(t("result.rainfall", lang), f"{weather.rainfall_mm:g} mm")
    c3.metric(t("result.humidity", lang), f"{weather.humidity_pct:g} %")
    c4.metric(t("result.soilMoisture", lang), f"{weather.soil_moisture_pct:g} %")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"### 🧪 {t('result.fertilizer', lang)}: :{_TIER_COLOUR[tier]}[{t(_TIER_KEYS[tier], lang)}]")
        st.markdown(f"**{t('result.npk', lang)}**")
        npk_df = pd.DataFrame({
            "Nutrient": ["Nitrogen (N)", "Phosphorus (P)", "Potassium (K)"],
            "Dose": [
                format_dosage(rec.npk.nitrogen_kg_ha),
                format_dosage(rec.npk.phosphorus_kg_ha),
                format_dosage(rec.npk.potassium_kg_ha),
            ],
        })
        st.table(npk_df.set_index("Nutrient"))

    with col2:
        st.markdown(f"### 💧 {t('result.irrigation', lang)}")
        if rec.irrigation_needed:
            st.error(f"**{t('result.waterNeeded', lang)}** — {t('result.waterYour', lang)}")
        else:
            st.info(f"**{t('result.noWater', lang)}** — {t('result.enoughMoisture', lang)}")

        lo, hi = rec.compatibility.optimal_range
        if rec.compatibility.is_compatible:
            st.success(f"{t('result.compatible', lang)} (pH {lo}–{hi})")
        else:
            st.warning(f"{t('result.incompatible', lang)} (pH {lo}–{hi})")

    for msg in condition_messages(rec.soil_ph, weather):
        st.warning(msg)

    st.markdown(f"### 📝 {t('result.advice', lang)} {t('crop.' + rec.category_id, lang)}")
    st.info(result["advice"])
    with st.expander("Why?"):
        st.write(rec.explanation)
    st.caption(t("result.goodHarvest", lang))

    user_id = st.session_state.get("user_id")
    if user_id and st.button(t("history.save", lang), key="save_history"):
        HistoryStore().append(user_id, result["location"], rec, weather, result["advice"])
        st.session_state["pending_toast"] = t("history.saved", lang)
        st.rerun()


def _render_sidebar(lang: str):
    sb = st.sidebar
    sb.divider()
    sb.markdown(f"**{t('history.title', lang)}**")
    user_id = sb.text_input("User ID / Phone", key="user_id_input")
    if user_id:
        st.session_state["user_id"] = user_id.strip()
    else:
        st.session_state.pop("user_id", None)
        return

    store = HistoryStore()
    stats = store.dashboard_stats(st.session_state["user_id"])
    if stats["total"] == 0:
        sb.caption(t("history.empty", lang))
        return
    sb.metric(t("history.total", lang), stats["total"])
    sb.metric(t("history.topCrop", lang), t(f"crop.{stats['most_used_crop']}", lang))
    sb.metric(t("history.avgPh", lang), f"{stats['avg_soil_ph']:.1f}")
    sb.caption(f"{t('history.lastActivity', lang)}: {stats['last_activity'][:10]}")

    history = store.entries_for(st.session_state["user_id"])
    report_df = build_download_df(history)
    with sb.expander(t("history.title", lang)):
        st.dataframe(report_df.head(10), use_container_width=True)
    sb.download_button(
        label="Download CSV",
        data=report_df.to_csv(index=False).encode("utf-8"),
        file_name="krishimitra_history.csv",
        mime="text/csv",
    )


if __name__ == "__main__":
    main()
