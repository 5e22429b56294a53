"""
English / Bangla UI strings.
The language is always passed in explicitly; there is no module-level "current language".
Unknown keys are returned unchanged so a missing translation is visible but harmless.
"""

from krishimitra.config import BANGLADESH_DISTRICTS, SUPPORTED_LANGUAGES

DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        "app.title": "KrishiMitra — Fertilizer & Irrigation Advisor",
        "app.caption": "Smart farming recommendations for Bangladesh",
        "form.title": "Enter Your Farm Information",
        "form.step1": "Which Crop?",
        "form.variety": "Variety",
        "form.step2": "Soil pH",
        "form.phAcidic": "Acidic",
        "form.phGood": "Good",
        "form.phAlkaline": "Alkaline",
        "form.phOk": "OK",
        "form.phTip": "Tip: Most crops grow best between pH 6.0 - 7.0",
        "form.step3": "Your Location",
        "form.locationHint": "Enter location for weather data",
        "form.submit": "Get Advice",
        "form.analyzing": "Analyzing...",
        "form.manualWeather": "Enter weather manually",
        "crop.rice": "Rice",
        "crop.wheat": "Wheat",
        "crop.maize": "Maize",
        "crop.jute": "Jute",
        "crop.potato": "Potato",
        "crop.banana": "Banana",
        "result.weather": "Weather",
        "result.temperature": "Temperature",
        "result.rainfall": "Rainfall",
        "result.humidity": "Humidity",
        "result.soilMoisture": "Soil moisture",
        "result.fertilizer": "Fertilizer",
        "result.low": "Low",
        "result.medium": "Medium",
        "result.high": "High",
        "result.irrigation": "Irrigation",
        "result.waterNeeded": "WATER NEEDED",
        "result.waterYour": "Water your crops",
        "result.noWater": "NO WATER NEEDED",
        "result.enoughMoisture": "Soil has enough moisture",
        "result.npk": "NPK Amount:",
        "result.compatible": "Soil pH is within the optimal range for this variety",
        "result.incompatible": "Soil pH is outside the optimal range for this variety",
        "result.advice": "Advice for",
        "result.defaultAdvice": "See fertilizer and irrigation advice above.",
        "result.goodHarvest": "Good harvest!",
        "result.ready": "Your recommendations are ready!",
        "history.title": "Recommendation History",
        "history.save": "Save to history",
        "history.saved": "Saved to history",
        "history.empty": "No saved recommendations yet.",
        "history.total": "Total Advice",
        "history.topCrop": "Top Crop",
        "history.avgPh": "Avg pH",
        "history.lastActivity": "Last Activity",
        "toast.error": "Something went wrong!",
        "toast.weatherError": "Could not fetch weather. Enter the values manually.",
    },
    "bn": {
        "app.title": "কৃষিমিত্র — সার ও সেচ পরামর্শ",
        "app.caption": "বাংলাদেশের জন্য স্মার্ট কৃষি পরামর্শ",
        "form.title": "আপনার তথ্য দিন",
        "form.step1": "কোন ফসল?",
        "form.variety": "জাত",
        "form.step2": "মাটির pH",
        "form.phAcidic": "অম্লীয়",
        "form.phGood": "ভালো",
        "form.phAlkaline": "ক্ষারীয়",
        "form.phOk": "ঠিক আছে",
        "form.phTip": "টিপস: বেশিরভাগ ফসল pH ৬.০ - ৭.০ এর মধ্যে ভালো জন্মায়",
        "form.step3": "আপনার এলাকা",
        "form.locationHint": "আবহাওয়া জানতে এলাকার নাম দিন",
        "form.submit": "পরামর্শ নিন",
        "form.analyzing": "বিশ্লেষণ করা হচ্ছে...",
        "form.manualWeather": "আবহাওয়া নিজে লিখুন",
        "crop.rice": "ধান",
        "crop.wheat": "গম",
        "crop.maize": "ভুট্টা",
        "crop.jute": "পাট",
        "crop.potato": "আলু",
        "crop.banana": "কলা",
        "result.weather": "আবহাওয়া",
        "result.temperature": "তাপমাত্রা",
        "result.rainfall": "বৃষ্টিপাত",
        "result.humidity": "আর্দ্রতা",
        "result.soilMoisture": "মাটির আর্দ্রতা",
        "result.fertilizer": "সার",
        "result.low": "কম",
        "result.medium": "মাঝারি",
        "result.high": "বেশি",
        "result.irrigation": "সেচ",
        "result.waterNeeded": "সেচ দিন!",
        "result.waterYour": "আপনার ফসলে পানি দিন",
        "result.noWater": "সেচ লাগবে না",
        "result.enoughMoisture": "মাটিতে যথেষ্ট আর্দ্রতা আছে",
        "result.npk": "NPK পরিমাণ:",
        "result.compatible": "মাটির pH এই জাতের জন্য উপযুক্ত",
        "result.incompatible": "মাটির pH এই জাতের উপযুক্ত সীমার বাইরে",
        "result.advice": "পরামর্শ",
        "result.defaultAdvice": "আপনার ফসলের জন্য সার ও সেচের পরামর্শ উপরে দেখুন।",
        "result.goodHarvest": "ভালো ফসল হোক!",
        "result.ready": "আপনার পরামর্শ তৈরি!",
        "history.title": "পরামর্শের ইতিহাস",
        "history.save": "ইতিহাসে সংরক্ষণ করুন",
        "history.saved": "ইতিহাসে সংরক্ষিত",
        "history.empty": "এখনও কোনো পরামর্শ সংরক্ষিত নেই।",
        "history.total": "মোট পরামর্শ",
        "history.topCrop": "শীর্ষ ফসল",
        "history.avgPh": "গড় pH",
        "history.lastActivity": "শেষ কার্যকলাপ",
        "toast.error": "সমস্যা হয়েছে!",
        "toast.weatherError": "আবহাওয়া পাওয়া যায়নি। মান নিজে লিখুন।",
    },
}


def normalise_language(language: str | None) -> str:
    lang = (language or "").strip().lower()
    return lang if lang in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE


def t(key: str, language: str | None = DEFAULT_LANGUAGE) -> str:
    return TRANSLATIONS[normalise_language(language)].get(key, key)


def district_options(language: str | None = DEFAULT_LANGUAGE) -> list[tuple[str, str]]:
    """(value, label) pairs; the label is in the requested language."""
    lang = normalise_language(language)
    return [(value, bn if lang == "bn" else en) for value, en, bn in BANGLADESH_DISTRICTS]


def district_name_en(value: str) -> str:
    """English district name (used for weather lookups); unknown values pass through."""
    for v, en, _ in BANGLADESH_DISTRICTS:
        if v == value:
            return en
    return value
