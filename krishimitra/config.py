"""
Configuration and constants for the KrishiMitra advisory system.
Centralizes paths, rule constants, crop tables, districts, and service endpoints.
"""

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Base paths (project root = parent of 'krishimitra')
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"

HISTORY_FNAME = "recommendations_history.csv"
HISTORY_PATH = Path(os.environ.get("KRISHIMITRA_HISTORY_PATH", str(DATA_DIR / HISTORY_FNAME)))

# ---------------------------------------------------------------------------
# Input domains (values outside these are rejected, never clamped)
# ---------------------------------------------------------------------------
PH_MIN, PH_MAX = 4.0, 9.0
PCT_MIN, PCT_MAX = 0.0, 100.0
TEMPERATURE_MIN_C, TEMPERATURE_MAX_C = -60.0, 60.0
RAINFALL_MIN_MM = 0.0

# ---------------------------------------------------------------------------
# Fertilizer rules
# pH outside [5.5, 7.5] needs more fertilizer; [6.0, 7.0] is optimal.
# Temperature multiplier applies to nitrogen only.
# ---------------------------------------------------------------------------
PH_EXTREME_LOW  = 5.5
PH_EXTREME_HIGH = 7.5
PH_OPTIMAL_LOW  = 6.0
PH_OPTIMAL_HIGH = 7.0

PH_MULT_EXTREME = 1.3
PH_MULT_OPTIMAL = 0.9
PH_MULT_NEUTRAL = 1.0

HOT_TEMPERATURE_C  = 35.0
COLD_TEMPERATURE_C = 20.0
TEMP_MULT_HOT     = 0.8    # heat reduces nitrogen uptake efficiency
TEMP_MULT_COLD    = 0.85   # cold slows uptake
TEMP_MULT_NEUTRAL = 1.0

# Tier cut-offs on total N+P+K (kg/ha); lower bound of each band is inclusive
TIER_MEDIUM_MIN = 100
TIER_HIGH_MIN   = 180

# ---------------------------------------------------------------------------
# Irrigation rules
# ---------------------------------------------------------------------------
RAINFALL_MOISTURE_WEIGHT   = 0.3    # mm of recent rain → % effective moisture
HOT_WEATHER_IRRIGATION_C   = 32.0
HOT_WEATHER_THRESHOLD_BUMP = 10.0
DEFAULT_MOISTURE_THRESHOLD = 50.0   # unknown categories

# ---------------------------------------------------------------------------
# Crop categories: base NPK requirement (kg/ha) and soil-moisture threshold (%)
# Declaration order is the display order.
# ---------------------------------------------------------------------------
CROP_CATEGORY_TABLE: dict[str, dict[str, float]] = {
    "rice":   {"n": 80,  "p": 40, "k": 40,  "moisture": 70},
    "wheat":  {"n": 60,  "p": 30, "k": 30,  "moisture": 45},
    "maize":  {"n": 100, "p": 50, "k": 50,  "moisture": 50},
    "jute":   {"n": 40,  "p": 20, "k": 30,  "moisture": 60},
    "potato": {"n": 70,  "p": 60, "k": 80,  "moisture": 55},
    "banana": {"n": 100, "p": 30, "k": 120, "moisture": 65},
}

# Varieties commonly grown in Bangladesh with their optimal soil pH band.
# (id, category, display name, min pH, max pH)
CROP_VARIETY_TABLE: list[tuple[str, str, str, float, float]] = [
    ("rice_miniket",          "rice",   "Miniket",             5.5, 7.0),
    ("rice_brri_dhan28",      "rice",   "BRRI dhan28",         5.5, 6.5),
    ("rice_brri_dhan29",      "rice",   "BRRI dhan29",         5.5, 6.5),
    ("rice_nazirshail",       "rice",   "Nazirshail",          5.5, 7.0),
    ("rice_kataribhog",       "rice",   "Kataribhog",          5.0, 6.5),
    ("wheat_bari_gom_30",     "wheat",  "BARI Gom 30",         6.0, 7.5),
    ("wheat_bari_gom_33",     "wheat",  "BARI Gom 33",         6.0, 7.5),
    ("wheat_prodip",          "wheat",  "Prodip",              6.0, 6.8),
    ("maize_bari_hybrid_9",   "maize",  "BARI Hybrid Maize 9", 5.8, 7.0),
    ("maize_pacific_984",     "maize",  "Pacific 984",         5.5, 7.5),
    ("jute_tossa_o9897",      "jute",   "Tossa O-9897",        6.0, 7.5),
    ("jute_deshi_cvl1",       "jute",   "Deshi CVL-1",         5.0, 7.0),
    ("jute_robi1",            "jute",   "BJRI Tossa 8 (Robi-1)", 5.5, 7.5),
    ("potato_diamant",        "potato", "Diamant",             5.0, 6.5),
    ("potato_cardinal",       "potato", "Cardinal",            5.0, 6.5),
    ("potato_granola",        "potato", "Granola",             5.2, 6.8),
    ("banana_sabri",          "banana", "Sabri",               6.0, 7.5),
    ("banana_amritasagar",    "banana", "Amritasagar",         6.0, 7.5),
    ("banana_champa",         "banana", "Champa",              5.5, 7.0),
]

# ---------------------------------------------------------------------------
# External services (secrets come from the environment / .env)
# ---------------------------------------------------------------------------
WEATHER_API_URL = os.environ.get(
    "KRISHIMITRA_WEATHER_URL", "https://api.openweathermap.org/data/2.5/weather"
)
WEATHER_API_KEY_ENV = "KRISHIMITRA_WEATHER_API_KEY"
WEATHER_COUNTRY_SUFFIX = "BD"   # locations are Bangladesh districts

LLM_API_URL = os.environ.get(
    "KRISHIMITRA_LLM_URL", "https://ai.gateway.lovable.dev/v1/chat/completions"
)
LLM_API_KEY_ENV = "KRISHIMITRA_LLM_API_KEY"
LLM_MODEL = os.environ.get("KRISHIMITRA_LLM_MODEL", "google/gemini-2.5-flash")

REQUEST_TIMEOUT = 20   # seconds

SUPPORTED_LANGUAGES = ("en", "bn")
DEFAULT_LOCATION = "Dhaka"

# ---------------------------------------------------------------------------
# Bangladesh districts (value, English, Bangla), grouped by division
# ---------------------------------------------------------------------------
BANGLADESH_DISTRICTS: list[tuple[str, str, str]] = [
    # Barishal
    ("barguna", "Barguna", "বরগুনা"),
    ("barishal", "Barishal", "বরিশাল"),
    ("bhola", "Bhola", "ভোলা"),
    ("jhalokati", "Jhalokati", "ঝালকাঠি"),
    ("patuakhali", "Patuakhali", "পটুয়াখালী"),
    ("pirojpur", "Pirojpur", "পিরোজপুর"),
    # Chattogram
    ("bandarban", "Bandarban", "বান্দরবান"),
    ("brahmanbaria", "Brahmanbaria", "ব্রাহ্মণবাড়িয়া"),
    ("chandpur", "Chandpur", "চাঁদপুর"),
    ("chattogram", "Chattogram", "চট্টগ্রাম"),
    ("comilla", "Comilla", "কুমিল্লা"),
    ("coxsbazar", "Cox's Bazar", "কক্সবাজার"),
    ("feni", "Feni", "ফেনী"),
    ("khagrachhari", "Khagrachhari", "খাগড়াছড়ি"),
    ("lakshmipur", "Lakshmipur", "লক্ষ্মীপুর"),
    ("noakhali", "Noakhali", "নোয়াখালী"),
    ("rangamati", "Rangamati", "রাঙামাটি"),
    # Dhaka
    ("dhaka", "Dhaka", "ঢাকা"),
    ("faridpur", "Faridpur", "ফরিদপুর"),
    ("gazipur", "Gazipur", "গাজীপুর"),
    ("gopalganj", "Gopalganj", "গোপালগঞ্জ"),
    ("kishoreganj", "Kishoreganj", "কিশোরগঞ্জ"),
    ("madaripur", "Madaripur", "মাদারীপুর"),
    ("manikganj", "Manikganj", "মানিকগঞ্জ"),
    ("munshiganj", "Munshiganj", "মুন্সীগঞ্জ"),
    ("narayanganj", "Narayanganj", "নারায়ণগঞ্জ"),
    ("narsingdi", "Narsingdi", "নরসিংদী"),
    ("rajbari", "Rajbari", "রাজবাড়ী"),
    ("shariatpur", "Shariatpur", "শরীয়তপুর"),
    ("tangail", "Tangail", "টাঙ্গাইল"),
    # Khulna
    ("bagerhat", "Bagerhat", "বাগেরহাট"),
    ("chuadanga", "Chuadanga", "চুয়াডাঙ্গা"),
    ("jessore", "Jessore", "যশোর"),
    ("jhenaidah", "Jhenaidah", "ঝিনাইদহ"),
    ("khulna", "Khulna", "খুলনা"),
    ("kushtia", "Kushtia", "কুষ্টিয়া"),
    ("magura", "Magura", "মাগুরা"),
    ("meherpur", "Meherpur", "মেহেরপুর"),
    ("narail", "Narail", "নড়াইল"),
    ("satkhira", "Satkhira", "সাতক্ষীরা"),
    # Mymensingh
    ("jamalpur", "Jamalpur", "জামালপুর"),
    ("mymensingh", "Mymensingh", "ময়মনসিংহ"),
    ("netrokona", "Netrokona", "নেত্রকোণা"),
    ("sherpur", "Sherpur", "শেরপুর"),
    # Rajshahi
    ("bogura", "Bogura", "বগুড়া"),
    ("chapainawabganj", "Chapainawabganj", "চাঁপাইনবাবগঞ্জ"),
    ("joypurhat", "Joypurhat", "জয়পুরহাট"),
    ("naogaon", "Naogaon", "নওগাঁ"),
    ("natore", "Natore", "নাটোর"),
    ("nawabganj", "Nawabganj", "নবাবগঞ্জ"),
    ("pabna", "Pabna", "পাবনা"),
    ("rajshahi", "Rajshahi", "রাজশাহী"),
    ("sirajganj", "Sirajganj", "সিরাজগঞ্জ"),
    # Rangpur
    ("dinajpur", "Dinajpur", "দিনাজপুর"),
    ("gaibandha", "Gaibandha", "গাইবান্ধা"),
    ("kurigram", "Kurigram", "কুড়িগ্রাম"),
    ("lalmonirhat", "Lalmonirhat", "লালমনিরহাট"),
    ("nilphamari", "Nilphamari", "নীলফামারী"),
    ("panchagarh", "Panchagarh", "পঞ্চগড়"),
    ("rangpur", "Rangpur", "রংপুর"),
    ("thakurgaon", "Thakurgaon", "ঠাকুরগাঁও"),
    # Sylhet
    ("habiganj", "Habiganj", "হবিগঞ্জ"),
    ("moulvibazar", "Moulvibazar", "মৌলভীবাজার"),
    ("sunamganj", "Sunamganj", "সুনামগঞ্জ"),
    ("sylhet", "Sylhet", "সিলেট"),
]


# ---------------------------------------------------------------------------
# Ensure directories exist (called when app / api starts)
# ---------------------------------------------------------------------------
def ensure_dirs():
    DATA_DIR.mkdir(parents=True, exist_ok=True)
    HISTORY_PATH.parent.mkdir(parents=True, exist_ok=True)
