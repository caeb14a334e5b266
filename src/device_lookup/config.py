import os
from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
DEVICES_FILE = DATA_DIR / "devices.json"
RAW_CATALOG_DIR = DATA_DIR / "raw"

# Placeholder values used in device spec records
UNKNOWN = "unknown"
NOT_APPLICABLE = "N/A"

# Fuzzy matching: fraction of input words that must match a cached name
WORD_MATCH_RATIO = 0.6

# Brand keyword -> estimated specs when nothing in the cache matches
BRAND_DEFAULT_SCREEN_SIZE = "6.5"
BRAND_DEFAULTS = {
    "iphone": {"platform": "ios", "refresh_rate": "60", "default_dpi": "N/A"},
    "ipad": {"platform": "ios", "refresh_rate": "60", "default_dpi": "N/A"},
    "samsung": {"platform": "android", "refresh_rate": "120", "default_dpi": "420"},
    "galaxy": {"platform": "android", "refresh_rate": "120", "default_dpi": "420"},
    "oneplus": {"platform": "android", "refresh_rate": "120", "default_dpi": "480"},
    "redmi": {"platform": "android", "refresh_rate": "120", "default_dpi": "440"},
    "poco": {"platform": "android", "refresh_rate": "120", "default_dpi": "440"},
    "realme": {"platform": "android", "refresh_rate": "120", "default_dpi": "440"},
    "vivo": {"platform": "android", "refresh_rate": "120", "default_dpi": "440"},
    "oppo": {"platform": "android", "refresh_rate": "120", "default_dpi": "440"},
    "xiaomi": {"platform": "android", "refresh_rate": "120", "default_dpi": "460"},
    "pixel": {"platform": "android", "refresh_rate": "90", "default_dpi": "420"},
    "google": {"platform": "android", "refresh_rate": "90", "default_dpi": "420"},
    "nothing": {"platform": "android", "refresh_rate": "120", "default_dpi": "420"},
    "motorola": {"platform": "android", "refresh_rate": "120", "default_dpi": "420"},
    "infinix": {"platform": "android", "refresh_rate": "90", "default_dpi": "400"},
    "tecno": {"platform": "android", "refresh_rate": "90", "default_dpi": "400"},
    "asus": {"platform": "android", "refresh_rate": "120", "default_dpi": "440"},
    "rog": {"platform": "android", "refresh_rate": "165", "default_dpi": "480"},
    "iqoo": {"platform": "android", "refresh_rate": "120", "default_dpi": "450"},
    "huawei": {"platform": "android", "refresh_rate": "90", "default_dpi": "420"},
    "honor": {"platform": "android", "refresh_rate": "90", "default_dpi": "420"},
}

# Form pre-fill values for specs the lookup could not determine
FALLBACK_SCREEN_SIZE = "6.5"
FALLBACK_REFRESH_RATE = "60"
FALLBACK_DPI = "440"

# OpenRouter chat completion fallback
OPENROUTER_API_KEY = os.environ.get("OPENROUTER_API_KEY", "")
OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
OPENROUTER_REFERER = os.environ.get(
    "OPENROUTER_REFERER", "https://freefire-sens-generator.vercel.app"
)
OPENROUTER_TITLE = "Free Fire Sensitivity Generator"
OPENROUTER_TIMEOUT_SECONDS = 15
OPENROUTER_TEMPERATURE = 0.1
OPENROUTER_MAX_TOKENS = 200

# Free models, tried in order until one returns parseable specs
OPENROUTER_MODELS = [
    "nousresearch/hermes-3-llama-3.1-405b:free",
    "meta-llama/llama-3.2-3b-instruct:free",
    "google/gemma-2-9b-it:free",
    "mistralai/mistral-7b-instruct:free",
]

DEVICE_SPECS_SYSTEM_PROMPT = """You are a mobile device specification expert. When given a device name, return ONLY a JSON object with these exact fields:
- device_name: the full device name
- platform: "android" or "ios" (lowercase only)
- screen_size: screen size in inches (e.g., "6.7")
- refresh_rate: refresh rate in Hz (e.g., "120")
- default_dpi: default DPI value for Android devices (e.g., "440"), use "N/A" for iOS

If you're unsure about any value, make a reasonable estimate based on similar devices.
Return ONLY valid JSON, no markdown, no explanation."""

# CSV catalog columns (after header normalization)
CATALOG_COLUMNS = ["device_name", "platform", "screen_size", "refresh_rate", "default_dpi"]
