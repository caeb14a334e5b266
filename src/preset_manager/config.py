from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Data directories
DATA_DIR = PROJECT_ROOT / "data"
PRESETS_FILE = DATA_DIR / "presets.json"

# Preset id format: preset_<epoch ms>_<suffix>
PRESET_ID_PREFIX = "preset"
PRESET_ID_SUFFIX_LENGTH = 9
