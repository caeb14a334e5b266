from src.preset_manager.models import Preset
from src.preset_manager.preset_store import PresetStore, generate_preset_id

__all__ = [
    "Preset",
    "PresetStore",
    "generate_preset_id",
]
