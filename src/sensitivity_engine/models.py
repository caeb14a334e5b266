"""Data models for the sensitivity engine."""

from dataclasses import dataclass
from typing import Dict, Optional

from src.sensitivity_engine.config import CHANNELS

# Python attribute name -> key used in presets and API payloads
WIRE_KEYS = {
    "general": "general",
    "red_dot": "redDot",
    "scope_2x": "scope2x",
    "scope_4x": "scope4x",
    "awm_scope": "awmScope",
    "free_look": "freeLook",
}


@dataclass(frozen=True)
class CalculationInput:
    """Validated device, playstyle and network information for one calculation."""

    platform: str  # "android", "ios", "unknown"
    playstyle: str
    ping_level: str  # "low", "medium", "high"
    screen_size: float  # inches
    refresh_rate: int  # Hz
    dpi: Optional[int] = None  # Android only
    use_custom_dpi: bool = False


@dataclass(frozen=True)
class SensitivityResult:
    """Six in-game sensitivity values, each in [1, 200]."""

    general: int
    red_dot: int
    scope_2x: int
    scope_4x: int
    awm_scope: int
    free_look: int

    def as_channels(self) -> Dict[str, int]:
        """Channel name -> value, in channel order."""
        return {channel: getattr(self, channel) for channel in CHANNELS}

    def to_dict(self) -> Dict[str, int]:
        """Serialize using the camelCase wire keys."""
        return {WIRE_KEYS[channel]: value for channel, value in self.as_channels().items()}

    @classmethod
    def from_dict(cls, data: Dict) -> "SensitivityResult":
        """Rebuild from a wire dict (camelCase keys) or a snake_case dict."""
        values = {}
        for channel in CHANNELS:
            wire_key = WIRE_KEYS[channel]
            values[channel] = int(data[wire_key] if wire_key in data else data[channel])
        return cls(**values)
