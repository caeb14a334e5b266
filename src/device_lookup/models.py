"""Data models for device lookup."""

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from src.device_lookup.config import UNKNOWN


def normalize_device_name(name: str) -> str:
    """Cache key for a device name."""
    return name.lower().strip()


def _as_text(value) -> str:
    """Spec values are stored as strings; AI responses may send numbers."""
    if value is None:
        return UNKNOWN
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    text = str(value).strip()
    return text or UNKNOWN


@dataclass
class DeviceSpecs:
    """Device specifications as strings, e.g. ``screen_size="6.7"``.

    Values the lookup could not determine are ``"unknown"``; ``default_dpi``
    is ``"N/A"`` for iOS devices.
    """

    device_name: str
    platform: str  # "android", "ios", "unknown"
    screen_size: str
    refresh_rate: str
    default_dpi: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict) -> "DeviceSpecs":
        platform = _as_text(data.get("platform")).lower()
        if platform not in ("android", "ios"):
            platform = UNKNOWN
        return cls(
            device_name=_as_text(data.get("device_name")),
            platform=platform,
            screen_size=_as_text(data.get("screen_size")),
            refresh_rate=_as_text(data.get("refresh_rate")),
            default_dpi=_as_text(data.get("default_dpi")),
        )

    @classmethod
    def unknown(cls, device_name: str) -> "DeviceSpecs":
        """Placeholder returned when every lookup strategy failed."""
        return cls(
            device_name=device_name,
            platform=UNKNOWN,
            screen_size=UNKNOWN,
            refresh_rate=UNKNOWN,
            default_dpi=UNKNOWN,
        )


@dataclass
class LookupResult:
    """Outcome of a device lookup."""

    success: bool
    device: DeviceSpecs
    source: Optional[str] = None  # "cache", "cache_fuzzy", "ai"
    error: Optional[str] = None
