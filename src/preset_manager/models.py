"""Preset data model."""

from dataclasses import dataclass
from typing import Dict, Optional

from src.sensitivity_engine.models import SensitivityResult


@dataclass
class Preset:
    """A saved sensitivity result with the device info it was generated for."""

    id: str
    name: str
    device: str
    platform: str
    playstyle: str
    ping: str
    dpi: Optional[int]
    sensitivities: SensitivityResult
    created_at: str  # ISO-8601, UTC

    def to_dict(self) -> Dict:
        """Convert to the JSON record stored in ``presets.json``."""
        return {
            "id": self.id,
            "name": self.name,
            "device": self.device,
            "platform": self.platform,
            "playstyle": self.playstyle,
            "ping": self.ping,
            "dpi": self.dpi,
            "sensitivities": self.sensitivities.to_dict(),
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Preset":
        """Reconstruct a Preset from its JSON record."""
        dpi = data.get("dpi")
        return cls(
            id=data["id"],
            name=data["name"],
            device=data.get("device", ""),
            platform=data.get("platform", "unknown"),
            playstyle=data.get("playstyle", ""),
            ping=data.get("ping", ""),
            dpi=int(dpi) if dpi is not None else None,
            sensitivities=SensitivityResult.from_dict(data["sensitivities"]),
            created_at=data["createdAt"],
        )
