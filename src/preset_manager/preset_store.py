"""Preset persistence - create, list and delete presets in a JSON file."""

import json
import logging
import random
import string
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from src.preset_manager.config import (
    PRESET_ID_PREFIX,
    PRESET_ID_SUFFIX_LENGTH,
    PRESETS_FILE,
)
from src.preset_manager.models import Preset
from src.sensitivity_engine.models import SensitivityResult

logger = logging.getLogger(__name__)

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def generate_preset_id() -> str:
    """Build an opaque id like ``preset_1718000000000_k3j9x0a1b``."""
    millis = int(time.time() * 1000)
    suffix = "".join(random.choices(_BASE36_ALPHABET, k=PRESET_ID_SUFFIX_LENGTH))
    return f"{PRESET_ID_PREFIX}_{millis}_{suffix}"


class PresetStore:
    """Stores all presets in a single ``{"presets": [...]}`` JSON document."""

    def __init__(self, presets_file: Optional[Path] = None):
        self.presets_file = Path(presets_file) if presets_file else PRESETS_FILE

    def list_presets(self) -> List[Preset]:
        """Return all saved presets in the order they were created.

        A missing or corrupt file reads as an empty list.
        """
        presets = []
        for record in self._read_records():
            try:
                presets.append(Preset.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(
                    "Skipping corrupt preset record %s: %s", record.get("id"), e
                )
        return presets

    def create_preset(
        self,
        name: str,
        device: str,
        platform: str,
        playstyle: str,
        ping: str,
        dpi: Optional[int],
        sensitivities: SensitivityResult,
    ) -> Preset:
        """Save a new preset.

        Args:
            name: User-chosen preset name.
            device: Device name the result was generated for.
            platform: "android", "ios" or "unknown".
            playstyle: Playstyle used for the calculation.
            ping: Ping level used for the calculation.
            dpi: Android DPI, or None.
            sensitivities: The calculated result.

        Returns:
            The stored :class:`Preset` with its generated id and timestamp.
        """
        preset = Preset(
            id=generate_preset_id(),
            name=name,
            device=device,
            platform=platform,
            playstyle=playstyle,
            ping=ping,
            dpi=dpi,
            sensitivities=sensitivities,
            created_at=datetime.now(timezone.utc).isoformat(),
        )

        records = self._read_records()
        records.append(preset.to_dict())
        self._write_records(records)

        logger.info("Saved preset %s (%s) to %s", preset.id, name, self.presets_file)
        return preset

    def delete_preset(self, preset_id: str) -> bool:
        """Delete a preset by id.

        Returns:
            True if a preset was removed, False if no preset had that id.

        Raises:
            ValueError: if *preset_id* is empty.
        """
        if not preset_id:
            raise ValueError("Preset ID is required")

        records = self._read_records()
        remaining = [r for r in records if r.get("id") != preset_id]
        if len(remaining) == len(records):
            logger.warning("Preset not found: %s", preset_id)
            return False

        self._write_records(remaining)
        logger.info("Deleted preset %s", preset_id)
        return True

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------

    def _read_records(self) -> List[Dict]:
        if not self.presets_file.exists():
            return []

        try:
            with open(self.presets_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Could not read presets file %s: %s", self.presets_file, e)
            return []

        records = data.get("presets") if isinstance(data, dict) else None
        if not isinstance(records, list):
            logger.warning("Unexpected presets file layout in %s", self.presets_file)
            return []
        return [r for r in records if isinstance(r, dict)]

    def _write_records(self, records: List[Dict]) -> None:
        self.presets_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.presets_file, "w", encoding="utf-8") as f:
            json.dump({"presets": records}, f, indent=2)
