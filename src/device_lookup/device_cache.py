"""JSON cache of known device specs, keyed by normalized device name."""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from src.device_lookup.config import DEVICES_FILE
from src.device_lookup.models import DeviceSpecs, normalize_device_name

logger = logging.getLogger(__name__)


class DeviceCache:
    """Best-effort device cache: read failures load empty, write failures are logged."""

    def __init__(self, cache_file: Optional[Path] = None):
        self.cache_file = Path(cache_file) if cache_file else DEVICES_FILE

    def load(self) -> Dict[str, DeviceSpecs]:
        """Load the whole cache.

        Returns:
            Dict mapping normalized device name to :class:`DeviceSpecs`.
            Empty when the file is missing or corrupt.
        """
        if not self.cache_file.exists():
            return {}

        try:
            with open(self.cache_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Corrupt device cache %s: %s", self.cache_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Unexpected device cache layout in %s", self.cache_file)
            return {}

        return {
            key: DeviceSpecs.from_dict(value)
            for key, value in data.items()
            if isinstance(value, dict)
        }

    def get(self, device_name: str) -> Optional[DeviceSpecs]:
        """Exact lookup by normalized name."""
        return self.load().get(normalize_device_name(device_name))

    def save_device(self, device: DeviceSpecs) -> bool:
        """Add or replace one device in the cache.

        Returns:
            True if written, False if the write failed (logged, not raised).
        """
        key = normalize_device_name(device.device_name)
        return self.save_many({key: device}) == 1

    def save_many(self, devices: Dict[str, DeviceSpecs]) -> int:
        """Merge *devices* into the cache in a single write.

        Returns:
            Number of devices written (0 on failure).
        """
        cache = self.load()
        cache.update(devices)

        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.cache_file, "w", encoding="utf-8") as f:
                json.dump(
                    {key: specs.to_dict() for key, specs in cache.items()}, f, indent=2
                )
        except OSError as e:
            logger.error("Failed to save device cache %s: %s", self.cache_file, e)
            return 0

        logger.debug("Saved %d device(s) to %s", len(devices), self.cache_file)
        return len(devices)
