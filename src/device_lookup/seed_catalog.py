"""Seed the device cache from a CSV spec catalog.

Usage:
    python -m src.device_lookup.seed_catalog <catalog.csv> [cache_file]

Examples:
    python -m src.device_lookup.seed_catalog data/raw/devices.csv
    python -m src.device_lookup.seed_catalog devices.csv /tmp/devices.json
"""

import logging
import sys
from pathlib import Path

from src.device_lookup.catalog_ingestion import DeviceCatalogIngester
from src.device_lookup.device_cache import DeviceCache
from src.logging_config import setup_logging

logger = logging.getLogger(__name__)


def seed_device_cache(csv_path: Path, cache: DeviceCache | None = None) -> int:
    """Merge every catalog row into the device cache.

    Args:
        csv_path: Device catalog CSV.
        cache: Target cache. Defaults to ``data/devices.json``.

    Returns:
        Number of devices written.
    """
    cache = cache or DeviceCache()

    logger.info("Seeding device cache %s from %s", cache.cache_file, csv_path)
    specs = DeviceCatalogIngester(csv_path).read_specs()

    written = cache.save_many(specs)
    by_platform: dict[str, int] = {}
    for device in specs.values():
        by_platform[device.platform] = by_platform.get(device.platform, 0) + 1

    logger.info("Seeded %d devices (%s)", written, ", ".join(
        f"{k}={v}" for k, v in sorted(by_platform.items())
    ))
    return written


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    csv_path = Path(sys.argv[1])
    cache_file = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        count = seed_device_cache(csv_path, DeviceCache(cache_file))
        print(f"Seeded {count} devices")
    except Exception:
        logger.exception("Seeding failed")
        sys.exit(1)
