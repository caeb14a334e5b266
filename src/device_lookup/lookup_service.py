"""Device lookup - resolve a typed device name to specs for pre-filling the form."""

import logging
from dataclasses import replace
from typing import Dict, Optional

from src.device_lookup.ai_client import OpenRouterClient
from src.device_lookup.config import (
    FALLBACK_DPI,
    FALLBACK_REFRESH_RATE,
    FALLBACK_SCREEN_SIZE,
    NOT_APPLICABLE,
    UNKNOWN,
)
from src.device_lookup.device_cache import DeviceCache
from src.device_lookup.matching import find_similar_device
from src.device_lookup.models import DeviceSpecs, LookupResult, normalize_device_name

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Could not identify device. Please enter specs manually."


class DeviceLookupError(ValueError):
    """Raised when a lookup is requested without a device name."""


class DeviceLookupService:
    """Resolves device names: exact cache, fuzzy cache, then the AI fallback.

    Successful AI answers are written back to the cache so the next lookup
    for the same device is served locally.
    """

    def __init__(
        self,
        cache: Optional[DeviceCache] = None,
        ai_client: Optional[OpenRouterClient] = None,
        use_ai: bool = True,
    ):
        self.cache = cache or DeviceCache()
        self.use_ai = use_ai
        self.ai_client = ai_client if ai_client is not None else (
            OpenRouterClient() if use_ai else None
        )

    def lookup(self, device_name: str) -> LookupResult:
        """Look up *device_name*.

        Returns:
            :class:`LookupResult`. On failure ``success`` is False and the
            device carries ``"unknown"`` for every spec.

        Raises:
            DeviceLookupError: if *device_name* is empty or not a string.
        """
        if not isinstance(device_name, str) or not device_name.strip():
            raise DeviceLookupError("Device name is required")

        cache = self.cache.load()
        normalized = normalize_device_name(device_name)

        if normalized in cache:
            logger.info("Found exact match in cache for %r", device_name)
            return LookupResult(success=True, source="cache", device=cache[normalized])

        fuzzy = find_similar_device(device_name, cache)
        if fuzzy is not None:
            logger.info("Found fuzzy match for %r: %s", device_name, fuzzy.device_name)
            return LookupResult(
                success=True,
                source="cache_fuzzy",
                device=replace(fuzzy, device_name=device_name),
            )

        if self.use_ai and self.ai_client is not None:
            logger.info("No cache match for %r, querying AI lookup", device_name)
            specs = self.ai_client.query_device_specs(device_name)
            if specs is not None:
                self.cache.save_device(specs)
                return LookupResult(success=True, source="ai", device=specs)

        logger.info("All detection methods failed for %r", device_name)
        return LookupResult(
            success=False,
            device=DeviceSpecs.unknown(device_name),
            error=NOT_FOUND_MESSAGE,
        )


def specs_to_form_fields(specs: DeviceSpecs) -> Dict[str, str]:
    """Form pre-fill values for a looked-up device.

    Unknown values fall back to the form defaults (6.5", 60Hz, 440 DPI) and
    a trailing "Hz" is stripped from the refresh rate.
    """
    screen_size = specs.screen_size if specs.screen_size != UNKNOWN else FALLBACK_SCREEN_SIZE
    refresh_rate = (
        specs.refresh_rate.replace("Hz", "").strip()
        if specs.refresh_rate != UNKNOWN
        else FALLBACK_REFRESH_RATE
    )
    dpi = (
        specs.default_dpi
        if specs.default_dpi not in (UNKNOWN, NOT_APPLICABLE)
        else FALLBACK_DPI
    )
    return {
        "platform": specs.platform,
        "screenSize": screen_size,
        "refreshRate": refresh_rate,
        "dpi": dpi,
    }
