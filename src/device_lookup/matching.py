"""Fuzzy matching of user-typed device names against the cache."""

import logging
import math
from typing import Dict, Optional

from src.device_lookup.config import (
    BRAND_DEFAULT_SCREEN_SIZE,
    BRAND_DEFAULTS,
    WORD_MATCH_RATIO,
)
from src.device_lookup.models import DeviceSpecs, normalize_device_name

logger = logging.getLogger(__name__)


def _words_overlap(input_words, key_words) -> int:
    """Count input words that are a substring of some key word or vice versa."""
    matches = 0
    for word in input_words:
        if any(kw in word or word in kw for kw in key_words):
            matches += 1
    return matches


def estimate_from_brand(device_name: str) -> Optional[DeviceSpecs]:
    """Estimated specs from the first brand keyword found in *device_name*."""
    normalized = normalize_device_name(device_name)
    for brand, defaults in BRAND_DEFAULTS.items():
        if brand in normalized:
            logger.debug("Estimating %r from brand %r", device_name, brand)
            return DeviceSpecs(
                device_name=device_name,
                platform=defaults["platform"],
                screen_size=BRAND_DEFAULT_SCREEN_SIZE,
                refresh_rate=defaults["refresh_rate"],
                default_dpi=defaults["default_dpi"],
            )
    return None


def find_similar_device(
    device_name: str, cache: Dict[str, DeviceSpecs]
) -> Optional[DeviceSpecs]:
    """Find the best cached match for *device_name*.

    Strategies, in order:
    1. Exact normalized key.
    2. Input contains a cached key, or a cached key contains the input.
    3. At least 60% of input words overlap the words of a cached key.
    4. Brand keyword estimate (not from the cache).

    Returns:
        The matched :class:`DeviceSpecs`, or None.
    """
    normalized = normalize_device_name(device_name)
    if not normalized:
        return None

    if normalized in cache:
        return cache[normalized]

    for key, specs in cache.items():
        if key and (key in normalized or normalized in key):
            return specs

    input_words = normalized.split()
    required = math.ceil(len(input_words) * WORD_MATCH_RATIO)
    for key, specs in cache.items():
        if _words_overlap(input_words, key.split()) >= required:
            return specs

    return estimate_from_brand(device_name)
