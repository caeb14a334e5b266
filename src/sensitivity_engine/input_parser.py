"""Turn raw form or CLI values into a validated CalculationInput.

The engine assumes clean input; this module owns the coercion rules:
- Enum fields must belong to their closed set (missing ones get defaults)
- Numeric fields accept strings with unit suffixes ("120Hz", '6.7"')
- Unparsable or zero numbers fall back to form defaults
- DPI is only kept for Android
"""

import logging
import math
import re
from typing import Any, Mapping, Optional

from src.sensitivity_engine.config import (
    DEFAULT_ANDROID_DPI,
    DEFAULT_PING_LEVEL,
    DEFAULT_PLATFORM,
    DEFAULT_PLAYSTYLE,
    DEFAULT_REFRESH_RATE,
    DEFAULT_SCREEN_SIZE,
    VALID_PING_LEVELS,
    VALID_PLATFORMS,
    VALID_PLAYSTYLES,
)
from src.sensitivity_engine.models import CalculationInput

logger = logging.getLogger(__name__)

_LEADING_FLOAT = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+))")
_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")

_TRUTHY = {"1", "true", "yes", "on"}


class InputValidationError(ValueError):
    """Raised when a raw field is outside its closed value set."""


def _parse_leading_float(value: Any) -> Optional[float]:
    """Parse the leading number of *value* (e.g. '6.7 inches' -> 6.7)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    match = _LEADING_FLOAT.match(str(value))
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def _parse_leading_int(value: Any) -> Optional[int]:
    """Parse the leading integer of *value* (e.g. '120Hz' -> 120, 6.9 -> 6)."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def _parse_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def _pick(raw: Mapping[str, Any], *keys: str) -> Any:
    """First present key wins, so both camelCase and snake_case are accepted."""
    for key in keys:
        if key in raw and raw[key] is not None and raw[key] != "":
            return raw[key]
    return None


def _parse_choice(value: Any, field_name: str, valid: tuple, default: str) -> str:
    if value is None:
        return default
    choice = str(value).strip().lower()
    if choice not in valid:
        raise InputValidationError(
            f"Invalid {field_name}: {value!r}. Must be one of {', '.join(valid)}."
        )
    return choice


def parse_calculation_input(raw: Mapping[str, Any]) -> CalculationInput:
    """Validate and coerce raw form values.

    Args:
        raw: Mapping with any of ``platform``, ``playstyle``,
            ``pingLevel``/``ping_level``, ``screenSize``/``screen_size``,
            ``refreshRate``/``refresh_rate``, ``dpi`` and
            ``useCustomDpi``/``use_custom_dpi``.

    Returns:
        A :class:`CalculationInput` safe to hand to the calculator.

    Raises:
        InputValidationError: if platform, playstyle or ping level is not
            one of the supported values.
    """
    platform = _parse_choice(
        _pick(raw, "platform"), "platform", VALID_PLATFORMS, DEFAULT_PLATFORM
    )
    playstyle = _parse_choice(
        _pick(raw, "playstyle"), "playstyle", VALID_PLAYSTYLES, DEFAULT_PLAYSTYLE
    )
    ping_level = _parse_choice(
        _pick(raw, "pingLevel", "ping_level", "ping"),
        "ping level",
        VALID_PING_LEVELS,
        DEFAULT_PING_LEVEL,
    )

    screen_size = _parse_leading_float(_pick(raw, "screenSize", "screen_size"))
    if not screen_size:
        logger.debug("Screen size missing or unparsable, using %.1f", DEFAULT_SCREEN_SIZE)
        screen_size = DEFAULT_SCREEN_SIZE

    refresh_rate = _parse_leading_int(_pick(raw, "refreshRate", "refresh_rate"))
    if not refresh_rate:
        logger.debug("Refresh rate missing or unparsable, using %d", DEFAULT_REFRESH_RATE)
        refresh_rate = DEFAULT_REFRESH_RATE

    dpi = None
    if platform == "android":
        dpi = _parse_leading_int(_pick(raw, "dpi")) or DEFAULT_ANDROID_DPI

    use_custom_dpi = _parse_bool(_pick(raw, "useCustomDpi", "use_custom_dpi") or False)

    return CalculationInput(
        platform=platform,
        playstyle=playstyle,
        ping_level=ping_level,
        screen_size=screen_size,
        refresh_rate=refresh_rate,
        dpi=dpi,
        use_custom_dpi=use_custom_dpi,
    )
