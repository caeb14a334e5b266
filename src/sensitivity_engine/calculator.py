"""Sensitivity calculator.

Every output channel starts from a fixed base value and is scaled by five
multiplicative modifiers derived from the input:

* **Playstyle**: per-channel table row, aggressive styles run hotter.
* **Ping**: uniform nudge upwards for high-latency connections.
* **Screen size**: smaller screens need faster finger travel.
* **Refresh rate**: smoother tracking affords more headroom.
* **Platform**: fixed iOS constant or an Android DPI ratio.

A second, explicit pass then repairs the descending precision order
general > red dot > 2x > 4x > AWM and caps free look at general.
"""

import logging
import math
from typing import Dict, List, Tuple

from src.sensitivity_engine.config import (
    BASE_SENSITIVITIES,
    CHANNELS,
    DPI_MODIFIER_MAX,
    DPI_MODIFIER_MIN,
    HIGH_REFRESH_MODIFIER,
    IOS_MODIFIER,
    PING_MODIFIERS,
    PLAYSTYLE_MODIFIERS,
    PRECISION_CHAIN,
    REFRESH_RATE_STEPS,
    SCREEN_SIZE_STEPS,
    SENSITIVITY_MAX,
    SENSITIVITY_MIN,
    STANDARD_DPI,
    TABLET_SCREEN_MODIFIER,
)
from src.sensitivity_engine.models import CalculationInput, SensitivityResult

logger = logging.getLogger(__name__)


def clamp_sensitivity(value: float) -> int:
    """Round half-up and clamp to the in-game range [1, 200]."""
    rounded = math.floor(value + 0.5)
    return min(SENSITIVITY_MAX, max(SENSITIVITY_MIN, rounded))


def _step_modifier(value: float, steps: List[Tuple[float, float]], fallback: float) -> float:
    """First step whose inclusive upper bound covers *value* wins."""
    for upper_bound, modifier in steps:
        if value <= upper_bound:
            return modifier
    return fallback


class SensitivityCalculator:
    """Calculate in-game sensitivities for a single device/playstyle input.

    The calculator is stateless: everything comes from the input and the
    constant tables in :mod:`src.sensitivity_engine.config`.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def calculate(self, calc_input: CalculationInput) -> SensitivityResult:
        """Compute the six sensitivity channels for *calc_input*.

        Returns:
            :class:`SensitivityResult` with every channel in [1, 200],
            general > red_dot > scope_2x > scope_4x > awm_scope (except
            where pinned at 1) and free_look <= general.
        """
        playstyle_modifiers = PLAYSTYLE_MODIFIERS[calc_input.playstyle]
        ping = PING_MODIFIERS[calc_input.ping_level]
        screen = self.screen_size_modifier(calc_input.screen_size)
        refresh = self.refresh_rate_modifier(calc_input.refresh_rate)
        platform = self.platform_modifier(calc_input)

        logger.debug(
            "Modifiers for %s/%s: ping=%.2f screen=%.2f refresh=%.2f platform=%.4f",
            calc_input.platform, calc_input.playstyle, ping, screen, refresh, platform,
        )

        values: Dict[str, int] = {}
        for channel in CHANNELS:
            raw = (
                BASE_SENSITIVITIES[channel]
                * playstyle_modifiers[channel]
                * ping
                * screen
                * refresh
                * platform
            )
            values[channel] = clamp_sensitivity(raw)

        values = self.enforce_progressive_order(values)
        return SensitivityResult(**values)

    # ------------------------------------------------------------------
    # Modifiers
    # ------------------------------------------------------------------

    @staticmethod
    def screen_size_modifier(screen_size: float) -> float:
        """Step function of screen size; tablets above 7.0" get 0.92.

        Non-positive sizes fall into the smallest-screen branch.
        """
        return _step_modifier(screen_size, SCREEN_SIZE_STEPS, TABLET_SCREEN_MODIFIER)

    @staticmethod
    def refresh_rate_modifier(refresh_rate: int) -> float:
        """Step function of refresh rate; 144Hz+ panels get 1.08."""
        return _step_modifier(refresh_rate, REFRESH_RATE_STEPS, HIGH_REFRESH_MODIFIER)

    @staticmethod
    def dpi_modifier(dpi: int) -> float:
        """Higher DPI means denser touch input, so less sensitivity is needed.

        Formula::

            modifier = clamp(420 / dpi, 0.85, 1.15)
        """
        ratio = STANDARD_DPI / dpi
        return max(DPI_MODIFIER_MIN, min(DPI_MODIFIER_MAX, ratio))

    def platform_modifier(self, calc_input: CalculationInput) -> float:
        """iOS constant, Android DPI ratio, or 1.0 when neither applies."""
        if calc_input.platform == "ios":
            return IOS_MODIFIER
        dpi = calc_input.dpi
        if calc_input.platform == "android" and dpi and (calc_input.use_custom_dpi or dpi > 0):
            return self.dpi_modifier(dpi)
        return 1.0

    # ------------------------------------------------------------------
    # Ordering repair pass
    # ------------------------------------------------------------------

    @staticmethod
    def enforce_progressive_order(values: Dict[str, int]) -> Dict[str, int]:
        """Repair the descending precision chain, then re-clamp.

        Walks general -> red_dot -> scope_2x -> scope_4x -> awm_scope; any
        channel that is not strictly below its (already repaired) predecessor
        becomes predecessor - 1. free_look is capped at general. Sequential
        subtraction can push several channels below 1 before the final
        clamp, which compresses them into a band at the floor.
        """
        repaired = dict(values)
        for higher, lower in zip(PRECISION_CHAIN, PRECISION_CHAIN[1:]):
            if repaired[lower] >= repaired[higher]:
                repaired[lower] = repaired[higher] - 1

        if repaired["free_look"] > repaired["general"]:
            repaired["free_look"] = repaired["general"]

        return {channel: clamp_sensitivity(value) for channel, value in repaired.items()}


_calculator = SensitivityCalculator()


def calculate_sensitivity(calc_input: CalculationInput) -> SensitivityResult:
    """Module-level entry point, see :meth:`SensitivityCalculator.calculate`."""
    return _calculator.calculate(calc_input)
