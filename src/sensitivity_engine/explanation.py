"""Human-readable rationale for a calculated sensitivity result.

Purely templated from the input and the result; sections are emitted in a
fixed order and separated by blank lines.
"""

from typing import List

from src.sensitivity_engine.models import CalculationInput, SensitivityResult

# DPI tier thresholds (exclusive)
HIGH_DPI_THRESHOLD = 480
LOW_DPI_THRESHOLD = 360

COMPACT_SCREEN_BELOW = 6.0
LARGE_SCREEN_ABOVE = 6.8

HIGH_REFRESH_FROM = 120
GOOD_REFRESH_FROM = 90

PLAYSTYLE_DESCRIPTIONS = {
    "freestyle": (
        "**Freestyle Profile:** Maximum sensitivity for flashy plays and extreme speed. "
        "Perfect for players who love 360 flicks, fast drag shots, and unpredictable "
        "movement. Requires excellent finger control."
    ),
    "instaplayer": (
        "**Instaplayer Profile:** Very high sensitivity for instant reactions. Designed "
        "for aggressive close-combat dominators who need lightning-fast target "
        "acquisition and quick scope-ins."
    ),
    "rusher": (
        "**Rusher Profile:** High sensitivity for fast aggressive gameplay. Quick flicks "
        "and aggressive pushes will feel natural. Good for players who like to rush and "
        "fight up close."
    ),
    "balanced": (
        "**Balanced Profile:** Well-rounded sensitivities that work for all situations. "
        "Good for players who adapt their playstyle mid-match. Smooth drag shots and "
        "consistent one-taps."
    ),
    "onetap": (
        "**One-Tap/Headshot Profile:** Controlled sensitivities optimized for precise "
        "headshots. Lower scope values help land consistent one-taps. Ideal for ranked "
        "and competitive play."
    ),
    "sniper": (
        "**Sniper Profile:** Very controlled scope sensitivities, especially for AWM. "
        "Designed for patient, accurate long-range gameplay with maximum precision."
    ),
}

PING_DESCRIPTIONS = {
    "low": (
        "**Low Ping (0-40ms):** Excellent connection! Lower sensitivity compensation "
        "applied since your inputs register instantly."
    ),
    "medium": (
        "**Medium Ping (41-80ms):** Moderate latency. Sensitivities are at baseline for "
        "this range."
    ),
    "high": (
        "**High Ping (81+ms):** Higher latency detected. Slightly increased sensitivity "
        "helps compensate for delayed input registration."
    ),
}

# (attribute, label, caption) in display order
SUMMARY_LINES = [
    ("general", "General", "highest for overall control"),
    ("red_dot", "Red Dot", "close to mid-range tracking"),
    ("scope_2x", "2x Scope", "mid-range precision"),
    ("scope_4x", "4x Scope", "long-range control"),
    ("awm_scope", "AWM Scope", "sniper precision"),
    ("free_look", "Free Look", "situational awareness"),
]

TESTING_GUIDE = (
    "**Testing Guide:** Head to the Training Ground and test these settings for "
    "5-10 minutes. If movements feel too fast or slow, adjust each value by ±2 "
    "until comfortable."
)


def _fmt(value: float) -> str:
    """Render 6.0 as '6' and 6.1234567 as '6.1234567'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def dpi_tier(dpi: int) -> str:
    if dpi > HIGH_DPI_THRESHOLD:
        return "high"
    if dpi < LOW_DPI_THRESHOLD:
        return "low"
    return "standard"


def _device_section(calc_input: CalculationInput) -> List[str]:
    if calc_input.platform == "ios":
        return [
            f"**iOS Optimization:** Your {_fmt(calc_input.screen_size)}\" iOS device has "
            "excellent touch stability. Sensitivities are optimized for smooth, consistent "
            "tracking which is ideal for one-taps and drag shots."
        ]

    if calc_input.platform == "android" and calc_input.dpi:
        tier = dpi_tier(calc_input.dpi)
        if tier == "high":
            detail = (
                "Higher DPI means touch input is more sensitive, so we've lowered the "
                "in-game sensitivity to compensate."
            )
        elif tier == "low":
            detail = (
                "Lower DPI means touch input is less responsive, so we've increased "
                "sensitivity slightly."
            )
        else:
            detail = "This is a standard DPI range, providing balanced performance."
        return [
            f"**Android DPI Adjustment:** Your device runs at {calc_input.dpi} DPI "
            f"({tier}). {detail}"
        ]

    return []


def _screen_section(screen_size: float) -> str:
    if screen_size < COMPACT_SCREEN_BELOW:
        detail = (
            "Compact screen detected. Slightly higher sensitivity helps with quick "
            "movements in limited space."
        )
    elif screen_size > LARGE_SCREEN_ABOVE:
        detail = (
            "Large screen detected. Lower sensitivity provides better precision on "
            "bigger displays."
        )
    else:
        detail = "Standard screen size provides balanced control."
    return f"**Screen Size ({_fmt(screen_size)}\"):** {detail}"


def _refresh_section(refresh_rate: int) -> str:
    if refresh_rate >= HIGH_REFRESH_FROM:
        detail = (
            "High refresh rate allows for more responsive controls. You can handle "
            "slightly higher sensitivities with smoother tracking."
        )
    elif refresh_rate >= GOOD_REFRESH_FROM:
        detail = (
            "Good refresh rate provides smooth gameplay. Sensitivities are optimized "
            "for this range."
        )
    else:
        detail = "Standard 60Hz display. Conservative sensitivities ensure consistent control."
    return f"**Refresh Rate ({refresh_rate}Hz):** {detail}"


def _summary_section(result: SensitivityResult) -> str:
    lines = ["---", "", "**Your Sensitivity Summary:**"]
    for attr, label, caption in SUMMARY_LINES:
        lines.append(f"- {label}: {getattr(result, attr)} ({caption})")
    return "\n".join(lines)


def generate_explanation(calc_input: CalculationInput, result: SensitivityResult) -> str:
    """Build the multi-paragraph rationale for *result*."""
    sections = _device_section(calc_input)
    sections.append(_screen_section(calc_input.screen_size))
    sections.append(_refresh_section(calc_input.refresh_rate))
    sections.append(PLAYSTYLE_DESCRIPTIONS[calc_input.playstyle])
    sections.append(PING_DESCRIPTIONS[calc_input.ping_level])
    sections.append(_summary_section(result))
    sections.append(TESTING_GUIDE)
    return "\n\n".join(sections)
