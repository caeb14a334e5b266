"""Tests for the sensitivity explanation generator."""

import pytest

from src.sensitivity_engine import explain
from src.sensitivity_engine.calculator import calculate_sensitivity
from src.sensitivity_engine.config import VALID_PING_LEVELS, VALID_PLAYSTYLES
from src.sensitivity_engine.explanation import (
    PING_DESCRIPTIONS,
    PLAYSTYLE_DESCRIPTIONS,
    dpi_tier,
    generate_explanation,
)
from src.sensitivity_engine.models import CalculationInput, SensitivityResult


# ── Helpers ──────────────────────────────────────────────────────────


def _make_input(**overrides):
    defaults = {
        "platform": "unknown",
        "playstyle": "balanced",
        "ping_level": "medium",
        "screen_size": 6.5,
        "refresh_rate": 60,
        "dpi": None,
        "use_custom_dpi": False,
    }
    defaults.update(overrides)
    return CalculationInput(**defaults)


_RESULT = SensitivityResult(
    general=187, red_dot=171, scope_2x=156, scope_4x=139, awm_scope=118, free_look=163
)


def _explain(**overrides):
    return generate_explanation(_make_input(**overrides), _RESULT)


# ── Device section ───────────────────────────────────────────────────


class TestDeviceSection:
    def test_ios_paragraph(self):
        text = _explain(platform="ios", screen_size=6.7)
        assert text.startswith("**iOS Optimization:** Your 6.7\" iOS device")

    def test_android_high_dpi(self):
        text = _explain(platform="android", dpi=560)
        assert "**Android DPI Adjustment:** Your device runs at 560 DPI (high)." in text
        assert "lowered the in-game sensitivity" in text

    def test_android_low_dpi(self):
        text = _explain(platform="android", dpi=320)
        assert "(low)" in text
        assert "increased sensitivity slightly" in text

    def test_android_standard_dpi(self):
        text = _explain(platform="android", dpi=440)
        assert "(standard)" in text

    def test_android_without_dpi_has_no_device_section(self):
        text = _explain(platform="android", dpi=None)
        assert text.startswith("**Screen Size")

    def test_unknown_platform_has_no_device_section(self):
        text = _explain(platform="unknown", dpi=440)
        assert "DPI Adjustment" not in text
        assert "iOS Optimization" not in text

    @pytest.mark.parametrize(
        "dpi, expected",
        [(480, "standard"), (481, "high"), (360, "standard"), (359, "low")],
    )
    def test_dpi_tier_boundaries(self, dpi, expected):
        assert dpi_tier(dpi) == expected


# ── Screen and refresh sections ──────────────────────────────────────


class TestScreenSection:
    @pytest.mark.parametrize(
        "size, phrase",
        [
            (5.9, "Compact screen detected."),
            (6.0, "Standard screen size provides balanced control."),
            (6.8, "Standard screen size provides balanced control."),
            (6.9, "Large screen detected."),
        ],
    )
    def test_branches(self, size, phrase):
        assert phrase in _explain(screen_size=size)

    def test_whole_number_size_rendered_without_decimal(self):
        assert "**Screen Size (6\"):**" in _explain(screen_size=6.0)

    def test_size_rendered_at_full_precision(self):
        assert "**Screen Size (6.1234567\"):**" in _explain(screen_size=6.1234567)


class TestRefreshSection:
    @pytest.mark.parametrize(
        "rate, phrase",
        [
            (60, "Standard 60Hz display."),
            (89, "Standard 60Hz display."),
            (90, "Good refresh rate provides smooth gameplay."),
            (119, "Good refresh rate provides smooth gameplay."),
            (120, "High refresh rate allows for more responsive controls."),
            (144, "High refresh rate allows for more responsive controls."),
        ],
    )
    def test_branches(self, rate, phrase):
        text = _explain(refresh_rate=rate)
        assert f"**Refresh Rate ({rate}Hz):** {phrase}" in text


# ── Playstyle, ping and summary ──────────────────────────────────────


class TestLookupSections:
    @pytest.mark.parametrize("playstyle", VALID_PLAYSTYLES)
    def test_every_playstyle_has_a_paragraph(self, playstyle):
        assert PLAYSTYLE_DESCRIPTIONS[playstyle] in _explain(playstyle=playstyle)

    @pytest.mark.parametrize("ping", VALID_PING_LEVELS)
    def test_every_ping_level_has_a_paragraph(self, ping):
        assert PING_DESCRIPTIONS[ping] in _explain(ping_level=ping)


class TestSummary:
    def test_contains_all_values_verbatim(self):
        text = _explain()
        assert "- General: 187 (highest for overall control)" in text
        assert "- Red Dot: 171 (close to mid-range tracking)" in text
        assert "- 2x Scope: 156 (mid-range precision)" in text
        assert "- 4x Scope: 139 (long-range control)" in text
        assert "- AWM Scope: 118 (sniper precision)" in text
        assert "- Free Look: 163 (situational awareness)" in text

    def test_section_order(self):
        text = _explain(platform="ios", playstyle="sniper", ping_level="high")
        positions = [
            text.index("**iOS Optimization:**"),
            text.index("**Screen Size"),
            text.index("**Refresh Rate"),
            text.index("**Sniper Profile:**"),
            text.index("**High Ping"),
            text.index("**Your Sensitivity Summary:**"),
            text.index("**Testing Guide:**"),
        ]
        assert positions == sorted(positions)

    def test_paragraphs_separated_by_blank_lines(self):
        text = _explain(platform="android", dpi=440)
        paragraphs = text.split("\n\n")
        assert paragraphs[0].startswith("**Android DPI Adjustment:**")
        assert paragraphs[-1].startswith("**Testing Guide:**")

    def test_explain_alias_with_calculated_result(self):
        calc_input = _make_input(platform="ios", screen_size=6.7)
        result = calculate_sensitivity(calc_input)
        text = explain(calc_input, result)
        for value in result.as_channels().values():
            assert str(value) in text
