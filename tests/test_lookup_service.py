"""Tests for the device lookup service."""

import pytest

from src.device_lookup.device_cache import DeviceCache
from src.device_lookup.lookup_service import (
    DeviceLookupError,
    DeviceLookupService,
    specs_to_form_fields,
)
from src.device_lookup.models import DeviceSpecs


# ── Helpers ──────────────────────────────────────────────────────────


def _make_specs(name="Galaxy S24", **overrides):
    defaults = {
        "device_name": name,
        "platform": "android",
        "screen_size": "6.2",
        "refresh_rate": "120",
        "default_dpi": "420",
    }
    defaults.update(overrides)
    return DeviceSpecs(**defaults)


class _FakeAIClient:
    def __init__(self, specs=None):
        self.specs = specs
        self.queries = []

    def query_device_specs(self, device_name):
        self.queries.append(device_name)
        return self.specs


@pytest.fixture
def cache(tmp_path):
    cache = DeviceCache(tmp_path / "devices.json")
    cache.save_device(_make_specs("Samsung Galaxy S24"))
    return cache


# ── Lookup ───────────────────────────────────────────────────────────


class TestLookup:
    def test_exact_cache_hit(self, cache):
        ai = _FakeAIClient()
        result = DeviceLookupService(cache, ai).lookup("samsung galaxy s24")

        assert result.success is True
        assert result.source == "cache"
        assert result.device.device_name == "Samsung Galaxy S24"
        assert ai.queries == []

    def test_fuzzy_hit_uses_user_name(self, cache):
        result = DeviceLookupService(cache, _FakeAIClient()).lookup("Galaxy S24")

        assert result.source == "cache_fuzzy"
        assert result.device.device_name == "Galaxy S24"
        assert result.device.default_dpi == "420"

    def test_brand_estimate_counts_as_fuzzy(self, cache):
        result = DeviceLookupService(cache, _FakeAIClient()).lookup("Pixel 7a")
        assert result.source == "cache_fuzzy"
        assert result.device.refresh_rate == "90"

    def test_ai_result_is_cached(self, cache):
        ai = _FakeAIClient(_make_specs("Sony Xperia 1 V", screen_size="6.5"))
        service = DeviceLookupService(cache, ai)

        result = service.lookup("Sony Xperia 1 V")
        assert result.source == "ai"
        assert ai.queries == ["Sony Xperia 1 V"]

        again = service.lookup("sony xperia 1 v")
        assert again.source == "cache"
        assert ai.queries == ["Sony Xperia 1 V"]

    def test_all_methods_fail(self, cache):
        result = DeviceLookupService(cache, _FakeAIClient(None)).lookup("Sony Xperia 10")

        assert result.success is False
        assert result.source is None
        assert result.error == "Could not identify device. Please enter specs manually."
        assert result.device == DeviceSpecs.unknown("Sony Xperia 10")

    def test_offline_skips_ai(self, cache):
        ai = _FakeAIClient(_make_specs("Sony Xperia 1 V"))
        result = DeviceLookupService(cache, ai, use_ai=False).lookup("Sony Xperia 1 V")

        assert result.success is False
        assert ai.queries == []

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_requires_name(self, cache, name):
        with pytest.raises(DeviceLookupError, match="Device name is required"):
            DeviceLookupService(cache, _FakeAIClient()).lookup(name)


# ── Form pre-fill ────────────────────────────────────────────────────


class TestSpecsToFormFields:
    def test_known_values_pass_through(self):
        fields = specs_to_form_fields(_make_specs())
        assert fields == {
            "platform": "android",
            "screenSize": "6.2",
            "refreshRate": "120",
            "dpi": "420",
        }

    def test_unknown_values_fall_back(self):
        fields = specs_to_form_fields(DeviceSpecs.unknown("Mystery"))
        assert fields == {
            "platform": "unknown",
            "screenSize": "6.5",
            "refreshRate": "60",
            "dpi": "440",
        }

    def test_strips_hz_suffix(self):
        fields = specs_to_form_fields(_make_specs(refresh_rate="120Hz"))
        assert fields["refreshRate"] == "120"

    def test_ios_dpi_placeholder_falls_back(self):
        fields = specs_to_form_fields(_make_specs(platform="ios", default_dpi="N/A"))
        assert fields["dpi"] == "440"
