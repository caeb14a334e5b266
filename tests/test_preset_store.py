"""Tests for preset persistence - create/list/delete presets in JSON."""

import json
import re

import pytest

from src.preset_manager.models import Preset
from src.preset_manager.preset_store import PresetStore, generate_preset_id
from src.sensitivity_engine.models import SensitivityResult


# ── Helpers ──────────────────────────────────────────────────────────


_RESULT = SensitivityResult(
    general=154, red_dot=144, scope_2x=125, scope_4x=104, awm_scope=81, free_look=154
)


def _create(store, name="Main", **overrides):
    kwargs = {
        "name": name,
        "device": "Galaxy S23",
        "platform": "android",
        "playstyle": "sniper",
        "ping": "low",
        "dpi": 440,
        "sensitivities": _RESULT,
    }
    kwargs.update(overrides)
    return store.create_preset(**kwargs)


@pytest.fixture
def presets_file(tmp_path):
    return tmp_path / "data" / "presets.json"


@pytest.fixture
def store(presets_file):
    return PresetStore(presets_file)


# ── Id generation ────────────────────────────────────────────────────


class TestGeneratePresetId:
    def test_format(self):
        assert re.fullmatch(r"preset_\d{13}_[0-9a-z]{9}", generate_preset_id())

    def test_unique(self):
        assert len({generate_preset_id() for _ in range(50)}) == 50


# ── Create ───────────────────────────────────────────────────────────


class TestCreatePreset:
    def test_returns_preset_with_id_and_timestamp(self, store):
        preset = _create(store)
        assert preset.id.startswith("preset_")
        assert preset.created_at.endswith("+00:00")
        assert preset.sensitivities == _RESULT

    def test_creates_file_and_parent_dir(self, store, presets_file):
        _create(store)
        assert presets_file.exists()

    def test_file_uses_wire_format(self, store, presets_file):
        preset = _create(store)
        data = json.loads(presets_file.read_text())
        record = data["presets"][0]
        assert record["id"] == preset.id
        assert record["createdAt"] == preset.created_at
        assert record["ping"] == "low"
        assert record["sensitivities"] == {
            "general": 154, "redDot": 144, "scope2x": 125,
            "scope4x": 104, "awmScope": 81, "freeLook": 154,
        }

    def test_appends_to_existing(self, store):
        _create(store, name="First")
        _create(store, name="Second")
        assert [p.name for p in store.list_presets()] == ["First", "Second"]

    def test_write_failure_propagates(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = PresetStore(blocker / "presets.json")
        with pytest.raises(OSError):
            _create(store)

    def test_ios_preset_without_dpi(self, store):
        preset = _create(store, platform="ios", dpi=None)
        assert store.list_presets()[0].dpi is None
        assert preset.to_dict()["dpi"] is None


# ── List ─────────────────────────────────────────────────────────────


class TestListPresets:
    def test_missing_file_is_empty(self, store):
        assert store.list_presets() == []

    def test_corrupt_file_is_empty(self, store, presets_file):
        presets_file.parent.mkdir(parents=True)
        presets_file.write_text("{not json")
        assert store.list_presets() == []

    def test_unexpected_layout_is_empty(self, store, presets_file):
        presets_file.parent.mkdir(parents=True)
        presets_file.write_text(json.dumps(["a", "b"]))
        assert store.list_presets() == []

    def test_skips_corrupt_records(self, store, presets_file):
        good = _create(store)
        data = json.loads(presets_file.read_text())
        data["presets"].append({"id": "broken"})
        presets_file.write_text(json.dumps(data))

        presets = store.list_presets()
        assert [p.id for p in presets] == [good.id]

    def test_roundtrip_preserves_fields(self, store):
        created = _create(store)
        loaded = store.list_presets()[0]
        assert loaded == created

    def test_create_after_corrupt_file_starts_fresh(self, store, presets_file):
        presets_file.parent.mkdir(parents=True)
        presets_file.write_text("garbage")
        _create(store)
        assert len(store.list_presets()) == 1


# ── Delete ───────────────────────────────────────────────────────────


class TestDeletePreset:
    def test_delete_existing(self, store):
        keep = _create(store, name="Keep")
        drop = _create(store, name="Drop")
        assert store.delete_preset(drop.id) is True
        assert [p.id for p in store.list_presets()] == [keep.id]

    def test_delete_missing_returns_false(self, store):
        _create(store)
        assert store.delete_preset("preset_0_nothing") is False
        assert len(store.list_presets()) == 1

    def test_delete_requires_id(self, store):
        with pytest.raises(ValueError, match="Preset ID is required"):
            store.delete_preset("")


class TestPresetModel:
    def test_from_dict_accepts_camel_case_records(self):
        record = {
            "id": "preset_1718000000000_abc123xyz",
            "name": "Ranked",
            "device": "iPhone 15 Pro Max",
            "platform": "ios",
            "playstyle": "balanced",
            "ping": "medium",
            "dpi": None,
            "sensitivities": {
                "general": 143, "redDot": 138, "scope2x": 125,
                "scope4x": 112, "awmScope": 95, "freeLook": 143,
            },
            "createdAt": "2024-06-10T06:13:20.000Z",
        }
        preset = Preset.from_dict(record)
        assert preset.sensitivities.red_dot == 138
        assert preset.to_dict() == record
