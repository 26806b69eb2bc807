import json

import pytest

from flashdeck.config import (
    DATASETS,
    PREFERENCE_KEY,
    SettingsManager,
    find_dataset,
    get_dataset,
    get_dataset_ids,
)
from flashdeck.models import DatasetDescriptor


def test_defaults(settings):
    assert settings.get(PREFERENCE_KEY) == ""
    assert settings.get("KEEP_BLANK_RECORDS") is False
    assert settings.get("DATASET_BASE_URL") == ""


def test_singleton(settings):
    assert SettingsManager() is settings


def test_set_persists_and_reloads(settings):
    settings.set(PREFERENCE_KEY, "unit2")

    saved = json.loads(settings.settings_file.read_text(encoding="utf-8"))
    assert saved[PREFERENCE_KEY] == "unit2"

    settings.set(PREFERENCE_KEY, "unit1", persist=False)
    settings.reload()
    assert settings.get(PREFERENCE_KEY) == "unit2"


def test_reset(settings):
    settings.set(PREFERENCE_KEY, "unit2")
    settings.reset(PREFERENCE_KEY)
    assert settings.get(PREFERENCE_KEY) == ""


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "other.json"
    path.write_text(json.dumps({"KEEP_BLANK_RECORDS": False, "DATASET_BASE_URL": "https://a/"}), encoding="utf-8")
    monkeypatch.setenv("KEEP_BLANK_RECORDS", "yes")
    SettingsManager.reset_instance()

    manager = SettingsManager(str(path))

    assert manager.get("KEEP_BLANK_RECORDS") is True
    assert manager.get("DATASET_BASE_URL") == "https://a/"


def test_corrupt_settings_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    SettingsManager.reset_instance()

    assert SettingsManager(str(path)).get(PREFERENCE_KEY) == ""


def test_datasets():
    assert get_dataset_ids() == ["all", "combined", "unit1", "unit2"]
    assert find_dataset("combined").sources == ("unit1.json", "unit2.json")
    assert find_dataset("combined").is_composite
    assert find_dataset("nope") is DATASETS[0]
    assert find_dataset(None) is DATASETS[0]
    assert get_dataset("nope") is None


def test_descriptor_needs_sources():
    with pytest.raises(ValueError):
        DatasetDescriptor("x", "X", ())
    with pytest.raises(TypeError):
        DatasetDescriptor("x", "X", "unit1.json")
    assert DatasetDescriptor("x", "X", ["a.json"]).sources == ("a.json",)
