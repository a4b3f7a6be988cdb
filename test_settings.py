"""Settings persistence: values survive a reload, bad files fall back to defaults."""

import json
import logging
from datetime import date

import pytest

import settings
from session import ToggleMark, apply, initial_state
from settings import load_settings, save_setting, save_settings


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    path = tmp_path / "dual-calendar-settings.json"
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(path))
    return path


def test_missing_file_gives_defaults(settings_file):
    assert load_settings() == {
        "marked_dates": [],
        "language": "en",
        "calendar_type": "gregorian",
        "dark_mode": False,
    }


def test_defaults_are_not_shared(settings_file):
    load_settings()["marked_dates"].append("2024-01-01")
    assert load_settings()["marked_dates"] == []


def test_entries_survive_restart(settings_file):
    save_setting("marked_dates", ["2024-03-15", "2024-12-31"])
    save_setting("language", "ar")
    save_setting("calendar_type", "hijri")

    reloaded = load_settings()
    assert reloaded["marked_dates"] == ["2024-03-15", "2024-12-31"]
    assert reloaded["language"] == "ar"
    assert reloaded["calendar_type"] == "hijri"
    assert reloaded["dark_mode"] is False


def test_save_setting_leaves_other_entries(settings_file):
    save_settings({"marked_dates": ["2024-01-01"], "language": "ar",
                   "calendar_type": "hijri", "dark_mode": True})
    save_setting("language", "en")
    stored = json.loads(settings_file.read_text(encoding="utf-8"))
    assert stored == {"marked_dates": ["2024-01-01"], "language": "en",
                      "calendar_type": "hijri", "dark_mode": True}


def test_malformed_json_defaults_to_empty_marks(settings_file):
    settings_file.write_text("{not json", encoding="utf-8")
    assert load_settings()["marked_dates"] == []


def test_non_object_document_is_ignored(settings_file):
    settings_file.write_text('["2024-01-01"]', encoding="utf-8")
    assert load_settings()["marked_dates"] == []


def test_marked_dates_must_be_a_list(settings_file):
    settings_file.write_text('{"marked_dates": "2024-01-01"}', encoding="utf-8")
    assert load_settings()["marked_dates"] == []


def test_malformed_keys_are_dropped(settings_file):
    settings_file.write_text(
        json.dumps({"marked_dates": ["2024-01-01", "2024-02-30", 7, "tomorrow",
                                     "2024-3-5", "٢٠٢٤-٠٣-٠٥"]}),
        encoding="utf-8",
    )
    assert load_settings()["marked_dates"] == ["2024-01-01"]


def test_only_canonical_keys_can_be_unmarked(settings_file):
    """Every loaded key must be one the window can toggle off again."""
    settings_file.write_text(
        json.dumps({"marked_dates": ["2024-3-5", "2024-03-05"]}), encoding="utf-8")
    st = initial_state(load_settings(), date(2024, 3, 5))
    st = apply(st, ToggleMark())
    assert st.marked == frozenset()


def test_unknown_values_fall_back(settings_file):
    settings_file.write_text(
        json.dumps({"language": "fr", "calendar_type": "julian", "dark_mode": "yes"}),
        encoding="utf-8",
    )
    loaded = load_settings()
    assert loaded["language"] == "en"
    assert loaded["calendar_type"] == "gregorian"
    assert loaded["dark_mode"] is False


def test_failed_write_is_logged_not_raised(tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(settings, "_SETTINGS_PATH", str(tmp_path / "missing" / "s.json"))
    with caplog.at_level(logging.WARNING, logger="settings"):
        save_setting("language", "ar")
    assert "Could not save language" in caplog.text
