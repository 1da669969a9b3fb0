"""Unit tests for parser settings loading."""

import pytest

from autofill.contexts.intake.field_extractor import extract_name
from autofill.contexts.intake.settings import ParserSettings, load_parser_settings


@pytest.fixture(autouse=True)
def no_settings_env(monkeypatch):
    monkeypatch.delenv("AUTOFILL_PARSER_SETTINGS", raising=False)


@pytest.mark.unit
def test_packaged_defaults_match_dataclass_defaults():
    assert load_parser_settings() == ParserSettings()


@pytest.mark.unit
def test_packaged_defaults_values():
    settings = load_parser_settings()

    assert settings.recovery_encoding == "utf-8"
    assert (settings.recovery_printable_min, settings.recovery_printable_max) == (32, 126)
    assert settings.recovery_min_run_length == 3
    assert settings.name_scan_window == 10
    assert (settings.name_min_length, settings.name_max_length) == (2, 60)
    assert (settings.name_min_words, settings.name_max_words) == (2, 5)


@pytest.mark.unit
def test_override_file_replaces_only_given_keys(tmp_path):
    override = tmp_path / "strict.yaml"
    override.write_text("name:\n  scan_window: 3\n  max_words: 3\n")

    settings = load_parser_settings(override)

    assert settings.name_scan_window == 3
    assert settings.name_max_words == 3
    assert settings.name_min_words == 2
    assert settings.recovery_min_run_length == 3


@pytest.mark.unit
def test_override_from_environment(tmp_path, monkeypatch):
    override = tmp_path / "env.yaml"
    override.write_text("recovery:\n  min_run_length: 6\n")
    monkeypatch.setenv("AUTOFILL_PARSER_SETTINGS", str(override))

    assert load_parser_settings().recovery_min_run_length == 6


@pytest.mark.unit
def test_unknown_key_rejected(tmp_path):
    override = tmp_path / "typo.yaml"
    override.write_text("name:\n  scan_windw: 3\n")

    with pytest.raises(ValueError, match="name_scan_windw"):
        load_parser_settings(override)


@pytest.mark.unit
def test_non_mapping_section_rejected(tmp_path):
    override = tmp_path / "flat.yaml"
    override.write_text("name: 5\n")

    with pytest.raises(ValueError, match="must be a mapping"):
        load_parser_settings(override)


@pytest.mark.unit
def test_invalid_printable_range_rejected(tmp_path):
    override = tmp_path / "range.yaml"
    override.write_text("recovery:\n  printable_min: 200\n  printable_max: 100\n")

    with pytest.raises(ValueError, match="Invalid printable byte range"):
        load_parser_settings(override)


@pytest.mark.unit
def test_loaded_settings_drive_extraction(tmp_path):
    override = tmp_path / "narrow.yaml"
    override.write_text("name:\n  max_words: 2\n")
    settings = load_parser_settings(override)

    lines = ["Anna Maria Cruz", "Jane Doe"]
    assert extract_name(lines) == "Anna Maria Cruz"
    assert extract_name(lines, settings) == "Jane Doe"
