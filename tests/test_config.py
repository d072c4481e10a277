import json
import logging

import pytest

from mailcolors.pattern import DEFAULT_SIMPLE_SEARCH
from mailcolors.settings.config import (
    ColorSettings,
    apply_logging_settings,
    get_settings_file,
    load_settings,
    save_settings,
)
from mailcolors.utils.exceptions import ConfigError
from mailcolors.utils.logger import get_logger


def test_defaults():
    settings = ColorSettings()

    assert settings.simple_search == DEFAULT_SIMPLE_SEARCH
    assert settings.color_debug is False
    assert settings.log_level == "WARNING"
    assert settings.log_to_file is False


def test_invalid_values_are_normalised():
    settings = ColorSettings(simple_search="", log_level="chatty")

    assert settings.simple_search == DEFAULT_SIMPLE_SEARCH
    assert settings.log_level == "WARNING"
    assert ColorSettings(log_level="debug").log_level == "DEBUG"


def test_missing_file_gives_defaults(tmp_path):
    assert load_settings(tmp_path / "nope.json") == ColorSettings()


def test_save_then_load(tmp_path):
    path = tmp_path / "conf" / "settings.json"
    settings = ColorSettings(simple_search="~L %s", color_debug=True, log_level="INFO")

    save_settings(settings, path)

    assert load_settings(path) == settings
    assert not path.with_suffix(".tmp").exists()
    assert json.loads(path.read_text(encoding="utf-8"))["simple_search"] == "~L %s"


def test_unknown_keys_are_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"color_debug": True, "theme": "dark"}), encoding="utf-8")

    settings = load_settings(path)

    assert settings.color_debug is True
    assert settings.simple_search == DEFAULT_SIMPLE_SEARCH


def test_non_boolean_flags_fall_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"color_debug": "false", "log_to_file": 1, "simple_search": 42}),
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.color_debug is False
    assert settings.log_to_file is False
    assert settings.simple_search == DEFAULT_SIMPLE_SEARCH


def test_corrupt_json_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_settings(path)

    assert excinfo.value.path == str(path)


def test_non_object_root_raises(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(path)


def test_config_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("MAILCOLORS_CONFIG_DIR", str(tmp_path))
    save_settings(ColorSettings(color_debug=True))

    assert get_settings_file() == tmp_path / "settings.json"
    assert load_settings().color_debug is True


def test_apply_logging_settings():
    logger = get_logger("mailcolors.tests.config")
    try:
        apply_logging_settings(ColorSettings(log_level="DEBUG"))
        assert logger.logger.handlers[0].level == logging.DEBUG
    finally:
        apply_logging_settings(ColorSettings())
    assert logger.logger.handlers[0].level == logging.WARNING
