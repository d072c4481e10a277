# mailcolors/settings/config.py
"""
Settings for the colour engine.

Settings live in a small JSON file under the config directory
(``$MAILCOLORS_CONFIG_DIR`` or ``~/.config/mailcolors``). A missing file
means defaults; a corrupt one is reported instead of silently ignored.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from ..pattern.simple import DEFAULT_SIMPLE_SEARCH
from ..utils.exceptions import ConfigError
from ..utils.logger import (
    get_logger,
    log_error_with_context,
    set_console_log_level,
    set_log_to_file_enabled,
)
from ..utils.translation_utils import _

SETTINGS_FILE_NAME = "settings.json"

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_config_dir() -> Path:
    """Directory holding the settings file and logs."""
    base = os.environ.get("MAILCOLORS_CONFIG_DIR")
    if base:
        return Path(base)
    return Path.home() / ".config" / "mailcolors"


def get_settings_file() -> Path:
    return get_config_dir() / SETTINGS_FILE_NAME


@dataclass(slots=True)
class ColorSettings:
    """
    Engine settings.

    Attributes:
        simple_search: Template used to expand simple index patterns.
        color_debug: Log every rule list after each parsed colour command.
        log_level: Console log level name.
        log_to_file: Also write rotating log files.
    """

    simple_search: str = DEFAULT_SIMPLE_SEARCH
    color_debug: bool = False
    log_level: str = "WARNING"
    log_to_file: bool = False

    def __post_init__(self):
        if not self.simple_search:
            self.simple_search = DEFAULT_SIMPLE_SEARCH
        level = str(self.log_level).upper()
        self.log_level = level if level in _VALID_LOG_LEVELS else "WARNING"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "simple_search": self.simple_search,
            "color_debug": self.color_debug,
            "log_level": self.log_level,
            "log_to_file": self.log_to_file,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ColorSettings":
        simple_search = data.get("simple_search", DEFAULT_SIMPLE_SEARCH)
        return cls(
            simple_search=simple_search if isinstance(simple_search, str) else "",
            color_debug=_flag(data, "color_debug"),
            log_level=data.get("log_level", "WARNING"),
            log_to_file=_flag(data, "log_to_file"),
        )


def _flag(data: Dict[str, Any], key: str) -> bool:
    # JSON strings such as "false" are not booleans
    value = data.get(key, False)
    return value if isinstance(value, bool) else False


def load_settings(path: Optional[Path] = None) -> ColorSettings:
    """
    Load settings from JSON.

    Raises:
        ConfigError: If the file exists but is not a valid settings object.
    """
    logger = get_logger("mailcolors.settings")
    settings_file = Path(path) if path else get_settings_file()

    if not settings_file.exists():
        logger.debug(f"No settings file at {settings_file}, using defaults")
        return ColorSettings()

    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(str(settings_file), _("Invalid JSON: {}").format(e)) from e
    except OSError as e:
        raise ConfigError(str(settings_file), _("Read failed: {}").format(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(str(settings_file), _("Root data is not a dictionary"))

    settings = ColorSettings.from_dict(data)
    logger.info(f"Loaded settings from {settings_file}")
    return settings


def save_settings(settings: ColorSettings, path: Optional[Path] = None) -> None:
    """Write settings atomically through a temporary file."""
    settings_file = Path(path) if path else get_settings_file()
    try:
        settings_file.parent.mkdir(parents=True, exist_ok=True)
        temp_file = settings_file.with_suffix(".tmp")
        with open(temp_file, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2, ensure_ascii=False)
        temp_file.replace(settings_file)
    except OSError as e:
        log_error_with_context(e, "saving settings", "mailcolors.settings")
        raise ConfigError(str(settings_file), _("Write failed: {}").format(e)) from e


def apply_logging_settings(settings: ColorSettings) -> None:
    """Push log level and file logging flag into the logger manager."""
    set_console_log_level(settings.log_level)
    set_log_to_file_enabled(settings.log_to_file)
