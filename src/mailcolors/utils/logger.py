# mailcolors/utils/logger.py
"""
Logging utilities for mailcolors.

Every module asks get_logger() for a named logger; all of them share one
LogSettings object, so changing the console level or turning file logging
on rebuilds the handlers of every logger handed out so far. The log
directory is only created once file logging is enabled.
"""

import logging
import logging.handlers
import os
import sys
import threading
from pathlib import Path
from typing import Dict, Optional

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)-8s | %(funcName)s:%(lineno)d | %(message)s"


class LogSettings:
    """Shared handler settings for every mailcolors logger."""

    def __init__(self):
        self.console_level = logging.WARNING
        self.log_to_file = False
        self.max_file_size = 2 * 1024 * 1024
        self.backup_count = 3
        self._log_dir: Optional[Path] = None

    @property
    def log_dir(self) -> Path:
        if self._log_dir is None:
            base = os.environ.get("MAILCOLORS_CONFIG_DIR")
            root = Path(base) if base else Path.home() / ".config" / "mailcolors"
            self._log_dir = root / "logs"
            self._log_dir.mkdir(parents=True, exist_ok=True)
        return self._log_dir


class ColoredFormatter(logging.Formatter):
    """Console formatter colouring the level name without breaking columns."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        levelname = record.levelname
        color = self.COLORS.get(levelname)
        if color:
            record.levelname = f"{color}{levelname}{self.RESET}{' ' * (8 - len(levelname))}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


class ThreadSafeLogger:
    """Named logger whose handlers follow the shared LogSettings."""

    def __init__(self, name: str, settings: LogSettings):
        self.name = name
        self.settings = settings
        self._logger = logging.getLogger(name)
        self._lock = threading.Lock()
        self.configure()

    def configure(self):
        with self._lock:
            self._logger.handlers.clear()
            self._logger.propagate = False
            self._logger.setLevel(logging.DEBUG)

            console = logging.StreamHandler(sys.stderr)
            console.setLevel(self.settings.console_level)
            console.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
            self._logger.addHandler(console)

            if self.settings.log_to_file:
                formatter = logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
                for filename, level in (
                    ("mailcolors.log", logging.DEBUG),
                    ("mailcolors_errors.log", logging.ERROR),
                ):
                    handler = logging.handlers.RotatingFileHandler(
                        self.settings.log_dir / filename,
                        maxBytes=self.settings.max_file_size,
                        backupCount=self.settings.backup_count,
                        encoding="utf-8",
                    )
                    handler.setLevel(level)
                    handler.setFormatter(formatter)
                    self._logger.addHandler(handler)

    @property
    def logger(self) -> logging.Logger:
        """The wrapped stdlib logger."""
        return self._logger

    def debug(self, message: str, **kwargs):
        self._logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self._logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._logger.warning(message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs):
        self._logger.error(message, exc_info=exc_info, **kwargs)


_settings = LogSettings()
_loggers: Dict[str, ThreadSafeLogger] = {}
_registry_lock = threading.RLock()


def get_logger(name: str = "mailcolors") -> ThreadSafeLogger:
    """Get (or create) the logger called ``name``."""
    with _registry_lock:
        if name not in _loggers:
            _loggers[name] = ThreadSafeLogger(name, _settings)
        return _loggers[name]


def _reconfigure():
    with _registry_lock:
        for logger in _loggers.values():
            logger.configure()


def set_console_log_level(level_str: str):
    """Set the console level of every logger from a level name."""
    level = _LEVELS.get(str(level_str).upper())
    if level is None:
        get_logger().error(f"Invalid log level string: {level_str}")
        return
    with _registry_lock:
        _settings.console_level = level
        _reconfigure()


def set_log_to_file_enabled(enabled: bool):
    """Turn rotating file logging on or off for every logger."""
    with _registry_lock:
        if _settings.log_to_file != enabled:
            _settings.log_to_file = enabled
            _reconfigure()


def log_color_event(event_type: str, class_name: str, pattern: str, details: str = ""):
    """Log a colour rule event (added, updated, rejected)."""
    message = f"Colour '{class_name}' rule '{pattern}' {event_type}"
    if details:
        message += f": {details}"
    get_logger("mailcolors.color").debug(message)


def log_error_with_context(error: Exception, context: str, logger_name: str = "mailcolors"):
    """Log an error with the traceback and what was being done."""
    get_logger(logger_name).error(f"Error in {context}: {error}", exc_info=True)
