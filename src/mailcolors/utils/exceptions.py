# mailcolors/utils/exceptions.py
"""
Exception hierarchy for mailcolors.

Every error raised by the package derives from MailColorsError so callers
(configuration loader, reload handler) can catch one type. Colour rule
failures are deterministic given the same input, so nothing here is retried.
"""

from typing import Any, Dict, Optional

from .translation_utils import _


class MailColorsError(Exception):
    """Base class for all mailcolors errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ColorError(MailColorsError):
    """Base class for colour rule errors."""


class UnknownColorClassError(ColorError):
    """The colour id does not name a rule class handled by the caller."""

    def __init__(self, class_id: Any):
        name = getattr(class_id, "name", str(class_id))
        super().__init__(
            _("Unknown colour class: {}").format(name),
            {"class_id": class_id},
        )
        self.class_id = class_id


class RegexCompileError(ColorError):
    """A literal pattern could not be compiled by the regex engine."""

    def __init__(self, pattern: str, diagnostic: str):
        super().__init__(
            _("Invalid regex '{}': {}").format(pattern, diagnostic),
            {"pattern": pattern, "diagnostic": diagnostic},
        )
        self.pattern = pattern
        self.diagnostic = diagnostic


class PatternCompileError(ColorError):
    """A structured match expression could not be compiled."""

    def __init__(self, pattern: str, diagnostic: str):
        super().__init__(
            _("Invalid pattern '{}': {}").format(pattern, diagnostic),
            {"pattern": pattern, "diagnostic": diagnostic},
        )
        self.pattern = pattern
        self.diagnostic = diagnostic


class ConfigError(MailColorsError):
    """The settings file could not be read or written."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            _("Settings error in {}: {}").format(path, reason),
            {"path": path, "reason": reason},
        )
        self.path = path
        self.reason = reason

