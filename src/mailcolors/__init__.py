# mailcolors/__init__.py
"""
Regex colour rules for a mail reader's display surface.

Usage:
    from mailcolors import ColorId, RegexColorEngine, load_settings

    engine = RegexColorEngine(settings=load_settings())
    engine.parse_color_list(ColorId.HEADER, "^Subject:", 3, -1, 0)

Note: The GObject signal bus is only imported when the engine first needs
it, so the rule engine itself can be used without a running main loop.
"""

from typing import TYPE_CHECKING

from .color import (
    Attr,
    AttrColor,
    ColorId,
    CursesColorPool,
    RegexColor,
    RegexColorEngine,
    RegexColorList,
)
from .settings.config import ColorSettings, load_settings
from .utils.exceptions import (
    ColorError,
    ConfigError,
    MailColorsError,
    PatternCompileError,
    RegexCompileError,
    UnknownColorClassError,
)

if TYPE_CHECKING:
    from .core.signals import ColorSignals

__version__ = "0.3.0"

__all__ = [
    "Attr",
    "AttrColor",
    "ColorError",
    "ColorId",
    "ColorSettings",
    "ColorSignals",
    "ConfigError",
    "CursesColorPool",
    "MailColorsError",
    "PatternCompileError",
    "RegexColor",
    "RegexColorEngine",
    "RegexColorList",
    "RegexCompileError",
    "UnknownColorClassError",
    "load_settings",
]


def __getattr__(name: str):
    """Lazy loading for the GObject signal bus."""
    if name == "ColorSignals":
        from .core.signals import ColorSignals

        return ColorSignals

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
