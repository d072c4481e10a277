# mailcolors/color/__init__.py
"""
Colour rules for a mail reader's text surface.

This package provides:
- RegexColorEngine: add-or-update of colour rules per colour class
- RegexColorList / RegexColor: the ordered rules and their matchers
- CursesColorPool / AttrColor: pooled colour pairs plus style flags

Usage:
    from mailcolors.color import Attr, ColorId, RegexColorEngine

    engine = RegexColorEngine()
    engine.parse_color_list(ColorId.BODY, r"https?://\\S+", 4, -1, Attr.UNDERLINE)
    found = engine.match_text(ColorId.BODY, "see https://example.org")
"""

from .attr import (
    ANSI_COLOR_MAP,
    COLOR_DEFAULT,
    Attr,
    AttrColor,
    CursesColor,
    CursesColorPool,
    color_from_name,
)
from .engine import RegexColorEngine
from .ids import RULE_CLASSES, ColorId, RuleClassPolicy
from .regex_color import (
    LiteralMatcher,
    PatternMatcher,
    RegexColor,
    RegexColorList,
    RegexColorRegistry,
    TextMatch,
    destroy_rule,
)

__all__ = [
    "ANSI_COLOR_MAP",
    "COLOR_DEFAULT",
    "Attr",
    "AttrColor",
    "ColorId",
    "CursesColor",
    "CursesColorPool",
    "LiteralMatcher",
    "PatternMatcher",
    "RULE_CLASSES",
    "RegexColor",
    "RegexColorEngine",
    "RegexColorList",
    "RegexColorRegistry",
    "RuleClassPolicy",
    "TextMatch",
    "color_from_name",
    "destroy_rule",
]
