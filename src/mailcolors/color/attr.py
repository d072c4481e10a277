# mailcolors/color/attr.py
"""
Colour resources: style flags, pooled colour pairs and attribute handles.

A CursesColor is one (fg, bg) pair shared by every rule that asks for it;
the pool reference-counts pairs so that recolouring or clearing a rule list
releases exactly what it resolved. An AttrColor couples a pooled pair with
a style bitmask and is the handle stored on each rule.
"""

from dataclasses import dataclass
from enum import IntFlag
from typing import Dict, Iterator, Optional, Tuple

from ..utils.logger import get_logger

# Terminal default colour (no explicit fg/bg)
COLOR_DEFAULT = -1

# Mapping of logical color names to ANSI color indices (0-15)
# Standard ANSI: 0-7, Bright: 8-15
ANSI_COLOR_MAP: Dict[str, int] = {
    "black": 0,
    "red": 1,
    "green": 2,
    "yellow": 3,
    "blue": 4,
    "magenta": 5,
    "cyan": 6,
    "white": 7,
    "brightblack": 8,
    "brightred": 9,
    "brightgreen": 10,
    "brightyellow": 11,
    "brightblue": 12,
    "brightmagenta": 13,
    "brightcyan": 14,
    "brightwhite": 15,
}


class Attr(IntFlag):
    """Style bitmask applied on top of a colour pair."""

    NONE = 0
    BOLD = 1 << 0
    UNDERLINE = 1 << 1
    REVERSE = 1 << 2
    STANDOUT = 1 << 3
    ITALIC = 1 << 4
    BLINK = 1 << 5
    DIM = 1 << 6


# ANSI SGR modifier codes, in emission order
ANSI_MODIFIERS: Tuple[Tuple[Attr, str], ...] = (
    (Attr.BOLD, "1"),
    (Attr.DIM, "2"),
    (Attr.ITALIC, "3"),
    (Attr.UNDERLINE, "4"),
    (Attr.BLINK, "5"),
    (Attr.REVERSE, "7"),
    (Attr.STANDOUT, "7"),
)


def color_from_name(name: str) -> int:
    """
    Resolve a colour name to its palette index.

    Accepts the 16 ANSI names (with an optional ``bright_`` spelling),
    ``default``, and ``colorNNN`` for the 256-colour palette.

    Raises:
        ValueError: If the name is not recognised.
    """
    key = name.strip().lower().replace("_", "")
    if key == "default":
        return COLOR_DEFAULT
    if key in ANSI_COLOR_MAP:
        return ANSI_COLOR_MAP[key]
    if key.startswith("color") and key[5:].isdigit():
        index = int(key[5:])
        if 0 <= index < 256:
            return index
    raise ValueError(f"Unknown colour name: {name}")


def _sgr_color(index: int, base: int, bright_base: int) -> Optional[str]:
    """SGR parameter for a palette index, or None for the default colour."""
    if index == COLOR_DEFAULT:
        return None
    if index < 8:
        return str(base + index)
    if index < 16:
        return str(bright_base + (index - 8))
    return f"{base + 8};5;{index}"


@dataclass(slots=True)
class CursesColor:
    """A pooled (foreground, background) colour pair."""

    fg: int
    bg: int
    ref_count: int = 0


@dataclass(slots=True)
class AttrColor:
    """
    Resolved display attribute: a pooled colour pair plus style flags.

    Attributes:
        curses_color: The pooled pair, or None once released.
        attrs: Style bitmask, always replaced (never merged) on update.
    """

    curses_color: Optional[CursesColor] = None
    attrs: Attr = Attr.NONE

    @property
    def fg(self) -> int:
        return self.curses_color.fg if self.curses_color else COLOR_DEFAULT

    @property
    def bg(self) -> int:
        return self.curses_color.bg if self.curses_color else COLOR_DEFAULT

    def matches_colors(self, fg: int, bg: int) -> bool:
        """True when this handle already resolves to (fg, bg)."""
        return self.curses_color is not None and (
            self.curses_color.fg == fg and self.curses_color.bg == bg
        )

    def to_ansi(self) -> str:
        """
        Render this attribute as an ANSI escape sequence.

        Modifiers come first, then the foreground (30-37, 90-97 or 38;5;N),
        then the background (40-47, 100-107 or 48;5;N).

        Returns:
            A sequence like "\\033[1;31;42m", or "" when nothing is set.
        """
        parts = []
        for flag, code in ANSI_MODIFIERS:
            if self.attrs & flag and code not in parts:
                parts.append(code)

        fg_code = _sgr_color(self.fg, 30, 90)
        if fg_code:
            parts.append(fg_code)
        bg_code = _sgr_color(self.bg, 40, 100)
        if bg_code:
            parts.append(bg_code)

        if parts:
            return f"\033[{';'.join(parts)}m"
        return ""


class CursesColorPool:
    """
    Reference-counted store of colour pairs.

    resolve() hands out the shared pair for (fg, bg), creating it on first
    use; release() gives one reference back and forgets the pair once no
    rule holds it.
    """

    def __init__(self):
        self.logger = get_logger("mailcolors.color.attr")
        self._colors: Dict[Tuple[int, int], CursesColor] = {}

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[CursesColor]:
        return iter(list(self._colors.values()))

    def lookup(self, fg: int, bg: int) -> Optional[CursesColor]:
        return self._colors.get((fg, bg))

    def resolve(self, fg: int, bg: int) -> CursesColor:
        cc = self._colors.get((fg, bg))
        if cc is None:
            cc = CursesColor(fg=fg, bg=bg)
            self._colors[(fg, bg)] = cc
            self.logger.debug(f"New colour pair fg={fg} bg={bg}")
        cc.ref_count += 1
        return cc

    def release(self, cc: Optional[CursesColor]) -> None:
        if cc is None:
            return
        cc.ref_count -= 1
        if cc.ref_count <= 0 and self._colors.get((cc.fg, cc.bg)) is cc:
            del self._colors[(cc.fg, cc.bg)]
            self.logger.debug(f"Freed colour pair fg={cc.fg} bg={cc.bg}")

    def new_attr_color(self, fg: int, bg: int, attrs: int) -> AttrColor:
        """Resolve (fg, bg) and wrap it with the style bitmask."""
        return AttrColor(curses_color=self.resolve(fg, bg), attrs=Attr(attrs))

    def clear_attr_color(self, ac: Optional[AttrColor]) -> None:
        """Release the pair held by an attribute handle and reset it."""
        if ac is None:
            return
        self.release(ac.curses_color)
        ac.curses_color = None
        ac.attrs = Attr.NONE
