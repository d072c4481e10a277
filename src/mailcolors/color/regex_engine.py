# mailcolors/color/regex_engine.py
"""
Literal pattern compilation for colour rules.

Patterns are compiled with the ``regex`` module. The case policy lives here
so that every literal rule class compiles with the same rules.
"""

from typing import Optional, Tuple

import regex as re_engine

from ..utils.exceptions import RegexCompileError


def is_lower(text: str) -> bool:
    """True when no alphabetic character of ``text`` is uppercase."""
    return not any(ch.isalpha() and ch.isupper() for ch in text)


def regex_flags(pattern: str, case_sensitive: bool) -> int:
    """
    Flags for compiling a literal colour pattern.

    A case-insensitive caller always gets IGNORECASE. A case-sensitive caller
    still gets IGNORECASE when the pattern has no uppercase letter at all:
    ``color body red default "urgent"`` matches "Urgent" too, and only a
    pattern that spells out a capital is matched case-sensitively. Existing
    configurations rely on this behaviour.
    """
    if not case_sensitive or is_lower(pattern):
        return re_engine.IGNORECASE
    return 0


def compile_regex(pattern: str, case_insensitive: bool) -> "re_engine.Pattern":
    """
    Compile a literal pattern.

    Raises:
        RegexCompileError: With the engine's diagnostic text.
    """
    flags = re_engine.IGNORECASE if case_insensitive else 0
    try:
        return re_engine.compile(pattern, flags)
    except re_engine.error as e:
        raise RegexCompileError(pattern, str(e)) from e


def search_span(
    handle: "re_engine.Pattern", text: str, submatch: int = 0, pos: int = 0
) -> Optional[Tuple[int, int]]:
    """
    Span of capture group ``submatch`` in the first match of ``handle``.

    Returns None when nothing matches, when the group did not take part in
    the match, or when the pattern has no such group.
    """
    if submatch < 0 or submatch > handle.groups:
        return None
    match = handle.search(text, pos)
    if match is None:
        return None
    start, end = match.span(submatch)
    if start < 0:
        return None
    return start, end
