# mailcolors/pattern/simple.py
"""
Boundary to the structured match-expression language used by index colours.

The expression language itself is provided by the host application through
an ExpressionCompiler. This module only owns the "simple search" expansion
that turns shorthand like ``joe`` or ``flag`` into a full expression before
it is compiled.
"""

from typing import Any, Protocol, runtime_checkable

DEFAULT_SIMPLE_SEARCH = "~f %s | ~s %s"

# Bare words that map straight onto a pattern operator
_SIMPLE_SHORTCUTS = {
    "all": "~A",
    "del": "~D",
    "flag": "~F",
    "new": "~N",
    "old": "~O",
    "repl": "~Q",
    "read": "~R",
    "tag": "~T",
    "unread": "~U",
}

_PATTERN_OPERATORS = ("~", "=", "%")


@runtime_checkable
class ExpressionCompiler(Protocol):
    """Compiles and evaluates structured match expressions."""

    def compile(self, expression: str) -> Any:
        """Return a compiled tree; raise on an invalid expression."""
        ...

    def evaluate(self, tree: Any, record: Any) -> bool:
        ...

    def free(self, tree: Any) -> None:
        ...


def has_pattern_operator(text: str) -> bool:
    """True if ``text`` contains an unescaped ``~``, ``=`` or ``%``."""
    escaped = False
    for ch in text:
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch in _PATTERN_OPERATORS:
            return True
    return False


def quote_simple(text: str) -> str:
    """Wrap ``text`` in double quotes, escaping backslashes and quotes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def check_simple(text: str, simple_search: str = DEFAULT_SIMPLE_SEARCH) -> str:
    """
    Expand a simple search into a full match expression.

    Text that already uses pattern operators is returned unchanged.
    Otherwise the known shortcuts are translated, and anything else is
    quoted and substituted for every ``%s`` in ``simple_search``.

    Examples:
        "joe"    -> '~f "joe" | ~s "joe"'
        "flag"   -> "~F"
        "~s foo" -> "~s foo"
    """
    if has_pattern_operator(text):
        return text

    if text in ("^", "."):
        return "~A"
    shortcut = _SIMPLE_SHORTCUTS.get(text.lower())
    if shortcut:
        return shortcut

    return (simple_search or DEFAULT_SIMPLE_SEARCH).replace("%s", quote_simple(text))
