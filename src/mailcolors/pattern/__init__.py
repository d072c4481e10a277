# mailcolors/pattern/__init__.py
"""Structured match-expression boundary for index colour rules."""

from .simple import (
    DEFAULT_SIMPLE_SEARCH,
    ExpressionCompiler,
    check_simple,
    has_pattern_operator,
    quote_simple,
)

__all__ = [
    "DEFAULT_SIMPLE_SEARCH",
    "ExpressionCompiler",
    "check_simple",
    "has_pattern_operator",
    "quote_simple",
]
