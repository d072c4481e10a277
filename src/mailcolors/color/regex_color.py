# mailcolors/color/regex_color.py
"""
Regex colour rules and the per-class rule lists.

This module contains:
- LiteralMatcher / PatternMatcher: the two kinds of compiled matcher
- RegexColor: one rule (pattern text, matcher, attribute, stop flag)
- RegexColorList: the ordered rules of one colour class
- RegexColorRegistry: one RegexColorList per regex-backed colour class
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, NamedTuple, Optional, Tuple, Union

from ..utils.logger import get_logger
from .attr import AttrColor, CursesColorPool
from .ids import RULE_CLASSES, ColorId, class_name
from .regex_engine import search_span


@dataclass(slots=True)
class LiteralMatcher:
    """
    Compiled regex for rules that match raw text.

    Attributes:
        regex: Compiled pattern (``regex`` module).
        case_insensitive: Whether IGNORECASE was applied.
        submatch: Capture group whose span is coloured (0 = whole match).
    """

    regex: Any
    case_insensitive: bool
    submatch: int = 0


@dataclass(slots=True)
class PatternMatcher:
    """Compiled match expression for rules that match structured records."""

    tree: Any


MatchSpec = Union[LiteralMatcher, PatternMatcher]


@dataclass(slots=True)
class RegexColor:
    """
    A colour rule.

    The pattern text is the identity of the rule inside its list; recolouring
    the same pattern updates ``attr_color`` in place.

    Attributes:
        pattern: Pattern as written in the configuration.
        matcher: Exactly one compiled matcher, literal or structured.
        attr_color: Resolved colour pair and style flags.
        stop_matching: Renderers stop evaluating later rules after a match.
    """

    pattern: str
    matcher: Optional[MatchSpec]
    attr_color: AttrColor = field(default_factory=AttrColor)
    stop_matching: bool = False

    @property
    def is_structured(self) -> bool:
        return isinstance(self.matcher, PatternMatcher)

    @property
    def submatch(self) -> int:
        if isinstance(self.matcher, LiteralMatcher):
            return self.matcher.submatch
        return 0

    def pattern_equals(self, pattern: str, case_sensitive: bool) -> bool:
        if case_sensitive:
            return self.pattern == pattern
        # Per-character folding, as IGNORECASE does; "ß" and "SS" differ
        return self.pattern.lower() == pattern.lower()

    def clear(self, pool: CursesColorPool, compiler: Any = None) -> None:
        """Release the matcher and the attribute handle, keeping the object."""
        if isinstance(self.matcher, PatternMatcher) and compiler is not None:
            compiler.free(self.matcher.tree)
        self.matcher = None
        self.stop_matching = False
        pool.clear_attr_color(self.attr_color)


def destroy_rule(
    rule: Optional[RegexColor], pool: CursesColorPool, compiler: Any = None
) -> None:
    """Release everything a rule owns; ``None`` is ignored."""
    if rule is None:
        return
    rule.clear(pool, compiler)


class TextMatch(NamedTuple):
    """A literal rule that matched, with the span to colour."""

    rule: RegexColor
    start: int
    end: int


class RegexColorList:
    """
    Ordered rules of one colour class.

    Rules are kept in insertion order and never reordered; the first matching
    rule wins at render time. The list owns its rules: clearing it releases
    every matcher and attribute handle.
    """

    def __init__(self, class_id: ColorId):
        self.class_id = class_id
        self._rules: List[RegexColor] = []

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[RegexColor]:
        return iter(self._rules)

    def __getitem__(self, index: int) -> RegexColor:
        return self._rules[index]

    def __repr__(self) -> str:
        return f"RegexColorList({class_name(self.class_id)}, {len(self._rules)} rules)"

    def patterns(self) -> List[str]:
        return [rule.pattern for rule in self._rules]

    def find(self, pattern: str, case_sensitive: bool) -> Optional[RegexColor]:
        for rule in self._rules:
            if rule.pattern_equals(pattern, case_sensitive):
                return rule
        return None

    def append(self, rule: RegexColor) -> None:
        self._rules.append(rule)

    def clear(self, pool: CursesColorPool, compiler: Any = None) -> None:
        """Destroy every rule, leaving an empty, reusable list."""
        rules, self._rules = self._rules, []
        for rule in rules:
            destroy_rule(rule, pool, compiler)

    def match_text(self, text: str) -> Optional[TextMatch]:
        """First literal rule matching ``text``, using its submatch span."""
        for found in self.match_all(text):
            return found
        return None

    def match_all(self, text: str) -> Iterator[TextMatch]:
        """
        Every literal rule matching ``text``, in list order.

        Iteration ends after a matching rule flagged ``stop_matching``.
        """
        for rule in self._rules:
            matcher = rule.matcher
            if not isinstance(matcher, LiteralMatcher):
                continue
            span = search_span(matcher.regex, text, matcher.submatch)
            if span is None:
                continue
            yield TextMatch(rule, span[0], span[1])
            if rule.stop_matching:
                return

    def match_record(self, record: Any, compiler: Any) -> Optional[RegexColor]:
        """First structured rule whose expression holds for ``record``."""
        for rule in self._rules:
            matcher = rule.matcher
            if isinstance(matcher, PatternMatcher) and compiler.evaluate(
                matcher.tree, record
            ):
                return rule
        return None


class RegexColorRegistry:
    """
    One RegexColorList per regex-backed colour class.

    The set of classes is fixed by RULE_CLASSES. Lists are created once by
    init() and afterwards only emptied, so references handed out by
    get_list() stay valid across reloads.
    """

    def __init__(self):
        self.logger = get_logger("mailcolors.color.registry")
        self._lists: Dict[ColorId, RegexColorList] = {}

    @property
    def initialized(self) -> bool:
        return bool(self._lists)

    def init(self) -> None:
        if self._lists:
            self.logger.debug("Regex colour lists already initialised")
            return
        self.logger.debug("init AttachList, BodyList, etc")
        for class_id in RULE_CLASSES:
            self._lists[class_id] = RegexColorList(class_id)

    def get_list(self, class_id: Any) -> Optional[RegexColorList]:
        try:
            return self._lists.get(class_id)
        except TypeError:
            return None

    def clear_all(self, pool: CursesColorPool, compiler: Any = None) -> None:
        self.logger.debug("clean up regex")
        for rcl in self._lists.values():
            rcl.clear(pool, compiler)

    def __iter__(self) -> Iterator[Tuple[ColorId, RegexColorList]]:
        return iter(list(self._lists.items()))

    def rule_count(self) -> int:
        return sum(len(rcl) for rcl in self._lists.values())
