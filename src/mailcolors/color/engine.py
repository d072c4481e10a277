# mailcolors/color/engine.py
"""
Regex colour engine.

RegexColorEngine owns the rule lists of every regex-backed colour class and
implements the add-or-update operation behind ``color <object> <fg> <bg>
<pattern>`` commands. A pattern already present in a list is recoloured in
place; a new pattern is compiled and appended. Index classes match
structured records through an injected ExpressionCompiler, and every
successful change to one of them is announced so cached row colours can be
recomputed.

The engine does no locking: callers serialise configuration loads and
reloads themselves.
"""

from typing import Any, Callable, Optional

from ..pattern.simple import ExpressionCompiler, check_simple
from ..settings.config import ColorSettings
from ..utils.exceptions import (
    PatternCompileError,
    RegexCompileError,
    UnknownColorClassError,
)
from ..utils.logger import get_logger, log_color_event, log_error_with_context
from ..utils.translation_utils import _
from .attr import Attr, CursesColorPool
from .ids import (
    COLOR_LIST_CLASSES,
    RULE_CLASSES,
    STATUS_LIST_CLASSES,
    ColorId,
    class_name,
)
from .regex_color import (
    LiteralMatcher,
    MatchSpec,
    PatternMatcher,
    RegexColor,
    RegexColorList,
    RegexColorRegistry,
    TextMatch,
)
from .regex_engine import compile_regex, regex_flags

Notifier = Callable[[ColorId], None]


def _signal_bus_notifier(class_id: ColorId) -> None:
    """Announce a colour change on the application signal bus."""
    from ..core.signals import get_color_signals

    get_color_signals().notify_color_set(class_id)


def _handles(classes: frozenset, class_id: Any) -> bool:
    try:
        return class_id in classes
    except TypeError:
        return False


class RegexColorEngine:
    """
    Owns the regex colour lists and applies colour commands to them.

    Args:
        settings: Engine settings; defaults are used when omitted.
        pool: Colour pair pool shared with the renderer.
        compiler: Expression compiler for index classes.
        notifier: Called with the class id after a successful change to a
            structured class. Defaults to the ColorSignals bus.
    """

    def __init__(
        self,
        settings: Optional[ColorSettings] = None,
        pool: Optional[CursesColorPool] = None,
        compiler: Optional[ExpressionCompiler] = None,
        notifier: Optional[Notifier] = None,
    ):
        self.logger = get_logger("mailcolors.color.engine")
        self.settings = settings or ColorSettings()
        self.pool = pool if pool is not None else CursesColorPool()
        self.compiler = compiler
        self._uses_signal_bus = notifier is None
        self._notifier: Notifier = notifier or _signal_bus_notifier
        self.registry = RegexColorRegistry()
        self.init_registry()

    # =========================================================================
    # Registry lifecycle
    # =========================================================================

    def init_registry(self) -> None:
        self.registry.init()

    def clear_registry(self) -> None:
        """Empty every list, releasing all matchers and colour pairs."""
        self.registry.clear_all(self.pool, self.compiler)
        self.logger.info("Cleared all regex colour lists")
        if self._uses_signal_bus:
            from ..core.signals import get_color_signals

            get_color_signals().notify_colors_reset()

    def get_list(self, class_id: Any) -> Optional[RegexColorList]:
        """The rule list of a colour class, or None if it has none."""
        return self.registry.get_list(class_id)

    def clear_list(self, class_id: Any) -> None:
        rcl = self.registry.get_list(class_id)
        if rcl is None:
            raise UnknownColorClassError(class_id)
        count = len(rcl)
        rcl.clear(self.pool, self.compiler)
        self.logger.debug(f"Cleared {count} rules from {class_name(class_id)}")

    # =========================================================================
    # Add or update
    # =========================================================================

    def add_or_update_rule(
        self,
        class_id: Any,
        pattern: str,
        case_sensitive: bool,
        fg: int,
        bg: int,
        attrs: int,
        is_structured: bool,
        submatch: int = 0,
    ) -> RegexColor:
        """
        Associate a colour with a pattern.

        An existing rule with the same pattern (compared under
        ``case_sensitive``) is recoloured: its colour pair is re-resolved
        only if (fg, bg) changed, and its style flags are replaced. Its
        position, matcher and submatch stay as they were. Otherwise the
        pattern is compiled and a new rule is appended to the list.

        Args:
            class_id: Colour class owning the rule list.
            pattern: Pattern text as written by the user.
            case_sensitive: Compare and compile the pattern case-sensitively
                (subject to the all-lowercase relaxation).
            fg: Foreground colour index.
            bg: Background colour index.
            attrs: Style bitmask (Attr flags).
            is_structured: Compile as a match expression, not a regex.
            submatch: Capture group to colour; literal rules only.

        Returns:
            The new or updated rule.

        Raises:
            UnknownColorClassError: The class has no rule list.
            RegexCompileError: The literal pattern is invalid.
            PatternCompileError: The match expression is invalid.
        """
        rcl = self.registry.get_list(class_id)
        if rcl is None:
            raise UnknownColorClassError(class_id)

        name = class_name(class_id)
        rule = rcl.find(pattern, case_sensitive)

        if rule is not None:
            ac = rule.attr_color
            if not ac.matches_colors(fg, bg):
                self.pool.release(ac.curses_color)
                ac.curses_color = self.pool.resolve(fg, bg)
            ac.attrs = Attr(attrs)
            log_color_event("updated", name, pattern, f"fg={fg} bg={bg} attrs={ac.attrs!r}")
        else:
            try:
                matcher = self._compile_matcher(
                    pattern, case_sensitive, is_structured, submatch
                )
            except (RegexCompileError, PatternCompileError) as e:
                log_color_event("rejected", name, pattern, e.diagnostic)
                self.logger.warning(str(e))
                raise
            rule = RegexColor(
                pattern=pattern,
                matcher=matcher,
                attr_color=self.pool.new_attr_color(fg, bg, attrs),
            )
            rcl.append(rule)
            log_color_event("added", name, pattern, f"fg={fg} bg={bg} attrs={Attr(attrs)!r}")

        if is_structured:
            # Renderers cache index colours per row
            self._notify(class_id)

        return rule

    def _notify(self, class_id: Any) -> None:
        # The rule is already committed; a failing subscriber must not
        # turn that into a reported failure.
        try:
            self._notifier(class_id)
        except Exception as e:
            log_error_with_context(e, "colour invalidation", "mailcolors.color.engine")

    def _compile_matcher(
        self, pattern: str, case_sensitive: bool, is_structured: bool, submatch: int
    ) -> MatchSpec:
        if is_structured:
            return PatternMatcher(tree=self._compile_expression(pattern))

        flags = regex_flags(pattern, case_sensitive)
        case_insensitive = bool(flags)
        return LiteralMatcher(
            regex=compile_regex(pattern, case_insensitive),
            case_insensitive=case_insensitive,
            submatch=submatch,
        )

    def _compile_expression(self, pattern: str) -> Any:
        if self.compiler is None:
            raise PatternCompileError(pattern, _("No expression compiler configured"))

        expanded = check_simple(pattern, self.settings.simple_search)
        try:
            tree = self.compiler.compile(expanded)
        except PatternCompileError:
            raise
        except Exception as e:
            raise PatternCompileError(pattern, str(e)) from e

        if tree is None:
            raise PatternCompileError(pattern, _("Empty pattern"))
        return tree

    # =========================================================================
    # Colour command dispatchers
    # =========================================================================

    def parse_color_list(
        self, class_id: Any, pattern: str, fg: int, bg: int, attrs: int
    ) -> RegexColor:
        """
        Apply ``color <object> <fg> <bg> <pattern>`` for a regex-list class.

        Handles attachment headers, body, header and the index classes,
        using each class's case and matching policy.

        Raises:
            UnknownColorClassError: For any other class, before any change.
        """
        if not _handles(COLOR_LIST_CLASSES, class_id):
            raise UnknownColorClassError(class_id)

        policy = RULE_CLASSES[class_id]
        try:
            return self.add_or_update_rule(
                class_id,
                pattern,
                policy.case_sensitive,
                fg,
                bg,
                attrs,
                policy.structured,
                0,
            )
        finally:
            self._debug_dump()

    def parse_status_list(
        self,
        class_id: Any,
        pattern: str,
        fg: int,
        bg: int,
        attrs: int,
        submatch: int = 0,
    ) -> RegexColor:
        """
        Apply ``color status <fg> <bg> <pattern> [<submatch>]``.

        Raises:
            UnknownColorClassError: If ``class_id`` is not the status class.
        """
        if not _handles(STATUS_LIST_CLASSES, class_id):
            raise UnknownColorClassError(class_id)

        policy = RULE_CLASSES[class_id]
        try:
            return self.add_or_update_rule(
                class_id,
                pattern,
                policy.case_sensitive,
                fg,
                bg,
                attrs,
                policy.structured,
                submatch,
            )
        finally:
            self._debug_dump()

    # =========================================================================
    # Render-time queries
    # =========================================================================

    def _require_list(self, class_id: Any) -> RegexColorList:
        rcl = self.registry.get_list(class_id)
        if rcl is None:
            raise UnknownColorClassError(class_id)
        return rcl

    def match_text(self, class_id: Any, text: str) -> Optional[TextMatch]:
        """First rule of a literal class matching ``text``."""
        return self._require_list(class_id).match_text(text)

    def match_record(self, class_id: Any, record: Any) -> Optional[RegexColor]:
        """First rule of a structured class matching ``record``."""
        rcl = self._require_list(class_id)
        if self.compiler is None:
            return None
        return rcl.match_record(record, self.compiler)

    # =========================================================================
    # Debugging
    # =========================================================================

    def _debug_dump(self) -> None:
        if self.settings.color_debug:
            self.dump_all()

    def dump(self, class_id: Any) -> None:
        """Log the rules of one class at debug level."""
        rcl = self._require_list(class_id)
        self.logger.debug(f"{class_name(class_id)}: {len(rcl)} rules")
        for index, rule in enumerate(rcl):
            ac = rule.attr_color
            kind = "pattern" if rule.is_structured else f"regex/{rule.submatch}"
            stop = " stop" if rule.stop_matching else ""
            self.logger.debug(
                f"  [{index}] {kind} '{rule.pattern}' "
                f"fg={ac.fg} bg={ac.bg} attrs={ac.attrs!r}{stop}"
            )

    def dump_all(self) -> None:
        """Log every non-empty rule list at debug level."""
        for class_id, rcl in self.registry:
            if len(rcl):
                self.dump(class_id)
