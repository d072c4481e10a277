import pytest
import regex

from mailcolors.color.regex_engine import compile_regex, is_lower, regex_flags, search_span
from mailcolors.utils.exceptions import RegexCompileError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("foo", True),
        ("foo bar 123", True),
        ("", True),
        ("^\\[[0-9]+\\]", True),
        ("Foo", False),
        ("fooBar", False),
        ("\\S+", False),
        ("élan", True),
        ("Élan", False),
    ],
)
def test_is_lower(text, expected):
    assert is_lower(text) is expected


def test_lowercase_pattern_relaxes_case_sensitive_caller():
    assert regex_flags("foo", case_sensitive=True) == regex.IGNORECASE


def test_mixed_case_pattern_stays_case_sensitive():
    assert regex_flags("Foo", case_sensitive=True) == 0


def test_case_insensitive_caller_always_ignores_case():
    assert regex_flags("Foo", case_sensitive=False) == regex.IGNORECASE
    assert regex_flags("foo", case_sensitive=False) == regex.IGNORECASE


def test_compile_regex_applies_case_flag():
    assert compile_regex("foo", case_insensitive=True).search("FOO")
    assert compile_regex("Foo", case_insensitive=False).search("FOO") is None


def test_compile_regex_reports_engine_diagnostic():
    with pytest.raises(RegexCompileError) as excinfo:
        compile_regex("foo(", case_insensitive=False)

    err = excinfo.value
    assert err.pattern == "foo("
    assert err.diagnostic
    assert "foo(" in str(err)


def test_search_span_whole_match_and_group():
    handle = compile_regex(r"Mode: (\w+)", case_insensitive=False)

    assert search_span(handle, "-- Mode: edit --") == (3, 13)
    assert search_span(handle, "-- Mode: edit --", submatch=1) == (9, 13)


def test_search_span_missing_group_is_no_match():
    handle = compile_regex(r"a(b)?(c)", case_insensitive=False)

    assert search_span(handle, "ac", submatch=1) is None
    assert search_span(handle, "ac", submatch=2) == (1, 2)
    assert search_span(handle, "ac", submatch=3) is None
    assert search_span(handle, "xyz") is None
