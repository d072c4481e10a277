import pytest

from mailcolors.color.attr import (
    COLOR_DEFAULT,
    Attr,
    AttrColor,
    CursesColorPool,
    color_from_name,
)


def test_pool_shares_pairs_and_counts_references():
    pool = CursesColorPool()

    first = pool.resolve(1, 2)
    second = pool.resolve(1, 2)

    assert first is second
    assert first.ref_count == 2
    assert len(pool) == 1

    pool.release(first)
    assert pool.lookup(1, 2) is first

    pool.release(second)
    assert pool.lookup(1, 2) is None
    assert len(pool) == 0


def test_pool_release_none_is_noop():
    pool = CursesColorPool()
    pool.release(None)
    pool.clear_attr_color(None)
    assert len(pool) == 0


def test_clear_attr_color_releases_pair():
    pool = CursesColorPool()
    ac = pool.new_attr_color(3, COLOR_DEFAULT, Attr.BOLD)

    pool.clear_attr_color(ac)

    assert ac.curses_color is None
    assert ac.attrs == Attr.NONE
    assert len(pool) == 0


def test_matches_colors():
    pool = CursesColorPool()
    ac = pool.new_attr_color(1, 4, Attr.NONE)

    assert ac.matches_colors(1, 4)
    assert not ac.matches_colors(1, 5)
    assert not AttrColor().matches_colors(COLOR_DEFAULT, COLOR_DEFAULT)


def test_to_ansi():
    pool = CursesColorPool()

    assert pool.new_attr_color(1, 2, Attr.BOLD).to_ansi() == "\033[1;31;42m"
    assert pool.new_attr_color(9, COLOR_DEFAULT, Attr.NONE).to_ansi() == "\033[91m"
    assert pool.new_attr_color(COLOR_DEFAULT, 12, Attr.UNDERLINE).to_ansi() == "\033[4;104m"
    assert pool.new_attr_color(208, COLOR_DEFAULT, Attr.NONE).to_ansi() == "\033[38;5;208m"
    assert AttrColor().to_ansi() == ""


def test_reverse_and_standout_share_one_code():
    pool = CursesColorPool()
    ac = pool.new_attr_color(COLOR_DEFAULT, COLOR_DEFAULT, Attr.REVERSE | Attr.STANDOUT)
    assert ac.to_ansi() == "\033[7m"


@pytest.mark.parametrize(
    "name, index",
    [
        ("red", 1),
        ("BrightBlue", 12),
        ("bright_blue", 12),
        ("default", COLOR_DEFAULT),
        ("color208", 208),
    ],
)
def test_color_from_name(name, index):
    assert color_from_name(name) == index


@pytest.mark.parametrize("name", ["mauve", "color256", "color"])
def test_color_from_name_rejects_unknown(name):
    with pytest.raises(ValueError):
        color_from_name(name)
