import pytest

pytest.importorskip("gi")

from mailcolors.color.attr import COLOR_DEFAULT  # noqa: E402
from mailcolors.color.engine import RegexColorEngine  # noqa: E402
from mailcolors.color.ids import ColorId  # noqa: E402
from mailcolors.core.signals import ColorSignals, get_color_signals  # noqa: E402
from mailcolors.utils.exceptions import PatternCompileError  # noqa: E402


@pytest.fixture
def bus():
    ColorSignals.reset()
    yield get_color_signals()
    ColorSignals.reset()


def test_singleton(bus):
    assert ColorSignals.get() is bus


def test_color_set_carries_class_id(bus):
    received = []
    bus.connect("color-set", lambda _bus, class_id: received.append(class_id))

    bus.notify_color_set(ColorId.INDEX_SUBJECT)

    assert received == [int(ColorId.INDEX_SUBJECT)]


def test_engine_uses_bus_by_default(bus, compiler):
    received = []
    resets = []
    bus.connect("color-set", lambda _bus, class_id: received.append(class_id))
    bus.connect("colors-reset", lambda _bus: resets.append(True))
    engine = RegexColorEngine(compiler=compiler)

    engine.parse_color_list(ColorId.INDEX, "~N", 1, COLOR_DEFAULT, 0)
    engine.parse_color_list(ColorId.BODY, "foo", 1, COLOR_DEFAULT, 0)
    engine.parse_color_list(ColorId.INDEX, "~N", 2, COLOR_DEFAULT, 0)

    assert received == [int(ColorId.INDEX), int(ColorId.INDEX)]

    engine.clear_registry()
    assert resets == [True]


def test_failed_compile_emits_nothing(bus, compiler):
    received = []
    bus.connect("color-set", lambda _bus, class_id: received.append(class_id))
    engine = RegexColorEngine(compiler=compiler)

    with pytest.raises(PatternCompileError):
        engine.parse_color_list(ColorId.INDEX, "BAD", 1, COLOR_DEFAULT, 0)

    assert received == []
