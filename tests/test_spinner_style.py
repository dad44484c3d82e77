import io

from multibar.spinner_style import DEFAULT_FRAMES, SpinnerStyle
from multibar.statistics import Statistics, string_width


def fill(filler, width):
    buf = io.StringIO()
    filler.fill(buf, Statistics(available_width=width))
    return buf.getvalue()


def test_default_frames_cycle_and_width():
    filler = SpinnerStyle().build()
    outs = [fill(filler, 9) for _ in range(len(DEFAULT_FRAMES) + 1)]
    assert [o.strip() for o in outs] == list(DEFAULT_FRAMES) + [DEFAULT_FRAMES[0]]
    assert all(string_width(o) == 9 for o in outs)
    assert DEFAULT_FRAMES[0] == "⠋"


def test_custom_frames():
    filler = SpinnerStyle("a", "b").build()
    assert [fill(filler, 1) for _ in range(3)] == ["a", "b", "a"]


def test_center_left_heavy_padding():
    out = fill(SpinnerStyle("x").build(), 4)
    assert out.strip() == "x"
    assert len(out) - len(out.rstrip()) >= len(out) - len(out.lstrip())


def test_positions():
    assert fill(SpinnerStyle("x").position_left().build(), 5).startswith("x")
    assert fill(SpinnerStyle("x").position_right().build(), 5).endswith("x")


def test_meta_applied():
    out = fill(SpinnerStyle("x").meta(lambda s: "<" + s + ">").position_left().build(), 3)
    assert out.startswith("<x>")


def test_too_narrow_writes_nothing_but_advances():
    filler = SpinnerStyle("ab", "c").build()
    assert fill(filler, 1) == ""
    assert fill(filler, 1) == "c"


def test_style_immutable():
    base = SpinnerStyle("x")
    base.position_left()
    out = fill(base.build(), 3)
    assert not out.startswith("x")