import pytest

from multibar.bar import Decorator, EwmaDecorator, Wrapper
from multibar.bar_option import (
    append_decorators,
    bar_extender,
    bar_filler_clear_on_abort,
    bar_filler_clear_on_complete,
    bar_filler_middleware,
    bar_filler_on_abort,
    bar_filler_on_complete,
    bar_filler_trim,
    bar_func_opt_on,
    bar_func_optional,
    bar_id,
    bar_no_pop,
    bar_opt_on,
    bar_optional,
    bar_priority,
    bar_queue_after,
    bar_remove_on_complete,
    bar_width,
    build_bar,
    prepend_decorators,
)
from multibar.bar_style import BarStyle
from multibar.filler import FuncFiller, nop_style


class Name(Decorator):
    def __init__(self, text):
        self.text = text

    def decor(self, stat):
        return self.text, len(self.text)


class Ewma(Decorator, EwmaDecorator):
    def __init__(self):
        self.updates = []

    def decor(self, stat):
        return "", 0

    def ewma_update(self, n, iter_dur):
        self.updates.append((n, iter_dur))


class Wrap(Decorator, Wrapper):
    def __init__(self, inner):
        self.inner = inner

    def decor(self, stat):
        return self.inner.decor(stat)

    def unwrap(self):
        return self.inner


def test_build_bar_matches_source_draw():
    state = build_bar(60, BarStyle(), bar_filler_trim())
    state.current = 20
    want = "[=========================>----------------------------------------------------]"
    assert state.draw(state.new_statistics(80)) == want + "\n"


def test_build_bar_with_bar_width():
    state = build_bar(60, BarStyle(), bar_width(60), bar_filler_trim())
    state.current = 20
    want = "[==================>---------------------------------------]"
    assert state.draw(state.new_statistics(80)) == want + "\n"


def test_build_bar_skips_none_options():
    state = build_bar(10, nop_style(), None, bar_id(3), None)
    assert state.id == 3
    assert state.total == 10


def test_decorators_placed_and_none_skipped():
    left = Name("L")
    right = Name("R")
    state = build_bar(
        10,
        nop_style(),
        prepend_decorators(None, left),
        append_decorators(right, None),
        bar_filler_trim(),
    )
    assert state.decor_groups == [[left], [right]]
    assert state.draw(state.new_statistics(20)) == "LR\n"


def test_simple_flags():
    marker = object()
    state = build_bar(
        5,
        nop_style(),
        bar_remove_on_complete(),
        bar_no_pop(),
        bar_priority(7),
        bar_queue_after(marker),
        bar_width(12),
    )
    assert state.rm_on_complete
    assert state.no_pop
    assert state.priority == 7
    assert state.wait_bar is marker
    assert state.requested_width == 12


def test_ewma_decorators_collected_through_wrappers():
    ewma = Ewma()
    state = build_bar(5, nop_style(), append_decorators(Wrap(ewma), Name("x")))
    assert state.ewma_decorators == [ewma]


def test_filler_on_complete_replaces_filler():
    state = build_bar(10, BarStyle(), bar_filler_on_complete("finished"), bar_filler_trim())
    state.current = 5
    assert state.draw(state.new_statistics(20)).startswith("[")
    state.current = 10
    assert state.draw(state.new_statistics(20)) == "finished\n"


def test_filler_clear_on_complete():
    state = build_bar(10, BarStyle(), bar_filler_clear_on_complete(), bar_filler_trim())
    state.current = 10
    assert state.draw(state.new_statistics(20)) == "\n"


def test_filler_on_abort_replaces_filler():
    state = build_bar(10, BarStyle(), bar_filler_on_abort("stopped"), bar_filler_trim())
    state.aborted = True
    assert state.draw(state.new_statistics(20)) == "stopped\n"


def test_filler_clear_on_abort():
    state = build_bar(10, BarStyle(), bar_filler_clear_on_abort(), bar_filler_trim())
    state.aborted = True
    assert state.draw(state.new_statistics(20)) == "\n"


def test_filler_middleware_none_and_wrapping():
    assert bar_filler_middleware(None) is None
    state = build_bar(
        10,
        nop_style(),
        bar_filler_middleware(lambda base: FuncFiller(lambda out, st: out.write("mid"))),
        bar_filler_trim(),
    )
    assert state.draw(state.new_statistics(20)) == "mid\n"


def _lines_filler():
    return FuncFiller(lambda out, st: out.write("a\nb\npartial"))


def test_extender_appends_complete_lines():
    state = build_bar(10, nop_style(), bar_extender(_lines_filler(), False))
    rows = state.extender(state.new_statistics(20), ["main\n"])
    assert rows == ["main\n", "a\n", "b\n"]


def test_extender_reverse():
    state = build_bar(10, nop_style(), bar_extender(_lines_filler(), True))
    rows = state.extender(state.new_statistics(20), ["main\n"])
    assert rows == ["b\n", "a\n", "main\n"]


def test_extender_none_and_error():
    assert bar_extender(None, False) is None

    def boom(out, st):
        raise ValueError("fill failed")

    state = build_bar(10, nop_style(), bar_extender(FuncFiller(boom), False))
    with pytest.raises(ValueError):
        state.extender(state.new_statistics(20), ["main\n"])


def test_optional_helpers():
    opt = bar_no_pop()
    assert bar_optional(opt, True) is opt
    assert bar_optional(opt, False) is None
    assert bar_opt_on(opt, lambda: True) is opt
    assert bar_opt_on(opt, lambda: False) is None


def test_func_optional_helpers_call_only_when_enabled():
    calls = []
    opt = bar_no_pop()

    def make():
        calls.append(1)
        return opt

    assert bar_func_optional(make, False) is None
    assert bar_func_opt_on(make, lambda: False) is None
    assert calls == []
    assert bar_func_optional(make, True) is opt
    assert bar_func_opt_on(make, lambda: True) is opt
    assert len(calls) == 2