"""Options altering how a single bar is built and drawn."""

from __future__ import annotations

import io
from typing import Callable, List, Optional

from multibar.bar import (
    BarState,
    Decorator,
    EwmaDecorator,
    Extender,
    make_bar_state,
    unwrap,
)
from multibar.bar_style import BarStyle
from multibar.filler import BarFiller, BarFillerBuilder, FuncFiller
from multibar.statistics import Statistics

BarOption = Callable[[BarState], None]


def _non_empty(decorators) -> List[Decorator]:
    return [d for d in decorators if d is not None]


def prepend_decorators(*args: Optional[Decorator]) -> BarOption:
    """Place decorators on the bar's left side; ``None`` entries are skipped."""
    group = _non_empty(args)

    def option(s: BarState) -> None:
        s.decor_groups[0] = list(group)

    return option


def append_decorators(*args: Optional[Decorator]) -> BarOption:
    """Place decorators on the bar's right side; ``None`` entries are skipped."""
    group = _non_empty(args)

    def option(s: BarState) -> None:
        s.decor_groups[1] = list(group)

    return option


def bar_id(bar_id: int) -> BarOption:
    """Set the bar id."""

    def option(s: BarState) -> None:
        s.id = bar_id

    return option


def bar_width(width: int) -> BarOption:
    """Set the bar width independently of the container."""

    def option(s: BarState) -> None:
        s.requested_width = width

    return option


def bar_queue_after(bar) -> BarOption:
    """Queue the bar being built after ``bar``; it takes its place when done."""

    def option(s: BarState) -> None:
        s.wait_bar = bar

    return option


def bar_remove_on_complete() -> BarOption:
    """Remove the filler and decorators on completion."""

    def option(s: BarState) -> None:
        s.rm_on_complete = True

    return option


def bar_filler_middleware(
    middle: Optional[Callable[[BarFiller], BarFiller]],
) -> Optional[BarOption]:
    """Wrap the bar's filler with ``middle``; ``None`` yields no option."""
    if middle is None:
        return None

    def option(s: BarState) -> None:
        s.filler = middle(s.filler)

    return option


def _replace_when(flag: str, message: str) -> BarOption:
    def middle(base: BarFiller) -> BarFiller:
        def fill(out, stat: Statistics) -> None:
            if getattr(stat, flag):
                out.write(message)
            else:
                base.fill(out, stat)

        return FuncFiller(fill)

    return bar_filler_middleware(middle)


def bar_filler_on_complete(message: str) -> BarOption:
    """Replace the filler with ``message`` once the bar completes."""
    return _replace_when("completed", message)


def bar_filler_clear_on_complete() -> BarOption:
    """Clear the filler once the bar completes."""
    return bar_filler_on_complete("")


def bar_filler_on_abort(message: str) -> BarOption:
    """Replace the filler with ``message`` once the bar is aborted."""
    return _replace_when("aborted", message)


def bar_filler_clear_on_abort() -> BarOption:
    """Clear the filler once the bar is aborted."""
    return bar_filler_on_abort("")


def bar_priority(priority: int) -> BarOption:
    """Set the bar priority; zero is highest, i.e. on top."""

    def option(s: BarState) -> None:
        s.priority = priority

    return option


def _make_extender(filler: BarFiller, rev: bool) -> Extender:
    def extend(stat: Statistics, rows: List[str]) -> List[str]:
        buf = io.StringIO()
        filler.fill(buf, stat)
        result = list(rows)
        # only complete lines are kept; a trailing partial line is dropped
        result.extend(part + "\n" for part in buf.getvalue().split("\n")[:-1])
        if rev:
            result.reverse()
        return result

    return extend


def bar_extender(filler: Optional[BarFiller], rev: bool) -> Optional[BarOption]:
    """Extend the bar with lines written by ``filler``, above it if ``rev``."""
    if filler is None:
        return None
    extender = _make_extender(filler, rev)

    def option(s: BarState) -> None:
        s.extender = extender

    return option


def bar_filler_trim() -> BarOption:
    """Drop the spaces around the filler."""

    def option(s: BarState) -> None:
        s.trim_space = True

    return option


def bar_no_pop() -> BarOption:
    """Keep the bar from popping out of a container in pop-completed mode."""

    def option(s: BarState) -> None:
        s.no_pop = True

    return option


def bar_optional(option: Optional[BarOption], cond: bool) -> Optional[BarOption]:
    """Return ``option`` only when ``cond`` is true."""
    return option if cond else None


def bar_opt_on(
    option: Optional[BarOption], predicate: Callable[[], bool]
) -> Optional[BarOption]:
    """Return ``option`` only when ``predicate()`` is true."""
    return option if predicate() else None


def bar_func_optional(
    option: Callable[[], Optional[BarOption]], cond: bool
) -> Optional[BarOption]:
    """Call ``option`` and return its result only when ``cond`` is true."""
    return option() if cond else None


def bar_func_opt_on(
    option: Callable[[], Optional[BarOption]], predicate: Callable[[], bool]
) -> Optional[BarOption]:
    """Call ``option`` and return its result only when ``predicate()`` is true."""
    return option() if predicate() else None


def build_bar(
    total: int, builder: Optional[BarFillerBuilder], *args: Optional[BarOption]
) -> BarState:
    """Build a bar state from ``builder`` (default style if None) and options."""
    filler = (builder if builder is not None else BarStyle()).build()
    state = make_bar_state(total, filler)
    for option in args:
        if option is not None:
            option(state)
    state.ewma_decorators = [
        d
        for group in state.decor_groups
        for d in map(unwrap, group)
        if isinstance(d, EwmaDecorator)
    ]
    return state