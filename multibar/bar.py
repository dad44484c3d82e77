"""Progress bar state, drawing and the thread-safe bar handle."""

from __future__ import annotations

import dataclasses
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from multibar.filler import BarFiller
from multibar.statistics import Statistics, strip_ansi, truncate

Extender = Callable[[Statistics, List[str]], List[str]]


class Decorator(ABC):
    """Produces a piece of text placed left or right of the bar body."""

    @abstractmethod
    def decor(self, stat: Statistics) -> tuple[str, int]:
        """Return the text and its width in terminal cells."""

    def sync(self) -> Optional[Any]:
        """Return a width-synchronisation handle, or None if not synced."""
        return None


class Wrapper(ABC):
    """A decorator that wraps another one."""

    @abstractmethod
    def unwrap(self) -> Decorator:
        """Return the wrapped decorator."""


class EwmaDecorator(ABC):
    """A decorator fed with per-iteration durations."""

    @abstractmethod
    def ewma_update(self, n: int, iter_dur: Any) -> None:
        """Account ``n`` units done in ``iter_dur``."""


class AverageDecorator(ABC):
    """A decorator whose start time can be adjusted."""

    @abstractmethod
    def average_adjust(self, start: Any) -> None:
        """Reset the start time to ``start``."""


class ShutdownListener(ABC):
    """A decorator notified when its bar stops running."""

    @abstractmethod
    def on_shutdown(self) -> None:
        """Called once on bar shutdown."""


def unwrap(decorator: Any) -> Any:
    """Strip every :class:`Wrapper` layer from ``decorator``."""
    while isinstance(decorator, Wrapper):
        decorator = decorator.unwrap()
    return decorator


def _identity_extender(stat: Statistics, rows: List[str]) -> List[str]:
    return rows


@dataclass
class RenderFrame:
    """Result of one render cycle of a bar."""

    rows: List[str] = field(default_factory=list)
    shutdown: int = 0
    rm_on_complete: bool = False
    no_pop: bool = False
    error: Optional[BaseException] = None


@dataclass
class BarState:
    """Mutable state of a single bar."""

    filler: BarFiller
    id: int = 0
    priority: int = 0
    requested_width: int = 0
    shutdown: int = 0
    total: int = 0
    current: int = 0
    refill: int = 0
    trim_space: bool = False
    aborted: bool = False
    trigger_complete: bool = False
    rm_on_complete: bool = False
    no_pop: bool = False
    auto_refresh: bool = False
    decor_groups: List[List[Decorator]] = field(default_factory=lambda: [[], []])
    ewma_decorators: List[EwmaDecorator] = field(default_factory=list)
    extender: Extender = _identity_extender
    wait_bar: Optional["Bar"] = None

    def completed(self) -> bool:
        return self.trigger_complete and self.current == self.total

    def new_statistics(self, width: int) -> Statistics:
        return Statistics(
            id=self.id,
            available_width=width,
            requested_width=self.requested_width,
            total=self.total,
            current=self.current,
            refill=self.refill,
            completed=self.completed(),
            aborted=self.aborted,
        )

    def draw(self, stat: Statistics) -> str:
        """Render one line: decorators, bar body and a trailing newline."""
        stat = dataclasses.replace(stat)
        sides = []
        for group in self.decor_groups:
            parts = []
            for d in group:
                # decor is called in any case because of width synchronisation
                text, width = d.decor(stat)
                remaining = stat.available_width - width
                if remaining >= 0:
                    parts.append(text)
                    stat.available_width = remaining
                elif stat.available_width > 0:
                    parts.append(truncate(strip_ansi(text), stat.available_width, "…"))
                    stat.available_width = 0
            sides.append("".join(parts))

        space = ""
        if not self.trim_space and stat.available_width >= 2:
            stat.available_width -= 2
            space = " "

        body: List[str] = []

        class _Sink:
            def write(self, data: str) -> int:
                body.append(data)
                return len(data)

        self.filler.fill(_Sink(), stat)
        return sides[0] + space + "".join(body) + space + sides[1] + "\n"

    def sync_table(self) -> tuple[list, list]:
        """Sync handles of the left and right decorator groups."""
        left, right = (
            [h for h in (d.sync() for d in group) if h is not None]
            for group in self.decor_groups
        )
        return left, right


def make_bar_state(total: int, filler: BarFiller, requested_width: int = 0) -> BarState:
    """Fresh state; completion triggers automatically only when ``total > 0``."""
    return BarState(
        filler=filler,
        total=total,
        requested_width=requested_width,
        trigger_complete=total > 0,
    )


class Bar:
    """Thread-safe handle over a :class:`BarState`."""

    def __init__(self, state: BarState) -> None:
        self._state = state
        self.priority = state.priority
        self._lock = threading.RLock()
        self._done = threading.Event()

    def _operate(self, op: Callable[[BarState], None]) -> None:
        with self._lock:
            if self._done.is_set():
                return
            op(self._state)

    def _read(self, getter: Callable[[BarState], Any]) -> Any:
        with self._lock:
            return getter(self._state)

    def _trigger_completion(self, s: BarState) -> None:
        s.trigger_complete = True
        if not s.auto_refresh:
            self.cancel()

    def _check_complete(self, s: BarState) -> None:
        if s.trigger_complete and s.current >= s.total:
            s.current = s.total
            self._trigger_completion(s)

    def cancel(self) -> None:
        """Stop the bar; it counts as aborted unless already completed."""
        with self._lock:
            if self._done.is_set():
                return
            s = self._state
            for group in s.decor_groups:
                for d in group:
                    d = unwrap(d)
                    if isinstance(d, ShutdownListener):
                        d.on_shutdown()
            s.aborted = not s.completed()
            self._done.set()

    def id(self) -> int:
        return self._read(lambda s: s.id)

    def current(self) -> int:
        return self._read(lambda s: s.current)

    def set_refill(self, amount: int) -> None:
        def op(s: BarState) -> None:
            s.refill = min(amount, s.current)

        self._operate(op)

    def traverse_decorators(self, callback: Callable[[Any], None]) -> None:
        def op(s: BarState) -> None:
            for group in s.decor_groups:
                for d in group:
                    callback(unwrap(d))

        self._operate(op)

    def enable_trigger_complete(self) -> None:
        def op(s: BarState) -> None:
            if s.trigger_complete:
                return
            if s.current >= s.total:
                s.current = s.total
                self._trigger_completion(s)
            else:
                s.trigger_complete = True

        self._operate(op)

    def set_total(self, total: int, complete: bool) -> None:
        """Set total; negative means current. No-op once completion is armed."""

        def op(s: BarState) -> None:
            if s.trigger_complete:
                return
            s.total = s.current if total < 0 else total
            if complete:
                s.current = s.total
                self._trigger_completion(s)

        self._operate(op)

    def set_current(self, current: int) -> None:
        if current < 0:
            return

        def op(s: BarState) -> None:
            s.current = current
            self._check_complete(s)

        self._operate(op)

    def increment(self) -> None:
        self.incr_by(1)

    def incr_by(self, n: int) -> None:
        def op(s: BarState) -> None:
            s.current += n
            self._check_complete(s)

        self._operate(op)

    def ewma_increment(self, iter_dur: Any) -> None:
        self.ewma_incr_by(1, iter_dur)

    def ewma_incr_by(self, n: int, iter_dur: Any) -> None:
        def op(s: BarState) -> None:
            for d in s.ewma_decorators:
                d.ewma_update(n, iter_dur)
            s.current += n
            self._check_complete(s)

        self._operate(op)

    def ewma_set_current(self, current: int, iter_dur: Any) -> None:
        if current < 0:
            return

        def op(s: BarState) -> None:
            n = current - s.current
            for d in s.ewma_decorators:
                d.ewma_update(n, iter_dur)
            s.current = current
            self._check_complete(s)

        self._operate(op)

    def decorator_average_adjust(self, start: Any) -> None:
        def cb(d: Any) -> None:
            if isinstance(d, AverageDecorator):
                d.average_adjust(start)

        self.traverse_decorators(cb)

    def abort(self, drop: bool) -> None:
        """Abort unless already completed; ``drop`` removes the bar as well."""

        def op(s: BarState) -> None:
            if s.aborted or s.completed():
                return
            s.aborted = True
            s.rm_on_complete = drop
            self._trigger_completion(s)

        self._operate(op)

    def aborted(self) -> bool:
        return self._read(lambda s: s.aborted)

    def completed(self) -> bool:
        return self._read(lambda s: s.completed())

    def is_running(self) -> bool:
        return not self._done.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the bar stops; return whether it did within ``timeout``."""
        return self._done.wait(timeout)

    def render(self, width: int) -> RenderFrame:
        """Draw the bar for a terminal ``width`` cells wide."""
        cancel_after = False
        with self._lock:
            s = self._state
            frame = RenderFrame()
            stat = s.new_statistics(width)
            try:
                line = s.draw(stat)
            except Exception as exc:  # filler or decorator failure
                frame.error = exc
                return frame
            try:
                frame.rows = s.extender(stat, [line])
            except Exception as exc:
                frame.rows = [line]
                frame.error = exc
            if s.aborted or s.completed():
                frame.shutdown = s.shutdown
                frame.rm_on_complete = s.rm_on_complete
                frame.no_pop = s.no_pop
                # post increment makes sure on-complete decorators are rendered
                s.shutdown += 1
                cancel_after = s.auto_refresh
        if cancel_after:
            self.cancel()
        return frame