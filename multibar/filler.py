"""Filler interfaces and the no-op style."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, TextIO

from multibar.statistics import Statistics


class BarFiller(ABC):
    """Draws the body of a bar (without decorators) into a text stream."""

    @abstractmethod
    def fill(self, out: TextIO, stat: Statistics) -> None:
        """Write the rendered body for ``stat`` into ``out``."""


class BarFillerBuilder(ABC):
    """Produces a fresh :class:`BarFiller`."""

    @abstractmethod
    def build(self) -> BarFiller:
        """Return a new filler."""


class FuncFiller(BarFiller):
    """Adapts a plain callable ``fn(out, stat)`` into a filler."""

    def __init__(self, fn: Callable[[TextIO, Statistics], None]) -> None:
        self._fn = fn

    def fill(self, out: TextIO, stat: Statistics) -> None:
        self._fn(out, stat)


class _FuncBuilder(BarFillerBuilder):
    def __init__(self, factory: Callable[[], BarFiller]) -> None:
        self._factory = factory

    def build(self) -> BarFiller:
        return self._factory()


def nop_style() -> BarFillerBuilder:
    """Builder of a filler that draws nothing."""
    return _FuncBuilder(lambda: FuncFiller(lambda out, stat: None))