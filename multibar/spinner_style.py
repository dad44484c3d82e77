"""Spinner style filler."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Callable, Optional, TextIO

from multibar.filler import BarFiller, BarFillerBuilder
from multibar.statistics import Statistics, check_requested_width, string_width

DEFAULT_FRAMES = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")


class _Position(Enum):
    CENTER = 0
    LEFT = 1
    RIGHT = 2


class SpinnerStyle(BarFillerBuilder):
    """Immutable composer of a spinner; setters return new styles."""

    def __init__(self, *frames: str) -> None:
        self._frames = tuple(frames) if frames else DEFAULT_FRAMES
        self._position = _Position.CENTER
        self._meta: Optional[Callable[[str], str]] = None

    def _with(self, **changes) -> "SpinnerStyle":
        new = copy.copy(self)
        for key, value in changes.items():
            setattr(new, key, value)
        return new

    def position_left(self) -> "SpinnerStyle":
        return self._with(_position=_Position.LEFT)

    def position_right(self) -> "SpinnerStyle":
        return self._with(_position=_Position.RIGHT)

    def meta(self, fn: Optional[Callable[[str], str]]) -> "SpinnerStyle":
        return self._with(_meta=fn)

    def build(self) -> "SpinnerFiller":
        return SpinnerFiller(self._frames, self._position, self._meta or (lambda s: s))


class SpinnerFiller(BarFiller):
    """Draws one spinner frame per fill, padded to the available width."""

    def __init__(self, frames, position, meta) -> None:
        self._frames = frames
        self._position = position
        self._meta = meta
        self._count = 0

    def _place(self, frame: str, pad: int) -> str:
        if self._position is _Position.LEFT:
            return frame + " " * pad
        if self._position is _Position.RIGHT:
            return " " * pad + frame
        return " " * (pad // 2) + frame + " " * (pad // 2 + pad % 2)

    def fill(self, out: TextIO, stat: Statistics) -> None:
        width = check_requested_width(stat.requested_width, stat.available_width)
        frame = self._frames[self._count % len(self._frames)]
        frame_width = string_width(frame)
        self._count += 1
        if width < frame_width:
            return
        out.write(self._place(self._meta(frame), width - frame_width))