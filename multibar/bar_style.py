"""Classic bar style: ``[===>---]`` with configurable parts."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Optional, TextIO

from multibar.filler import BarFiller, BarFillerBuilder
from multibar.statistics import (
    Statistics,
    check_requested_width,
    percentage_round,
    string_width,
)

Meta = Optional[Callable[[str], str]]


class _Part(IntEnum):
    LBOUND = 0
    REFILLER = 1
    FILLER = 2
    TIP = 3
    PADDING = 4
    RBOUND = 5


_DEFAULT_STYLE = ("[", "+", "=", ">", "-", "]")


@dataclass(frozen=True)
class _Component:
    width: int
    text: str

    @classmethod
    def of(cls, text: str) -> "_Component":
        return cls(string_width(text), text)


class BarStyle(BarFillerBuilder):
    """Immutable composer of a bar style; each setter returns a new style."""

    def __init__(self) -> None:
        self._style = list(_DEFAULT_STYLE)
        self._metas: list[Meta] = [None] * len(_Part)
        self._tip_frames = [_DEFAULT_STYLE[_Part.TIP]]
        self._tip_on_complete = False
        self._rev = False

    def _with(self, **changes) -> "BarStyle":
        new = copy.copy(self)
        new._style = list(self._style)
        new._metas = list(self._metas)
        for key, value in changes.items():
            setattr(new, key, value)
        return new

    def _set(self, part: _Part, text: str) -> "BarStyle":
        new = self._with()
        new._style[part] = text
        return new

    def _set_meta(self, part: _Part, fn: Meta) -> "BarStyle":
        new = self._with()
        new._metas[part] = fn
        return new

    def lbound(self, bound: str) -> "BarStyle":
        return self._set(_Part.LBOUND, bound)

    def lbound_meta(self, fn: Meta) -> "BarStyle":
        return self._set_meta(_Part.LBOUND, fn)

    def rbound(self, bound: str) -> "BarStyle":
        return self._set(_Part.RBOUND, bound)

    def rbound_meta(self, fn: Meta) -> "BarStyle":
        return self._set_meta(_Part.RBOUND, fn)

    def filler(self, filler: str) -> "BarStyle":
        return self._set(_Part.FILLER, filler)

    def filler_meta(self, fn: Meta) -> "BarStyle":
        return self._set_meta(_Part.FILLER, fn)

    def refiller(self, refiller: str) -> "BarStyle":
        return self._set(_Part.REFILLER, refiller)

    def refiller_meta(self, fn: Meta) -> "BarStyle":
        return self._set_meta(_Part.REFILLER, fn)

    def padding(self, padding: str) -> "BarStyle":
        return self._set(_Part.PADDING, padding)

    def padding_meta(self, fn: Meta) -> "BarStyle":
        return self._set_meta(_Part.PADDING, fn)

    def tip(self, *args: str) -> "BarStyle":
        """Set tip frames; several frames animate. No frames keeps the current ones."""
        if not args:
            return self
        return self._with(_tip_frames=list(args))

    def tip_meta(self, fn: Meta) -> "BarStyle":
        return self._set_meta(_Part.TIP, fn)

    def tip_on_complete(self) -> "BarStyle":
        return self._with(_tip_on_complete=True)

    def reverse(self) -> "BarStyle":
        return self._with(_rev=True)

    def build(self) -> "BarStyleFiller":
        return BarStyleFiller(
            components=[_Component.of(s) for s in self._style],
            metas=list(self._metas),
            tip_frames=[_Component.of(t) for t in self._tip_frames],
            tip_on_complete=self._tip_on_complete,
            reverse=self._rev,
        )


class BarStyleFiller(BarFiller):
    """Filler built from a :class:`BarStyle`."""

    def __init__(self, components, metas, tip_frames, tip_on_complete, reverse):
        self._components = components
        self._metas = metas
        self._tip_frames = tip_frames
        self._tip_on_complete = tip_on_complete
        self._reverse = reverse
        self._tip_count = 0

    @staticmethod
    def _repeat(comp: _Component, room: int) -> tuple[str, int]:
        if comp.width <= 0 or room < comp.width:
            return "", 0
        n = room // comp.width
        return comp.text * n, n * comp.width

    def fill(self, out: TextIO, stat: Statistics) -> None:
        comps = self._components
        width = check_requested_width(stat.requested_width, stat.available_width)
        width -= comps[_Part.LBOUND].width + comps[_Part.RBOUND].width
        if width < 0:
            return

        tip = _Component(0, "")
        filling = refilling = ""
        fill_count = 0
        cur_width = int(percentage_round(stat.total, stat.current, width))

        if cur_width != 0:
            if not stat.completed or self._tip_on_complete:
                tip = self._tip_frames[self._tip_count % len(self._tip_frames)]
                self._tip_count += 1
                fill_count += tip.width
            ref_width = 0
            if stat.refill != 0:
                ref_width = int(percentage_round(stat.total, stat.refill, width))
                cur_width -= ref_width
                ref_width += cur_width
            filling, used = self._repeat(comps[_Part.FILLER], cur_width - fill_count)
            fill_count += used
            refilling, used = self._repeat(comps[_Part.REFILLER], ref_width - fill_count)
            fill_count += used

        padding, used = self._repeat(comps[_Part.PADDING], width - fill_count)
        fill_count += used
        if width > fill_count:
            padding += "…" * (width - fill_count)

        sections = [
            (self._metas[_Part.LBOUND], comps[_Part.LBOUND].text),
            (self._metas[_Part.REFILLER], refilling),
            (self._metas[_Part.FILLER], filling),
            (self._metas[_Part.TIP], tip.text),
            (self._metas[_Part.PADDING], padding),
            (self._metas[_Part.RBOUND], comps[_Part.RBOUND].text),
        ]
        if self._reverse:
            sections[0], sections[-1] = sections[-1], sections[0]
            sections.reverse()
        for meta, text in sections:
            out.write(meta(text) if meta is not None else text)