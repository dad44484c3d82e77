"""Render statistics and text-width helpers shared by fillers."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from wcwidth import wcwidth

_ANSI_RE = re.compile(
    "[\u001b\u009b][[\\]()#;?]*(?:(?:(?:[a-zA-Z\\d]*(?:;[a-zA-Z\\d]*)*)?\u0007)"
    "|(?:(?:\\d{1,4}(?:;\\d{0,4})*)?[\\dA-PRZcf-ntqry=><~]))"
)


@dataclass
class Statistics:
    """Snapshot of a bar's state handed to fillers and decorators."""

    id: int = 0
    available_width: int = 0
    requested_width: int = 0
    total: int = 0
    current: int = 0
    refill: int = 0
    completed: bool = False
    aborted: bool = False


def _percentage(total: int, current: int, width: int) -> float:
    if total <= 0:
        return 0.0
    if current >= total:
        return float(width)
    return float(width * current) / float(total)


def percentage_round(total: int, current: int, width: int) -> float:
    """Share of ``width`` that ``current`` makes of ``total``, rounded half away from zero."""
    value = _percentage(total, current, width)
    if value >= 0:
        return float(math.floor(value + 0.5))
    return -float(math.floor(-value + 0.5))


def check_requested_width(requested: int, available: int) -> int:
    """Return ``requested`` if it fits into ``available``, else ``available``."""
    if requested < 1 or requested > available:
        return available
    return requested


def _char_width(char: str) -> int:
    return max(0, wcwidth(char))


def string_width(text: str) -> int:
    """Number of terminal cells ``text`` occupies."""
    return sum(_char_width(c) for c in text)


def truncate(text: str, width: int, tail: str) -> str:
    """Cut ``text`` to at most ``width`` cells, ending it with ``tail`` if cut."""
    if string_width(text) <= width:
        return text
    limit = width - string_width(tail)
    used = 0
    kept = []
    for char in text:
        cw = _char_width(char)
        if used + cw > limit:
            break
        used += cw
        kept.append(char)
    return "".join(kept) + tail


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from ``text``."""
    return _ANSI_RE.sub("", text)