"""Console writer that rewrites its previous output on each flush."""

from __future__ import annotations

import io
import os
from typing import TextIO

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX
    termios = None

_ESC_OPEN = "\x1b["
_CUU_AND_ED = "A\x1b[J"


class NotATerminalError(OSError):
    """The output is not a terminal."""

    def __init__(self) -> None:
        super().__init__("not a terminal")


def cursor_up_and_erase(lines: int) -> str:
    """Escape sequence moving the cursor ``lines`` up and erasing below."""
    return f"{_ESC_OPEN}{lines}{_CUU_AND_ED}"


def is_terminal(fd: int) -> bool:
    """Whether the file descriptor refers to a terminal."""
    if termios is not None:
        try:
            termios.tcgetattr(fd)
        except (termios.error, OSError):
            return False
        return True
    try:
        return os.isatty(fd)
    except OSError:
        return False


def get_size(fd: int) -> tuple[int, int]:
    """Return ``(width, height)`` of the terminal behind ``fd``; raises OSError."""
    size = os.get_terminal_size(fd)
    return size.columns, size.lines


class Writer:
    """Buffered writer; each flush after the first moves the cursor back up."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._buffer = io.StringIO()
        self._fd = -1
        self._terminal = False
        fileno = getattr(out, "fileno", None)
        if fileno is not None:
            try:
                fd = fileno()
            except (OSError, ValueError, io.UnsupportedOperation):
                fd = -1
            if fd >= 0:
                self._fd = fd
                self._terminal = is_terminal(fd)

    def write(self, data: str) -> int:
        return self._buffer.write(data)

    def is_terminal(self) -> bool:
        return self._terminal

    def get_term_size(self) -> tuple[int, int]:
        if not self._terminal:
            raise NotATerminalError()
        return get_size(self._fd)

    def flush(self, lines: int) -> None:
        """Write out the buffer, then queue a rewind over ``lines`` lines."""
        self._out.write(self._buffer.getvalue())
        self._buffer = io.StringIO()
        flush = getattr(self._out, "flush", None)
        if flush is not None:
            flush()
        # some terminals read 'cursor up 0' as 'cursor up 1'
        if lines > 0:
            self._buffer.write(cursor_up_and_erase(lines))