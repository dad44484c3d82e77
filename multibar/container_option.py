"""Options altering the behaviour of a bar container."""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, TextIO

DEFAULT_QUEUE_LEN = 128
DEFAULT_REFRESH_RATE = 0.15


class _Discard(io.TextIOBase):
    """Text sink that drops everything written to it."""

    def writable(self) -> bool:
        return True

    def write(self, data: str) -> int:
        return len(data)


@dataclass
class ContainerSettings:
    """Settings of a container holding one or more bars."""

    wait_group: Optional[Any] = None
    requested_width: int = 0
    queue_len: int = DEFAULT_QUEUE_LEN
    refresh_rate: float = DEFAULT_REFRESH_RATE
    manual_refresh: Optional[Any] = None
    render_delay: Optional[Any] = None
    shutdown_notifier: Optional[Any] = None
    output: Any = field(default_factory=lambda: sys.stdout)
    debug_output: Any = field(default_factory=_Discard)
    auto_refresh: bool = False
    pop_completed: bool = False


ContainerOption = Callable[[ContainerSettings], None]


def _setter(name: str, value: Any) -> ContainerOption:
    def option(s: ContainerSettings) -> None:
        setattr(s, name, value)

    return option


def with_wait_group(group: Any) -> ContainerOption:
    """Join ``group`` so that waiting on the container waits on it too."""
    return _setter("wait_group", group)


def with_width(width: int) -> ContainerOption:
    """Set the container width; bars inherit it unless they set their own."""
    return _setter("requested_width", width)


def with_queue_len(length: int) -> ContainerOption:
    """Set the render queue length (default 128)."""
    return _setter("queue_len", length)


def with_refresh_rate(interval: float) -> ContainerOption:
    """Override the default 0.15 second refresh interval."""
    return _setter("refresh_rate", interval)


def with_manual_refresh(source: Any) -> ContainerOption:
    """Refresh only when ``source`` delivers a value, not on a timer."""
    return _setter("manual_refresh", source)


def with_render_delay(event: Any) -> ContainerOption:
    """Delay rendering until ``event`` is set."""
    return _setter("render_delay", event)


def with_shutdown_notifier(notifier: Any) -> ContainerOption:
    """Send the remaining bars to ``notifier`` on container shutdown."""
    return _setter("shutdown_notifier", notifier)


def with_output(out: Optional[TextIO]) -> ContainerOption:
    """Override stdout as output; ``None`` discards output."""
    return _setter("output", out if out is not None else _Discard())


def with_debug_output(out: Optional[TextIO]) -> ContainerOption:
    """Set the debug output; ``None`` discards it."""
    return _setter("debug_output", out if out is not None else _Discard())


def with_auto_refresh() -> ContainerOption:
    """Force auto refresh whatever the output is."""
    return _setter("auto_refresh", True)


def pop_completed_mode() -> ContainerOption:
    """Pop completed bars out of the rendering cycle to the top."""
    return _setter("pop_completed", True)


def container_optional(
    option: Optional[ContainerOption], cond: bool
) -> Optional[ContainerOption]:
    """Return ``option`` only when ``cond`` is true."""
    return option if cond else None


def container_opt_on(
    option: Optional[ContainerOption], predicate: Callable[[], bool]
) -> Optional[ContainerOption]:
    """Return ``option`` only when ``predicate()`` is true."""
    return option if predicate() else None


def container_func_optional(
    option: Callable[[], Optional[ContainerOption]], cond: bool
) -> Optional[ContainerOption]:
    """Call ``option`` and return its result only when ``cond`` is true."""
    return option() if cond else None


def container_func_opt_on(
    option: Callable[[], Optional[ContainerOption]], predicate: Callable[[], bool]
) -> Optional[ContainerOption]:
    """Call ``option`` and return its result only when ``predicate()`` is true."""
    return option() if predicate() else None


def apply_container_options(*args: Optional[ContainerOption]) -> ContainerSettings:
    """Default settings with every non-None option applied in order."""
    settings = ContainerSettings()
    for option in args:
        if option is not None:
            option(settings)
    return settings