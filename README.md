# multibar

Building blocks for drawing progress bars in a terminal. A bar is a
*filler* (the part that shows progress) with optional *decorators* on its
left and right. This package provides the fillers, the bar state and its
thread-safe handle, option functions for bars and containers, and a
console writer that rewrites its previous output.

## Installation

```
pip install multibar
```

The only runtime dependency is `wcwidth`, used to measure how many
terminal columns a string takes, so that wide characters such as `の`
or `だ` line up correctly.

## Quick example

```python
from multibar.bar import Bar
from multibar.bar_option import bar_filler_trim, build_bar
from multibar.bar_style import BarStyle

bar = Bar(build_bar(100, BarStyle(), bar_filler_trim()))
bar.incr_by(40)
frame = bar.render(20)
print(frame.rows[0], end="")   # [======>-----------]
```

## Fillers

`multibar.bar_style.BarStyle` describes the classic `[=====>-----]` bar.
Every part can be changed, and each method returns a new style, so a base
style can be shared and varied freely:

```python
from multibar.bar_style import BarStyle

filler = (
    BarStyle()
    .lbound("╢")
    .filler("▌")
    .tip("▌")
    .padding("░")
    .rbound("╟")
    .build()
)
```

- `lbound` / `rbound` set the brackets, which are not counted as progress.
- `filler`, `tip` and `padding` set the done part, its leading edge and
  the remaining part. If a wide padding character does not fit the last
  cell, the gap is filled with `…`.
- `refiller` sets what marks the refilled share (see `Bar.set_refill`).
- `tip` accepts several frames, shown in turn on successive fills. By
  default the tip is not drawn once the bar is completed;
  `tip_on_complete()` keeps it.
- `reverse()` makes the bar grow from right to left.
- Each part has a matching `*_meta(fn)` method (`lbound_meta`,
  `filler_meta`, `tip_meta`, …) taking a function that wraps that part's
  rendered text, handy for ANSI colours. `None` leaves the text as is.

`build()` returns a `BarStyleFiller`, whose `fill(out, stat)` writes the
body into any object with a `write` method.

`multibar.spinner_style.SpinnerStyle(*frames)` builds a spinner filler.
With no frames it uses a braille spinner. The frame is centred in the
available width unless `position_left()` or `position_right()` is used,
and `meta(fn)` wraps each frame.

`multibar.filler.nop_style()` builds a filler that draws nothing, for a
bar that should show only its decorators. `FuncFiller(fn)` turns a plain
`fn(out, stat)` into a filler. `BarFiller` and `BarFillerBuilder` are the
abstract bases.

## Statistics and text helpers

`multibar.statistics.Statistics` is the snapshot passed to fillers and
decorators: `id`, `available_width`, `requested_width`, `total`,
`current`, `refill`, `completed` and `aborted`. The module also offers
`percentage_round`, `check_requested_width`, `string_width`, `truncate`
and `strip_ansi`.

## Bars

`multibar.bar.BarState` holds one bar's state. `draw(stat)` renders one
line: the left decorators, a space, the filler, a space, the right
decorators and a newline. The spaces are dropped when `trim_space` is set
or fewer than two cells remain, and a decorator that does not fit is
stripped of ANSI codes and cut with `…`. `make_bar_state(total, filler)`
creates a fresh state.

`multibar.bar.Bar` is a thread-safe handle over a state. It offers
`increment`, `incr_by`, `set_current`, `set_total`, `set_refill`,
`enable_trigger_complete`, `abort`, `cancel`, `id`, `current`,
`completed`, `aborted`, `is_running`, `wait(timeout)`,
`traverse_decorators`, `decorator_average_adjust` and `render(width)`,
which returns a `RenderFrame` with the rendered `rows`. The EWMA-aware
variants `ewma_increment`, `ewma_incr_by` and `ewma_set_current` also feed
every `EwmaDecorator` of the bar.

- A bar with a total greater than zero completes when `current` reaches
  it; `current` is clamped to the total.
- A bar built with a total of zero or less does not complete by itself.
  Call `set_total(total, True)` or `enable_trigger_complete()` once the
  real size is known. After completion is armed, `set_total` does nothing.
- A negative total passed to `set_total` means "use the current value".
- Once a bar completes or is aborted it stops running; further updates
  are ignored and `wait()` returns.

Decorators implement `multibar.bar.Decorator` (`decor(stat)` returning
text and its width, and optionally `sync()`). The optional interfaces
`Wrapper`, `EwmaDecorator`, `AverageDecorator` and `ShutdownListener` are
recognised; `unwrap` strips wrapper layers.

## Bar options

`multibar.bar_option` holds functions that return options, and
`build_bar(total, builder, *options)` applies them to a new `BarState`
(`None` options are skipped; a `None` builder means the default
`BarStyle`):

- `prepend_decorators` / `append_decorators` set the decorators on each
  side.
- `bar_id`, `bar_width` and `bar_priority` set the id, width and priority.
- `bar_queue_after`, `bar_remove_on_complete` and `bar_no_pop` record the
  bar to wait for, removal on completion and opting out of popping.
- `bar_filler_on_complete` / `bar_filler_on_abort` replace the filler with
  a message; the `clear` variants use an empty message.
- `bar_filler_middleware` wraps the filler with any function.
- `bar_filler_trim` drops the spaces around the filler.
- `bar_extender(filler, rev)` adds the complete lines `filler` writes
  below the bar, or reverses all rows when `rev` is true.
- `bar_optional`, `bar_opt_on`, `bar_func_optional` and `bar_func_opt_on`
  apply an option only when a condition holds.

## Container options

`multibar.container_option` gathers container settings into a
`ContainerSettings` via `apply_container_options`. Options include
`with_width`, `with_queue_len`, `with_refresh_rate`,
`with_manual_refresh`, `with_render_delay`, `with_output`,
`with_debug_output` (`None` discards output), `with_auto_refresh`,
`with_shutdown_notifier`, `with_wait_group` and `pop_completed_mode`,
plus the conditional helpers `container_optional`, `container_opt_on`,
`container_func_optional` and `container_func_opt_on`.

```python
import io

from multibar.container_option import (
    apply_container_options,
    container_optional,
    with_output,
    with_width,
)

quiet = True
settings = apply_container_options(
    with_width(64),
    container_optional(with_output(io.StringIO()), quiet),
)
```

## Console writer

`multibar.cwriter.Writer(out)` buffers one frame of text. `flush(lines)`
writes the buffered frame to `out`, then places the escape sequence that
moves the cursor up `lines` lines and erases below at the start of the
next frame, so that the next flush overwrites this one.
`cursor_up_and_erase(lines)` builds that sequence on its own.

`is_terminal(fd)` and `get_size(fd)` query the terminal. If the output is
not a terminal, `Writer.get_term_size()` raises `NotATerminalError`.

## What this package does not do

There is no container that owns several bars and drives them: nothing
here runs a refresh timer, orders bars by priority, queues bars after one
another, pops completed bars or sends anything to a shutdown notifier.
`ContainerSettings` and the bar options only record these choices. No
ready-made decorators (names, counters, percentages, speeds, ETAs) are
included either; only the interfaces they implement.