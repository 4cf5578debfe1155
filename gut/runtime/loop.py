"""Main interactive event loop.

Alternates between draining operation events, redrawing when something
changed, and polling one key with a short timeout so the loop never blocks
on filesystem work.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass

from ..input import read_key
from .terminal import TerminalController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    key_poll_ms: int = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_main_loop``."""

    drain_events: Callable[[], bool]
    render: Callable[[int, int], None]
    handle_key: Callable[[str], bool]


def run_main_loop(
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    callbacks: RuntimeLoopCallbacks,
) -> None:
    """Run until ``handle_key`` asks to quit."""
    dirty = True
    skip_next_lf = False
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((80, 24))
            size = (term.columns, term.lines)
            if size != last_size:
                last_size = size
                dirty = True
            if callbacks.drain_events():
                dirty = True
            if dirty:
                callbacks.render(term.columns, term.lines)
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.key_poll_ms)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                continue
            if skip_next_lf and key == "ENTER_LF":
                skip_next_lf = False
                continue
            if key == "ENTER_CR":
                key = "ENTER"
                skip_next_lf = True
            elif key == "ENTER_LF":
                key = "ENTER"
                skip_next_lf = False
            else:
                skip_next_lf = False

            if callbacks.handle_key(key):
                break
            dirty = True
