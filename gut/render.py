"""Screen rendering for the prompt, busy, done, and error views.

``build_frame`` is pure and returns styled rows; ``render_frame`` writes them
to the terminal in one ``os.write`` call.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from .engine import Choice, SessionState
from .text import clip_text, escape_control_chars, wrap_text
from .ui_theme import UITheme

MARGIN_COLS = 2
DONE_TEXT = "All done, press Q to quit!"
ERROR_TEXT = "Something went wrong, press Q to quit: {error}"
KEY_HINT = "↑/↓ move  enter select  n/y/c/a answer  ctrl+c quit"


@dataclass(frozen=True)
class RenderContext:
    """Everything one frame needs; built fresh by the runtime loop."""

    state: SessionState
    title: str
    items: tuple[Choice, ...]
    selected: int
    width: int
    height: int
    theme: UITheme
    status_message: str = ""
    error: Exception | None = None


def _styled(text: str, style: str, theme: UITheme) -> str:
    if not style or not text:
        return text
    return f"{style}{text}{theme.reset}"


def build_frame(ctx: RenderContext) -> list[str]:
    """Return the rows of one frame, each fitting ``ctx.width`` columns.

    Text carrying entry paths or error messages (title, status, error) wraps
    onto extra rows so it is shown in full; fixed labels are clipped.
    """
    theme = ctx.theme
    pad = " " * MARGIN_COLS
    cols = max(1, ctx.width - MARGIN_COLS)

    def row(text: str, style: str) -> str:
        return pad + _styled(clip_text(text, cols), style, theme)

    def wrapped(text: str, style: str) -> list[str]:
        return [pad + _styled(chunk, style, theme) for chunk in wrap_text(escape_control_chars(text), cols)]

    rows: list[str] = [""]
    if ctx.state is SessionState.FAILED:
        rows.extend(wrapped(ERROR_TEXT.format(error=ctx.error), theme.error))
    elif ctx.state is SessionState.DONE:
        rows.append(row(DONE_TEXT, theme.done))
    else:
        if ctx.title:
            rows.extend(wrapped(ctx.title, theme.title))
            rows.append("")
        for idx, item in enumerate(ctx.items):
            label = escape_control_chars(item.label)
            if idx == ctx.selected:
                rows.append(row(f"> {label}", theme.selected))
            else:
                rows.append(row(f"  {label}", theme.item))
        if ctx.status_message:
            rows.append("")
            rows.extend(wrapped(ctx.status_message, theme.status))
        rows.append("")
        rows.append(row(KEY_HINT, theme.hint))
    # Leave the last terminal row free so the trailing newline never scrolls.
    return rows[: max(1, ctx.height - 1)]


def render_frame(ctx: RenderContext) -> None:
    """Redraw the whole screen from the top-left corner."""
    out = ["\033[H"]
    for line in build_frame(ctx):
        out.append(line)
        out.append("\033[K\r\n")
    out.append("\033[J")
    os.write(sys.stdout.fileno(), "".join(out).encode("utf-8", errors="replace"))
