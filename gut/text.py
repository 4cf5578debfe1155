"""Display-width aware text measurement, clipping, and wrapping.

Entry names come straight from the filesystem, so they are escaped before
layout: control characters would otherwise move the cursor or inject
terminal sequences into the frame.
"""

from __future__ import annotations

import unicodedata


def char_display_width(ch: str) -> int:
    """Return terminal column width for one printable character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def escape_control_chars(text: str) -> str:
    """Replace control characters with their ``repr`` escapes (``\\n``, ``\\x1b``)."""
    if text.isprintable():
        return text
    out: list[str] = []
    for ch in text:
        if unicodedata.category(ch) == "Cc":
            out.append(repr(ch)[1:-1])
        else:
            out.append(ch)
    return "".join(out)


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns, marking the cut."""
    if max_cols <= 0 or not text:
        return ""
    if display_width(text) <= max_cols:
        return text
    budget = max_cols - 1
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > budget:
            break
        out.append(ch)
        col += w
    return "".join(out) + "…"


def wrap_text(text: str, width: int) -> list[str]:
    """Split ``text`` into chunks that each fit ``width`` display columns.

    Nothing is dropped: joining the chunks gives back ``text``.
    """
    if width <= 0 or not text:
        return [text]

    wrapped: list[str] = []
    chunk: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > width and chunk:
            wrapped.append("".join(chunk))
            chunk = []
            col = 0
        chunk.append(ch)
        col += w
    wrapped.append("".join(chunk))
    return wrapped
