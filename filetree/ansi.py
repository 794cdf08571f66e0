"""ANSI-aware width measurement and truncation for rendered rows."""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
ELLIPSIS = "…"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    (including most emoji) consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return visible column width of ``text`` ignoring escape sequences."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def truncate_ansi_line(text: str, max_cols: int, reset: str = "") -> str:
    """Trim a styled line to ``max_cols`` columns, ending with ``…`` when cut.

    Escape sequences are kept verbatim and do not count toward width. When a
    cut happens, ``reset`` is appended so open styles do not leak.
    """
    if max_cols <= 0:
        return ""
    if display_width(text) <= max_cols:
        return text

    budget = max_cols - 1
    out: list[str] = []
    col = 0
    i = 0
    while i < len(text):
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        width = char_display_width(text[i])
        if col + width > budget:
            break
        out.append(text[i])
        col += width
        i += 1
    return "".join(out) + ELLIPSIS + reset


__all__ = ["char_display_width", "strip_ansi", "display_width", "truncate_ansi_line"]
