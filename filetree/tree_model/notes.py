"""One-line file notes read from the top of source files.

Scanned directory trees annotate files with the first line of their leading
docstring or comment block. Results are cached on ``(path, mtime, size)``.
"""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path
import re
import threading

NOTE_READ_BYTES = 4_096
NOTE_MAX_FILE_BYTES = 256 * 1024
NOTE_MAX_CHARS = 96
NOTE_CACHE_MAX = 2_048

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_CODING_COOKIE_RE = re.compile(r"^#.*coding[:=]\s*[-\w.]+")
_TRIPLE_QUOTES = ('"""', "'''")
_LINE_COMMENT_PREFIXES = ("#", "//", "--", ";")
_NOTE_CACHE: OrderedDict[tuple[str, int, int], str | None] = OrderedDict()
_NOTE_CACHE_LOCK = threading.RLock()
_MISSING = object()


def _clean_note(text: str) -> str | None:
    """Collapse whitespace, escape control bytes, and cap length."""
    collapsed = " ".join(text.strip().split())
    collapsed = _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", collapsed)
    if not collapsed:
        return None
    if len(collapsed) > NOTE_MAX_CHARS:
        return collapsed[: NOTE_MAX_CHARS - 3].rstrip() + "..."
    return collapsed


def _first_delimited_line(lines: list[str], start: int, opener: str, closer: str, strip: str = "") -> str | None:
    """Return the first non-empty line inside a delimited block starting at ``start``."""
    body = lines[start].lstrip()[len(opener) :]
    for line in [body, *lines[start + 1 :]]:
        done = closer in line
        if done:
            line = line.split(closer, 1)[0]
        note = _clean_note(line.strip().lstrip(strip).strip())
        if note or done:
            return note
    return None


def _first_comment_line(lines: list[str], start: int, prefix: str) -> str | None:
    for line in lines[start:]:
        stripped = line.lstrip()
        if not stripped:
            continue
        if not stripped.startswith(prefix):
            return None
        note = _clean_note(stripped[len(prefix) :])
        if note:
            return note
    return None


def read_file_note(path: Path, size_bytes: int | None = None) -> str | None:
    """Return a one-line note from the top of ``path`` or ``None``."""
    if size_bytes is not None and size_bytes > NOTE_MAX_FILE_BYTES:
        return None
    try:
        with path.open("rb") as handle:
            sample = handle.read(NOTE_READ_BYTES)
    except OSError:
        return None
    if not sample or b"\x00" in sample:
        return None

    lines = sample.decode("utf-8", errors="replace").lstrip("\ufeff").splitlines()
    idx = 0
    while idx < len(lines) and not lines[idx].strip():
        idx += 1
    if idx < len(lines) and lines[idx].lstrip().startswith("#!"):
        idx += 1
    if idx < len(lines) and _CODING_COOKIE_RE.match(lines[idx].strip()):
        idx += 1
    while idx < len(lines) and not lines[idx].strip():
        idx += 1
    if idx >= len(lines):
        return None

    first = lines[idx].lstrip()
    for quote in _TRIPLE_QUOTES:
        if first.startswith(quote):
            return _first_delimited_line(lines, idx, quote, quote)
    if first.startswith("/*"):
        return _first_delimited_line(lines, idx, "/*", "*/", strip="*")
    for prefix in _LINE_COMMENT_PREFIXES:
        if first.startswith(prefix):
            return _first_comment_line(lines, idx, prefix)
    return None


def cached_file_note(path: Path, size_bytes: int | None = None) -> str | None:
    """Return ``read_file_note`` for ``path`` through a small LRU cache."""
    try:
        stat = path.stat()
        key: tuple[str, int, int] | None = (str(path.resolve()), int(stat.st_mtime_ns), int(stat.st_size))
    except OSError:
        key = None
    else:
        if size_bytes is None:
            size_bytes = int(stat.st_size)

    if key is not None:
        with _NOTE_CACHE_LOCK:
            cached = _NOTE_CACHE.get(key, _MISSING)
            if cached is not _MISSING:
                _NOTE_CACHE.move_to_end(key)
                return cached

    note = read_file_note(path, size_bytes)

    if key is not None:
        with _NOTE_CACHE_LOCK:
            _NOTE_CACHE[key] = note
            while len(_NOTE_CACHE) > NOTE_CACHE_MAX:
                _NOTE_CACHE.popitem(last=False)
    return note


def clear_note_cache() -> None:
    with _NOTE_CACHE_LOCK:
        _NOTE_CACHE.clear()


__all__ = ["read_file_note", "cached_file_note", "clear_note_cache"]
