"""Best-effort clipboard writes for copy-path intents.

The primary path pipes text into a platform clipboard command. When none is
available or all fail, an OSC 52 escape sequence asks the terminal itself to
set the clipboard. Failures are logged and never raised.
"""

from __future__ import annotations

import base64
import logging
import os
import shutil
import subprocess
import sys
import threading
from typing import TextIO

logger = logging.getLogger(__name__)

CLIPBOARD_TIMEOUT_SECONDS = 2.0


def clipboard_commands() -> list[list[str]]:
    """Return candidate clipboard commands for the current platform."""
    if sys.platform == "darwin":
        return [["pbcopy"]]
    if os.name == "nt":
        return [["clip"]]
    return [
        ["wl-copy"],
        ["xclip", "-selection", "clipboard"],
        ["xsel", "--clipboard", "--input"],
    ]


def copy_with_command(text: str) -> bool:
    """Try each available platform command until one exits successfully."""
    for command in clipboard_commands():
        if shutil.which(command[0]) is None:
            continue
        try:
            proc = subprocess.run(
                command,
                input=text,
                text=True,
                check=False,
                timeout=CLIPBOARD_TIMEOUT_SECONDS,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as exc:
            logger.debug("clipboard command %s failed: %s", command[0], exc)
            continue
        if proc.returncode == 0:
            return True
        logger.debug("clipboard command %s exited with %s", command[0], proc.returncode)
    return False


def osc52_sequence(text: str) -> str:
    """Return the terminal escape that sets the system clipboard to ``text``."""
    payload = base64.b64encode(text.encode("utf-8")).decode("ascii")
    return f"\033]52;c;{payload}\a"


def copy_with_osc52(text: str, stream: TextIO | None = None) -> bool:
    """Write an OSC 52 clipboard request to ``stream`` (stdout by default)."""
    target = stream if stream is not None else sys.stdout
    try:
        target.write(osc52_sequence(text))
        target.flush()
    except (OSError, ValueError) as exc:
        logger.debug("osc52 clipboard fallback failed: %s", exc)
        return False
    return True


def copy_text_to_clipboard(text: str, stream: TextIO | None = None) -> bool:
    """Copy ``text`` with the platform command, falling back to OSC 52."""
    if not text:
        return False
    if copy_with_command(text):
        logger.debug("copied %r", text)
        return True
    logger.debug("no clipboard command succeeded, using osc52 fallback")
    return copy_with_osc52(text, stream)


def copy_text_async(text: str) -> threading.Thread:
    """Start ``copy_text_to_clipboard`` on a daemon thread and return at once."""
    worker = threading.Thread(
        target=copy_text_to_clipboard,
        args=(text,),
        name="filetree-clipboard",
        daemon=True,
    )
    worker.start()
    return worker


__all__ = [
    "clipboard_commands",
    "copy_with_command",
    "osc52_sequence",
    "copy_with_osc52",
    "copy_text_to_clipboard",
    "copy_text_async",
]
