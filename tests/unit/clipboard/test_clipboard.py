"""Clipboard collaborator tests: command selection and OSC 52 fallback."""

from __future__ import annotations

import base64
import io
import subprocess
import unittest
from unittest import mock

from filetree import clipboard


class ClipboardCommandTests(unittest.TestCase):
    def test_macos_uses_pbcopy(self) -> None:
        with mock.patch.object(clipboard.sys, "platform", "darwin"):
            self.assertEqual(clipboard.clipboard_commands(), [["pbcopy"]])

    def test_first_successful_command_wins(self) -> None:
        with mock.patch.object(clipboard, "clipboard_commands", return_value=[["missing"], ["xclip"], ["xsel"]]), \
                mock.patch.object(clipboard.shutil, "which", side_effect=lambda name: None if name == "missing" else name), \
                mock.patch.object(clipboard.subprocess, "run", return_value=mock.Mock(returncode=0)) as run:
            self.assertTrue(clipboard.copy_with_command("root/src"))

        run.assert_called_once()
        self.assertEqual(run.call_args.args[0], ["xclip"])
        self.assertEqual(run.call_args.kwargs["input"], "root/src")

    def test_failed_commands_fall_through(self) -> None:
        with mock.patch.object(clipboard, "clipboard_commands", return_value=[["a"], ["b"]]), \
                mock.patch.object(clipboard.shutil, "which", return_value="/bin/x"), \
                mock.patch.object(
                    clipboard.subprocess,
                    "run",
                    side_effect=[subprocess.TimeoutExpired("a", 2.0), mock.Mock(returncode=1)],
                ):
            self.assertFalse(clipboard.copy_with_command("text"))


class ClipboardFallbackTests(unittest.TestCase):
    def test_unencodable_text_still_reaches_fallback(self) -> None:
        stream = io.StringIO()
        with mock.patch.object(clipboard, "clipboard_commands", return_value=[["xclip"]]), \
                mock.patch.object(clipboard.shutil, "which", return_value="/usr/bin/xclip"), \
                mock.patch.object(
                    clipboard.subprocess,
                    "run",
                    side_effect=UnicodeEncodeError("ascii", "\u00e9", 0, 1, "ordinal not in range"),
                ):
            self.assertTrue(clipboard.copy_text_to_clipboard("root/\u00e9", stream=stream))
        self.assertEqual(stream.getvalue(), clipboard.osc52_sequence("root/\u00e9"))

    def test_osc52_sequence_encodes_payload(self) -> None:
        sequence = clipboard.osc52_sequence("root/a.txt")
        payload = base64.b64encode(b"root/a.txt").decode("ascii")
        self.assertEqual(sequence, f"\033]52;c;{payload}\a")

    def test_falls_back_to_osc52_when_commands_fail(self) -> None:
        stream = io.StringIO()
        with mock.patch.object(clipboard, "copy_with_command", return_value=False):
            self.assertTrue(clipboard.copy_text_to_clipboard("root", stream=stream))
        self.assertEqual(stream.getvalue(), clipboard.osc52_sequence("root"))

    def test_primary_success_skips_fallback(self) -> None:
        stream = io.StringIO()
        with mock.patch.object(clipboard, "copy_with_command", return_value=True):
            self.assertTrue(clipboard.copy_text_to_clipboard("root", stream=stream))
        self.assertEqual(stream.getvalue(), "")

    def test_fallback_failure_is_not_raised(self) -> None:
        stream = io.StringIO()
        stream.close()
        with mock.patch.object(clipboard, "copy_with_command", return_value=False):
            self.assertFalse(clipboard.copy_text_to_clipboard("root", stream=stream))

    def test_empty_text_is_ignored(self) -> None:
        with mock.patch.object(clipboard, "copy_with_command") as primary:
            self.assertFalse(clipboard.copy_text_to_clipboard(""))
        primary.assert_not_called()


class ClipboardAsyncTests(unittest.TestCase):
    def test_copy_text_async_runs_on_daemon_thread(self) -> None:
        with mock.patch.object(clipboard, "copy_text_to_clipboard", return_value=True) as copy:
            worker = clipboard.copy_text_async("root")
            worker.join(timeout=5)

        self.assertTrue(worker.daemon)
        copy.assert_called_once_with("root")


if __name__ == "__main__":
    unittest.main()
