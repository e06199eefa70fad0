"""Tests for browser bootstrap: pager fallback and keyboard selection."""

from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from jsonnav.document import KeyOrder
from jsonnav.errors import DocumentLoadError
from jsonnav.runtime import app
from jsonnav.runtime.config import BrowserSettings


class _FakeStdout(io.StringIO):
    def fileno(self) -> int:
        return 1


class RunBrowserTests(unittest.TestCase):
    def _run_piped(self, document, **kwargs) -> str:
        stdout = _FakeStdout()
        with mock.patch("jsonnav.runtime.app.sys.stdout", stdout), mock.patch(
            "jsonnav.runtime.app.os.isatty", return_value=False
        ), mock.patch(
            "jsonnav.runtime.app.shutil.get_terminal_size", return_value=os.terminal_size((80, 24))
        ), mock.patch("jsonnav.runtime.app.run_main_loop") as loop_mock:
            app.run_browser(document, BrowserSettings(**kwargs), stdin_consumed=True)
        loop_mock.assert_not_called()
        return stdout.getvalue()

    def test_piped_stdout_prints_first_frame_without_color(self) -> None:
        output = self._run_piped({"b": 1, "a": None})
        self.assertNotIn("\033", output)
        self.assertEqual(output.splitlines()[:5], ["You are here: ", "", "→ b: 1", "a: ", "1/1"])

    def test_sorted_key_order_is_applied(self) -> None:
        output = self._run_piped({"b": 1, "a": None}, key_order=KeyOrder.SORTED)
        self.assertEqual(output.splitlines()[2:4], ["→ a: ", "b: 1"])

    def test_scalar_document_is_rejected(self) -> None:
        with self.assertRaises(DocumentLoadError):
            app.run_browser(42, BrowserSettings(), stdin_consumed=True)

    def test_interactive_session_runs_main_loop(self) -> None:
        with mock.patch("jsonnav.runtime.app.os.isatty", return_value=True), mock.patch(
            "jsonnav.runtime.app.sys.stdout", _FakeStdout()
        ), mock.patch("jsonnav.runtime.app.keyboard_fd") as keyboard_mock, mock.patch(
            "jsonnav.runtime.app.TerminalController"
        ) as terminal_cls, mock.patch("jsonnav.runtime.app.run_main_loop") as loop_mock:
            keyboard_mock.return_value.__enter__.return_value = 7
            app.run_browser({"a": 1}, BrowserSettings(), stdin_consumed=True)

        keyboard_mock.assert_called_once_with(True)
        terminal_cls.assert_called_once_with(7, 1)
        loop_mock.assert_called_once()
        self.assertEqual(loop_mock.call_args.args[3], 7)

    def test_missing_keyboard_falls_back_to_first_frame(self) -> None:
        with mock.patch("jsonnav.runtime.app.os.isatty", return_value=True), mock.patch(
            "jsonnav.runtime.app.sys.stdout", _FakeStdout()
        ), mock.patch("jsonnav.runtime.app.keyboard_fd") as keyboard_mock, mock.patch(
            "jsonnav.runtime.app.print_first_frame"
        ) as print_mock, mock.patch("jsonnav.runtime.app.run_main_loop") as loop_mock:
            keyboard_mock.return_value.__enter__.return_value = None
            app.run_browser({"a": 1}, BrowserSettings(), stdin_consumed=True)

        print_mock.assert_called_once()
        loop_mock.assert_not_called()


class KeyboardFdTests(unittest.TestCase):
    def test_unconsumed_tty_stdin_is_used_directly(self) -> None:
        with mock.patch("jsonnav.runtime.app.sys.stdin") as stdin_mock, mock.patch(
            "jsonnav.runtime.app.os.isatty", return_value=True
        ), mock.patch("jsonnav.runtime.app.os.open") as open_mock:
            stdin_mock.fileno.return_value = 0
            with app.keyboard_fd(stdin_consumed=False) as fd:
                self.assertEqual(fd, 0)
        open_mock.assert_not_called()

    def test_consumed_stdin_opens_controlling_terminal(self) -> None:
        with mock.patch("jsonnav.runtime.app.os.open", return_value=9) as open_mock, mock.patch(
            "jsonnav.runtime.app.os.close"
        ) as close_mock:
            with app.keyboard_fd(stdin_consumed=True) as fd:
                self.assertEqual(fd, 9)
        open_mock.assert_called_once_with(app.TTY_PATH, os.O_RDONLY)
        close_mock.assert_called_once_with(9)

    def test_no_controlling_terminal_yields_none(self) -> None:
        with mock.patch("jsonnav.runtime.app.os.open", side_effect=OSError("no tty")):
            with app.keyboard_fd(stdin_consumed=True) as fd:
                self.assertIsNone(fd)


if __name__ == "__main__":
    unittest.main()
