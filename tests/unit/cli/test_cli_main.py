"""CLI argument handling and load-failure exit behavior."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from jsonnav import cli
from jsonnav.document import KeyOrder


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name)
        patcher = mock.patch("jsonnav.runtime.config.CONFIG_PATH", self.root / "missing-config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _write(self, name: str, text: str) -> Path:
        target = self.root / name
        target.write_text(text, encoding="utf-8")
        return target

    def test_explicit_path_is_read_and_browsed(self) -> None:
        target = self._write("doc.json", json.dumps({"a": [1, 2]}))
        with mock.patch("jsonnav.cli.run_browser") as run_browser:
            cli.main([str(target), "--sort-keys", "--dots", "--no-color", "--nopager"])

        run_browser.assert_called_once()
        document, settings = run_browser.call_args.args
        self.assertEqual(document, {"a": [1, 2]})
        self.assertIs(settings.key_order, KeyOrder.SORTED)
        self.assertEqual(settings.page_indicator, "dots")
        self.assertTrue(settings.no_color)
        self.assertEqual(run_browser.call_args.kwargs, {"stdin_consumed": False, "nopager": True})

    def test_missing_path_reads_stdin(self) -> None:
        fake_stdin = mock.Mock()
        fake_stdin.buffer = io.BytesIO(b'["x"]')
        with mock.patch("jsonnav.cli.sys.stdin", fake_stdin), mock.patch("jsonnav.cli.run_browser") as run_browser:
            cli.main([])

        self.assertEqual(run_browser.call_args.args[0], ["x"])
        self.assertTrue(run_browser.call_args.kwargs["stdin_consumed"])

    def test_invalid_json_exits_with_status_one(self) -> None:
        target = self._write("bad.json", '{"a": ')
        stderr = io.StringIO()
        with mock.patch("jsonnav.cli.sys.stderr", stderr), mock.patch("jsonnav.cli.run_browser") as run_browser:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(target)])

        self.assertEqual(ctx.exception.code, 1)
        self.assertTrue(stderr.getvalue().startswith("jsonnav: "))
        run_browser.assert_not_called()

    def test_scalar_document_exits_with_status_one(self) -> None:
        target = self._write("scalar.json", "42")
        stderr = io.StringIO()
        with mock.patch("jsonnav.cli.sys.stderr", stderr):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(target)])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("nothing to browse", stderr.getvalue())

    def test_log_file_receives_debug_records(self) -> None:
        target = self._write("doc.json", json.dumps({"a": 1}))
        log_path = self.root / "jsonnav.log"
        package_logger = cli.logging.getLogger("jsonnav")
        handlers_before = list(package_logger.handlers)
        level_before = package_logger.level
        try:
            with mock.patch("jsonnav.cli.run_browser"):
                cli.main([str(target), "--log-file", str(log_path)])
        finally:
            for handler in package_logger.handlers[len(handlers_before):]:
                handler.close()
                package_logger.removeHandler(handler)
            package_logger.setLevel(level_before)

        self.assertIn("jsonnav.document.loader", log_path.read_text(encoding="utf-8"))

    def test_unwritable_log_file_exits_with_status_one(self) -> None:
        target = self._write("doc.json", json.dumps({"a": 1}))
        log_path = self.root / "no-such-dir" / "jsonnav.log"
        stderr = io.StringIO()
        with mock.patch("jsonnav.cli.sys.stderr", stderr), mock.patch("jsonnav.cli.run_browser") as run_browser:
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(target), "--log-file", str(log_path)])

        self.assertEqual(ctx.exception.code, 1)
        self.assertTrue(stderr.getvalue().startswith("jsonnav: cannot open log file"))
        run_browser.assert_not_called()

    def test_repeated_logging_setup_does_not_stack_handlers(self) -> None:
        log_path = self.root / "jsonnav.log"
        package_logger = cli.logging.getLogger("jsonnav")
        handlers_before = list(package_logger.handlers)
        level_before = package_logger.level
        package_logger.handlers = []
        try:
            cli.configure_logging(None)
            cli.configure_logging(None)
            self.assertEqual(len(package_logger.handlers), 1)
            cli.configure_logging(str(log_path))
            cli.configure_logging(str(log_path))
            file_handlers = [h for h in package_logger.handlers if isinstance(h, cli.logging.FileHandler)]
            self.assertEqual(len(file_handlers), 1)
        finally:
            for handler in package_logger.handlers:
                handler.close()
            package_logger.handlers = handlers_before
            package_logger.setLevel(level_before)


if __name__ == "__main__":
    unittest.main()
