"""Tests for reading and parsing documents from files and stdin."""

from __future__ import annotations

import io
import tempfile
import unittest
from pathlib import Path

from jsonnav.document import parse_document, read_document
from jsonnav.errors import DocumentLoadError


class ParseDocumentTests(unittest.TestCase):
    def test_parses_objects_in_document_order(self) -> None:
        value = parse_document('{"b": 1, "a": [true, null]}')
        self.assertEqual(list(value.keys()), ["b", "a"])
        self.assertEqual(value["a"], [True, None])

    def test_blank_input_is_rejected(self) -> None:
        for text in ("", "   \n\t"):
            with self.subTest(text=text):
                with self.assertRaisesRegex(DocumentLoadError, "no JSON input"):
                    parse_document(text)

    def test_malformed_json_reports_position(self) -> None:
        with self.assertRaises(DocumentLoadError) as ctx:
            parse_document('{"a": 1,\n "b": }')
        self.assertIn("line 2", str(ctx.exception))

    def test_non_standard_constants_are_rejected(self) -> None:
        for text in ("NaN", '{"x": Infinity}', "[-Infinity]"):
            with self.subTest(text=text):
                with self.assertRaises(DocumentLoadError):
                    parse_document(text)

    def test_out_of_range_numbers_are_rejected(self) -> None:
        for text in ('{"f": 1e400}', "[-1.5e999]"):
            with self.subTest(text=text):
                with self.assertRaisesRegex(DocumentLoadError, "out of range"):
                    parse_document(text)
        self.assertEqual(parse_document("[1e300]"), [1e300])

    def test_overlong_integer_literal_is_a_load_error(self) -> None:
        with self.assertRaisesRegex(DocumentLoadError, "cannot parse JSON"):
            parse_document('{"n": ' + "1" * 5000 + "}")


class ReadDocumentTests(unittest.TestCase):
    def test_reads_file_with_byte_order_mark(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "doc.json"
            path.write_bytes(b'\xef\xbb\xbf{"k": "v"}')
            self.assertEqual(read_document(path), {"k": "v"})

    def test_missing_file_is_a_load_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaisesRegex(DocumentLoadError, "cannot read JSON input"):
                read_document(Path(tmp) / "missing.json")

    def test_reads_stdin_when_path_is_none_or_dash(self) -> None:
        self.assertEqual(read_document(None, io.BytesIO(b"[1, 2]")), [1, 2])
        self.assertEqual(read_document(Path("-"), io.BytesIO(b'{"a": 1}')), {"a": 1})

    def test_missing_stdin_is_a_load_error(self) -> None:
        with self.assertRaises(DocumentLoadError):
            read_document(None, None)

    def test_latin1_bytes_still_decode(self) -> None:
        self.assertEqual(read_document(None, io.BytesIO(b'{"caf\xe9": 1}')), {"café": 1})


if __name__ == "__main__":
    unittest.main()
