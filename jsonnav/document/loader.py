"""Reading and parsing the document to browse.

Decoding is tolerant: UTF-8 with an optional BOM, falling back to latin-1.
All failures surface as ``DocumentLoadError`` so the CLI has a single fatal
error to report.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import IO

from ..errors import DocumentLoadError
from .values import JsonValue

logger = logging.getLogger(__name__)

STDIN_PATH_TOKEN = "-"


def _reject_constant(token: str) -> JsonValue:
    raise DocumentLoadError(f"invalid JSON constant {token!r}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise DocumentLoadError(f"number out of range: {token}")
    return value


def decode_bytes(raw: bytes) -> str:
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        return raw.decode("latin-1")


def parse_document(text: str) -> JsonValue:
    """Parse JSON text into plain Python values.

    ``NaN``/``Infinity`` are refused since they are not JSON, and so are
    numbers too large for a double or too long to convert.
    """
    if not text.strip():
        raise DocumentLoadError("no JSON input")
    try:
        return json.loads(text, parse_constant=_reject_constant, parse_float=_parse_finite_float)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"cannot parse JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    except ValueError as exc:
        raise DocumentLoadError(f"cannot parse JSON: {exc}") from exc
    except RecursionError as exc:
        raise DocumentLoadError("cannot parse JSON: document is nested too deeply") from exc


def read_document(path: Path | None, stdin: IO[bytes] | None = None) -> JsonValue:
    """Read and parse the document from ``path`` or from ``stdin``.

    ``None`` or ``-`` selects stdin, which is read to end of stream.
    """
    if path is None or str(path) == STDIN_PATH_TOKEN:
        if stdin is None:
            raise DocumentLoadError("no input stream available")
        try:
            raw = stdin.read()
        except OSError as exc:
            raise DocumentLoadError(f"cannot read JSON input: {exc}") from exc
        source = "<stdin>"
    else:
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(f"cannot read JSON input: {exc.strerror or exc}: {path}") from exc
        source = str(path)

    if isinstance(raw, str):
        text = raw
    else:
        text = decode_bytes(raw)
    logger.debug("read %d characters from %s", len(text), source)
    return parse_document(text)


__all__ = ["STDIN_PATH_TOKEN", "decode_bytes", "parse_document", "read_document"]
