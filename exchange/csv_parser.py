"""
exchange.csv_parser - Best-effort decoding of a whole CSV document.

Responsibilities:
  • BOM removal (UTF-8 / UTF-8-SIG)
  • Header line discarded unconditionally (not validated)
  • Blank lines skipped, malformed lines reported, never fatal
"""

from __future__ import annotations

import logging

from exchange.csv_codec import decode_line
from exchange.errors import RowParseError
from exchange.report import ParseResult

logger = logging.getLogger(__name__)


def parse_csv(raw: str | bytes) -> ParseResult:
    """
    Decode every data line of a CSV document.

    Line numbers in diagnostics are 1-based physical lines, the header
    being line 1.  Empty or header-only input yields an empty result.
    """
    result = ParseResult()
    text = decode_text(raw).replace("\r\n", "\n").replace("\r", "\n")
    lines = text.split("\n")

    for line_no, line in enumerate(lines[1:], start=2):   # line 1 = header
        if not line.strip():
            continue
        try:
            result.add(line_no, decode_line(line))
        except RowParseError as exc:
            logger.warning("CSV line %d skipped: %s", line_no, exc.reason)
            result.add_error(line_no, exc.reason)

    return result


def decode_text(raw: str | bytes) -> str:
    """UTF-8 text of a payload; "utf-8-sig" drops a leading BOM."""
    text = raw.decode("utf-8-sig", errors="replace") if isinstance(raw, bytes) else raw
    return text.removeprefix("\ufeff")
