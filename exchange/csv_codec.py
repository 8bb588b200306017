"""
exchange.csv_codec - One MediaRecord ↔ one CSV line.

Field order: url, description, channel, duration, seen, mediaType, keywords.
Embedded newlines are encoded (quoted) but cannot be decoded, since the
document parser is line-oriented.
"""

from __future__ import annotations

import csv
import io
import re

from exchange.errors import RowParseError
from exchange.field_map import CSV_COLUMNS, TRUE_TOKEN
from exchange.record import MediaRecord, clean_text

# Comma followed by an even number of quotes up to end of line,
# i.e. a comma that is not inside a quoted field.
_SPLIT_RE = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')

_ATTRS = [attr for _, attr in CSV_COLUMNS]

# \r\n as terminator makes QUOTE_MINIMAL quote both \r and \n
_TERMINATOR = "\r\n"


# ── Encoding ──────────────────────────────────────────────────────────

def encode_line(record: MediaRecord) -> str:
    """Render a record as one CSV line (no line terminator)."""
    cells = []
    for attr in _ATTRS:
        value = getattr(record, attr)
        if attr == "seen":
            cells.append("true" if value else "false")
        else:
            cells.append("" if value is None else str(value))

    buf = io.StringIO()
    csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator=_TERMINATOR).writerow(cells)
    return buf.getvalue()[:-len(_TERMINATOR)]


# ── Decoding ──────────────────────────────────────────────────────────

def split_line(line: str) -> list[str]:
    """
    Split on top-level commas, unquote and trim every field.
    Raises RowParseError on unbalanced quotes.
    """
    if line.count('"') % 2:
        raise RowParseError("malformed quoting (unbalanced '\"')")
    return [_unquote(part.strip()).strip() for part in _SPLIT_RE.split(line)]


def decode_line(line: str) -> MediaRecord:
    """Parse one CSV line into a MediaRecord or raise RowParseError."""
    cells = split_line(line.rstrip("\r\n"))

    if not cells or not cells[0]:
        raise RowParseError("url is required")

    values: dict = {}
    for attr, cell in zip(_ATTRS, cells):
        if attr == "seen":
            values[attr] = parse_bool(cell)
        else:
            values[attr] = clean_text(cell)
    return MediaRecord(**values)


def parse_bool(cell: str) -> bool:
    """Lenient: only the literal true token (any case) is True."""
    return cell.strip().lower() == TRUE_TOKEN


def _unquote(cell: str) -> str:
    if len(cell) >= 2 and cell[0] == '"' and cell[-1] == '"':
        return cell[1:-1].replace('""', '"')
    return cell
