"""
exchange.decoders - Single decode entry point, dispatching on format.

CSV decoding is best-effort (per-line diagnostics), JSON decoding is
all-or-nothing (raises RowParseError).
"""

from __future__ import annotations

import enum
from pathlib import PurePath

from exchange.csv_parser import parse_csv
from exchange.errors import UnsupportedFormatError
from exchange.json_parser import parse_json
from exchange.report import ParseResult


class DataFormat(str, enum.Enum):
    CSV = "csv"
    JSON = "json"

    @classmethod
    def from_value(cls, value: str) -> "DataFormat":
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnsupportedFormatError(f"unsupported format: {value!r}") from None

    @classmethod
    def from_path(cls, path: str | PurePath) -> "DataFormat":
        suffix = PurePath(path).suffix.lstrip(".")
        if not suffix:
            raise UnsupportedFormatError(f"cannot infer format of {str(path)!r}")
        return cls.from_value(suffix)

    @property
    def mimetype(self) -> str:
        return "text/csv" if self is DataFormat.CSV else "application/json"


_PARSERS = {
    DataFormat.CSV:  parse_csv,
    DataFormat.JSON: parse_json,
}


def decode(fmt: DataFormat, raw: str | bytes) -> ParseResult:
    return _PARSERS[fmt](raw)
