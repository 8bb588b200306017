"""
exchange.exporter - Render the whole store as CSV or JSON.
"""

from __future__ import annotations

import json
from datetime import date

from exchange.csv_codec import encode_line
from exchange.decoders import DataFormat
from exchange.field_map import CSV_HEADER


def export_csv(store) -> str:
    """
    Fixed header plus one line per record, in store order.
    Every line, including the last, ends with ``\\n``.
    """
    lines = [CSV_HEADER]
    lines.extend(encode_line(record) for record in store.get_all())
    return "\n".join(lines) + "\n"


def export_json(store) -> str:
    """JSON array with camelCase keys, re-importable by parse_json."""
    return json.dumps(
        [record.to_dict() for record in store.get_all()],
        ensure_ascii=False, indent=2,
    )


def export_filename(fmt: DataFormat, day: date | None = None) -> str:
    day = day or date.today()
    return f"mediaitems_{day.isoformat()}.{fmt.value}"
