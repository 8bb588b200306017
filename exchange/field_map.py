"""
exchange.field_map - Column-name ↔ record-attribute mapping.

The CSV column order and header text are a wire-format contract shared
by import and export; do not reorder.
"""

# CSV header column  →  MediaRecord attribute
CSV_COLUMNS: list[tuple[str, str]] = [
    ("url",          "url"),
    ("beschreibung", "description"),
    ("channel",      "channel"),
    ("dauer",        "duration"),
    ("gesehen",      "seen"),
    ("mediaType",    "media_type"),
    ("stichwort",    "keywords"),
]

CSV_HEADER = ",".join(col for col, _ in CSV_COLUMNS)

TRUE_TOKEN = "true"
