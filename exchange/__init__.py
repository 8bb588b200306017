"""
exchange - Bulk CSV/JSON import and export pipeline.

Public API:
    ImportCoordinator(store).import_path(path)   → ImportReport  (merge)
    ImportCoordinator(store).replace(raw, fmt)   → ImportReport  (replace)
    decode(fmt, raw)                             → ParseResult
    export_csv(store) / export_json(store)       → str
"""

from exchange.decoders import DataFormat, decode               # noqa: F401
from exchange.exporter import export_csv, export_json          # noqa: F401
from exchange.importer import ImportCoordinator                # noqa: F401
from exchange.record import MediaRecord                        # noqa: F401
from exchange.report import ImportReport, ParseResult          # noqa: F401
