"""
exchange.importer - Top-level orchestrator.

Coordinates decoding → store upserts and produces a structured
ImportReport.  Two policies:

  merge    - upsert every decoded record, never delete (path imports)
  replace  - delete everything first, then load (upload / restore)

Replace is NOT atomic: the wipe is committed before the payload is
decoded.  If decoding then fails outright the store stays empty and
ReplaceInconsistency is raised.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

import config
from exchange.decoders import DataFormat, decode
from exchange.errors import (
    PersistenceError, ReplaceInconsistency, RowParseError, SourceNotFoundError,
)
from exchange.record import MediaRecord
from exchange.report import ImportReport, ParseResult

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    def get_all(self) -> list[MediaRecord]: ...
    def upsert(self, record: MediaRecord) -> MediaRecord: ...
    def delete_all(self) -> int: ...


class ImportCoordinator:
    """Stateless between calls; all counters live in the returned report."""

    def __init__(self, store: RecordStore, resource_root: Optional[Path] = None):
        self.store = store
        self.resource_root = Path(resource_root or config.IMPORT_DIR)

    # ── Policies ───────────────────────────────────────────────────────

    def import_path(
        self,
        path: str,
        fmt: Optional[DataFormat] = None,
    ) -> ImportReport:
        """
        Merge-import a file below the resource root.

        Raises SourceNotFoundError for a missing file, RowParseError when
        a JSON file cannot be decoded.
        """
        source = self._resolve(path)
        fmt = fmt or DataFormat.from_path(source)
        logger.info("Starting %s import: %s", fmt.value.upper(), path)

        parsed = decode(fmt, source.read_bytes())
        report = self.apply(parsed)

        logger.info("Import finished: %d/%d persisted",
                    report.persisted, report.decoded)
        return report

    def replace(
        self,
        raw: str | bytes,
        fmt: DataFormat = DataFormat.CSV,
    ) -> ImportReport:
        """Wipe the store, then load ``raw``."""
        deleted = self.store.delete_all()
        logger.info("Replace import: %d existing items deleted", deleted)

        try:
            parsed = decode(fmt, raw)
        except RowParseError as exc:
            logger.error("Replace import failed after wipe, store is empty: %s", exc)
            raise ReplaceInconsistency(str(exc), deleted=deleted) from exc

        report = self.apply(parsed)
        report.deleted = deleted
        logger.info("Replace import finished: %d/%d persisted",
                    report.persisted, report.decoded)
        return report

    def apply(self, parsed: ParseResult) -> ImportReport:
        """Upsert every decoded record, tolerating per-record failures."""
        report = ImportReport(decoded=len(parsed.rows))
        report.diagnostics.extend(parsed.diagnostics)

        for line, record in parsed.rows:
            try:
                self.store.upsert(record)
                report.persisted += 1
            except PersistenceError as exc:
                logger.warning("Could not store %s: %s", record.url, exc)
                report.add_diagnostic(line, f"persistence failed: {exc}")

        return report

    # ── Private helpers ────────────────────────────────────────────────

    def _resolve(self, path: str) -> Path:
        root = self.resource_root.resolve()
        source = (root / path).resolve()
        if not source.is_relative_to(root) or not source.is_file():
            raise SourceNotFoundError(f"import source not found: {path}")
        return source
