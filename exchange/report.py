"""
exchange.report - Structured results of decoding and importing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from exchange.record import MediaRecord


@dataclass
class LineDiagnostic:
    line: Optional[int]          # 1-based source line, None when not line-based
    reason: str

    def to_dict(self) -> dict:
        return {"line": self.line, "reason": self.reason}


@dataclass
class ParseResult:
    """Decoded records (with their source line) plus per-line failures."""
    rows: list[tuple[Optional[int], MediaRecord]] = field(default_factory=list)
    diagnostics: list[LineDiagnostic] = field(default_factory=list)

    @property
    def records(self) -> list[MediaRecord]:
        return [record for _, record in self.rows]

    def add(self, line: Optional[int], record: MediaRecord):
        self.rows.append((line, record))

    def add_error(self, line: Optional[int], reason: str):
        self.diagnostics.append(LineDiagnostic(line, reason))


@dataclass
class ImportReport:
    decoded: int = 0
    persisted: int = 0
    deleted: int = 0             # rows wiped up front by a replace import
    diagnostics: list[LineDiagnostic] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.diagnostics)

    def add_diagnostic(self, line: Optional[int], reason: str):
        self.diagnostics.append(LineDiagnostic(line, reason))

    def to_dict(self) -> dict:
        return {
            "decoded": self.decoded,
            "persisted": self.persisted,
            "deleted": self.deleted,
            "failed": self.failed,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
