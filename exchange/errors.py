"""
exchange.errors - Failure taxonomy of the data-exchange pipeline.

Row-level errors (RowParseError in CSV mode, PersistenceError) are
collected into the ImportReport.  Everything else is call-level and
propagates to the caller.
"""

from __future__ import annotations

from typing import Optional


class ExchangeError(Exception):
    """Base class for all import/export failures."""


class RowParseError(ExchangeError):
    """A CSV line or JSON document is structurally invalid."""

    def __init__(self, reason: str, line: Optional[int] = None):
        self.reason = reason
        self.line = line
        super().__init__(reason if line is None else f"line {line}: {reason}")


class PersistenceError(ExchangeError):
    """The store rejected a record (constraint violation, DB error)."""


class NotFoundError(ExchangeError):
    """No record with the requested id."""


class SourceNotFoundError(ExchangeError):
    """The named import resource does not exist."""


class UnsupportedFormatError(ExchangeError):
    """Payload format is neither CSV nor JSON."""


class ReplaceInconsistency(ExchangeError):
    """
    Replace import wiped the store but the new payload could not be
    decoded.  The store is left empty; a retry or restore is required.
    """

    def __init__(self, reason: str, deleted: int = 0):
        self.reason = reason
        self.deleted = deleted
        super().__init__(
            f"{reason} - store was emptied ({deleted} records deleted) "
            f"and is now empty, re-upload or restore required"
        )
