"""
services.media_store - Durable record store backed by SQLAlchemy.

Session lifetime is the caller's responsibility (open before, close
after).  Each mutation, however, is its own transaction: it commits on
success and rolls back on failure, so one rejected record never poisons
the session for the records that follow in a bulk import.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db.models import MediaItem
from exchange.errors import NotFoundError, PersistenceError
from exchange.record import MediaRecord

logger = logging.getLogger(__name__)


class MediaStore:

    def __init__(self, session: Session):
        self.session = session

    # ── Read ───────────────────────────────────────────────────────────

    def get_all(self) -> list[MediaRecord]:
        items = self.session.scalars(select(MediaItem).order_by(MediaItem.id))
        return [item.to_record() for item in items]

    def get_by_id(self, item_id: int) -> MediaRecord:
        return self._get(item_id).to_record()

    def count(self) -> int:
        return self.session.scalar(select(func.count()).select_from(MediaItem)) or 0

    # ── Write ──────────────────────────────────────────────────────────

    def upsert(self, record: MediaRecord) -> MediaRecord:
        """
        Insert or update one record and refresh its timestamp.

        A record whose id is unknown to the store is inserted under a
        newly assigned id.  Raises PersistenceError if the row is rejected.
        """
        try:
            item = None
            if record.id is not None:
                item = self.session.get(MediaItem, record.id)
            if item is None:
                item = MediaItem()
                self.session.add(item)
            item.apply(record)
            item.last_updated_at = datetime.now(timezone.utc)
            self.session.commit()
        except (ValueError, SQLAlchemyError) as exc:
            self.session.rollback()
            raise PersistenceError(str(exc)) from exc
        return item.to_record()

    def delete_by_id(self, item_id: int) -> None:
        item = self._get(item_id)
        try:
            self.session.delete(item)
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(str(exc)) from exc

    def delete_all(self) -> int:
        """Remove every record; returns the number deleted."""
        try:
            deleted = self.session.execute(delete(MediaItem)).rowcount
            self.session.commit()
            self.session.expunge_all()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(str(exc)) from exc
        logger.info("Deleted all %d media items", deleted)
        return deleted

    # ── Private helpers ────────────────────────────────────────────────

    def _get(self, item_id: int) -> MediaItem:
        item = self.session.get(MediaItem, item_id)
        if item is None:
            raise NotFoundError(f"media item not found: {item_id}")
        return item
