"""
db.models - SQLAlchemy ORM declarations.

Tables
------
media_item  - one row per media reference (URL + descriptive metadata).
              ``last_updated_at`` is owned by the persistence layer and
              refreshed on every insert/update.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, Boolean, DateTime
from sqlalchemy.orm import DeclarativeBase, validates

from exchange.record import MediaRecord

# ── Column limits ──────────────────────────────────────────────────────
URL_MAX_LEN         = 1000
DESCRIPTION_MAX_LEN = 1000
SHORT_TEXT_MAX_LEN  = 255


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class MediaItem(Base):
    __tablename__ = "media_item"

    # ── Primary key ────────────────────────────────────────────────────
    id = Column(Integer, primary_key=True, autoincrement=True)

    # ── Payload ────────────────────────────────────────────────────────
    url         = Column(String(URL_MAX_LEN), nullable=False)
    description = Column(String(DESCRIPTION_MAX_LEN))
    channel     = Column(String(SHORT_TEXT_MAX_LEN))
    duration    = Column(String(SHORT_TEXT_MAX_LEN))       # HH:MM:SS or MM:SS
    seen        = Column(Boolean, nullable=False, default=False)
    keywords    = Column(String(SHORT_TEXT_MAX_LEN))       # comma-separated tags
    media_type  = Column(String(SHORT_TEXT_MAX_LEN))       # VIDEO / AUDIO / TEXT …

    # ── Timestamps ─────────────────────────────────────────────────────
    last_updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow)

    # ── Constraints (SQLite ignores VARCHAR lengths) ──────────────────
    @validates("url")
    def _validate_url(self, key, value):
        if value is None or not str(value).strip():
            raise ValueError("url must not be empty")
        return _check_length(key, value, URL_MAX_LEN)

    @validates("description")
    def _validate_description(self, key, value):
        return _check_length(key, value, DESCRIPTION_MAX_LEN)

    @validates("channel", "duration", "keywords", "media_type")
    def _validate_short_text(self, key, value):
        return _check_length(key, value, SHORT_TEXT_MAX_LEN)

    @validates("seen")
    def _validate_seen(self, key, value):
        return bool(value)

    # ── Conversion ─────────────────────────────────────────────────────
    def apply(self, record: MediaRecord) -> None:
        """Copy payload fields from a record (never id / timestamp)."""
        self.url = record.url
        self.description = record.description
        self.channel = record.channel
        self.duration = record.duration
        self.seen = record.seen
        self.keywords = record.keywords
        self.media_type = record.media_type

    def to_record(self) -> MediaRecord:
        return MediaRecord(
            id=self.id,
            url=self.url,
            description=self.description,
            channel=self.channel,
            duration=self.duration,
            seen=bool(self.seen),
            media_type=self.media_type,
            keywords=self.keywords,
            last_updated_at=self.last_updated_at,
        )


def _check_length(key: str, value, limit: int):
    if value is not None and len(value) > limit:
        raise ValueError(f"{key} exceeds {limit} characters")
    return value
