"""
exchange.record - Transient media record passed through the pipeline.

Parsers build these, the store consumes and returns them.  ``id`` and
``last_updated_at`` are owned by the store; the pipeline only carries
them through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class MediaRecord:
    url: str
    description: Optional[str] = None
    channel: Optional[str] = None
    duration: Optional[str] = None
    seen: bool = False
    media_type: Optional[str] = None
    keywords: Optional[str] = None
    id: Optional[int] = None
    last_updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Wire representation (camelCase keys)."""
        return {
            "id": self.id,
            "url": self.url,
            "description": self.description,
            "channel": self.channel,
            "duration": self.duration,
            "seen": self.seen,
            "mediaType": self.media_type,
            "keywords": self.keywords,
            "lastUpdatedAt": (self.last_updated_at.isoformat()
                              if self.last_updated_at else None),
        }


def clean_text(value: Optional[str]) -> Optional[str]:
    """Trimmed text, or None when nothing is left."""
    if value is None:
        return None
    value = value.strip()
    return value or None
