"""Pydantic schemas for JSON media payloads (import and REST bodies)."""
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from exchange.field_map import TRUE_TOKEN
from exchange.record import MediaRecord, clean_text


class MediaItemPayload(BaseModel):
    """
    One media item as found in a JSON export.

    camelCase keys are canonical; the German keys of older exports
    (beschreibung, dauer, gesehen, stichwort) are accepted as well.
    Store-owned keys such as ``lastUpdatedAt`` are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[int] = Field(None, description="Store-assigned id, kept for merge imports")
    url: str = Field(..., description="Media URL (required)")
    description: Optional[str] = Field(
        None, validation_alias=AliasChoices("description", "beschreibung"),
    )
    channel: Optional[str] = Field(None, description="Channel / creator")
    duration: Optional[str] = Field(
        None, validation_alias=AliasChoices("duration", "dauer"),
        description="HH:MM:SS or MM:SS",
    )
    seen: bool = Field(False, validation_alias=AliasChoices("seen", "gesehen"))
    media_type: Optional[str] = Field(
        None, validation_alias=AliasChoices("mediaType", "media_type"),
    )
    keywords: Optional[str] = Field(
        None, validation_alias=AliasChoices("keywords", "stichwort"),
        description="Comma-separated tags",
    )

    @field_validator("url")
    @classmethod
    def _url_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("url is required")
        return value

    @field_validator("description", "channel", "duration", "media_type", "keywords")
    @classmethod
    def _trim_text(cls, value: Optional[str]) -> Optional[str]:
        return clean_text(value)

    @field_validator("seen", mode="before")
    @classmethod
    def _lenient_seen(cls, value: Any) -> Any:
        if value is None:
            return False
        if isinstance(value, str):
            return value.strip().lower() == TRUE_TOKEN
        return value

    def to_record(self) -> MediaRecord:
        return MediaRecord(
            id=self.id,
            url=self.url,
            description=self.description,
            channel=self.channel,
            duration=self.duration,
            seen=self.seen,
            media_type=self.media_type,
            keywords=self.keywords,
        )
