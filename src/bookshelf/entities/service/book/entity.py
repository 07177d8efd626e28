"""Entity: Book."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from src.bookshelf.entities.core._base import Entity, ensure_utc, utc_now


class Book(Entity):
    """A catalog entry.

    Timestamps are always held in UTC; naive values coming back from
    databases without time zone support are tagged as UTC on load.
    """

    title: str = Field(min_length=1, max_length=150, description="Unique title")
    description: str = Field(min_length=1, max_length=500)
    author: str = Field(min_length=1)
    cover_path: str = Field(
        default="", description="Public path of the cover image, empty without cover"
    )
    publish_date: datetime = Field(default_factory=utc_now)
    release_date: datetime | None = None
    update_date: datetime | None = None

    @field_validator("publish_date", "release_date", "update_date")
    @classmethod
    def _normalize_timestamps(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value)

    @field_validator("cover_path", mode="before")
    @classmethod
    def _empty_cover(cls, value: Any) -> Any:
        return value or ""

    @property
    def has_cover(self) -> bool:
        return bool(self.cover_path)

    def __eq__(self, other: Any) -> bool:
        """Compare books by business attributes, ignoring timestamps."""
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.description == other.description
            and self.author == other.author
            and self.cover_path == other.cover_path
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title))
