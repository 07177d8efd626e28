"""Input shapes accepted by the catalog service."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import Field, field_validator

from src.bookshelf.core.models.base import CamelModel
from src.bookshelf.entities.core._base import ensure_utc, utc_now
from src.bookshelf.entities.service.book.entity import Book


@dataclass(frozen=True)
class ImageUpload:
    """A cover image received from a client."""

    filename: str
    content: bytes
    content_type: str | None = None


class BookInput(CamelModel):
    """Fields a client may set when creating or updating a book.

    ``cover_path`` is deliberately absent: it is only ever assigned from the
    asset store.
    """

    title: str = Field(min_length=1, max_length=150)
    description: str = Field(min_length=1, max_length=500)
    author: str = Field(min_length=1)
    release_date: datetime | None = None
    publish_date: datetime | None = Field(
        default=None, description="Only honoured on update; creation stamps the current time"
    )

    @field_validator("title", "author")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_entity(self) -> Book:
        """Build a new, not yet persisted book stamped with the current time."""
        return Book(
            title=self.title,
            description=self.description,
            author=self.author,
            release_date=ensure_utc(self.release_date),
            publish_date=utc_now(),
        )

    def apply_to(self, book: Book) -> Book:
        """Copy the input fields onto an existing book in place."""
        book.title = self.title
        book.description = self.description
        book.author = self.author
        book.release_date = ensure_utc(self.release_date)
        if self.publish_date is not None:
            book.publish_date = ensure_utc(self.publish_date)
        return book
