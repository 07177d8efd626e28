"""Book database table model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint
from sqlmodel import Field

from src.bookshelf.entities.core._base import EntityTable

TITLE_UNIQUE_CONSTRAINT = "uq_book_title"


class BookTable(EntityTable, table=True):
    """Database persistence model for books.

    The unique constraint on ``title`` backs the service-level duplicate check
    when two writers race. ``sqlite_autoincrement`` keeps SQLite from handing
    out the id of a deleted row again.
    """

    __tablename__ = "book"
    __table_args__ = (
        UniqueConstraint("title", name=TITLE_UNIQUE_CONSTRAINT),
        {"sqlite_autoincrement": True},
    )

    title: str = Field(sa_column=Column(String(150), nullable=False))
    description: str = Field(sa_column=Column(String(500), nullable=False))
    author: str = Field(sa_column=Column(Text, nullable=False))
    cover_path: str | None = Field(
        default=None, sa_column=Column(String(512), nullable=True)
    )
    publish_date: datetime = Field(
        sa_column=Column(DateTime(timezone=True), nullable=False)
    )
    release_date: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    update_date: datetime | None = Field(
        default=None, sa_column=Column(DateTime(timezone=True), nullable=True)
    )
