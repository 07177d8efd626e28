from datetime import UTC, datetime

from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

from src.bookshelf.core.models.base import CamelModel


def utc_now() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime | None) -> datetime | None:
    """Normalize a timestamp to UTC.

    Naive values are taken to already be UTC; aware values are converted.
    """
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class Entity(CamelModel):
    """Base entity class with a database-assigned integer identifier."""

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the database on first flush",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an auto-incrementing integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Identifier assigned by the database on first flush",
    )
