"""Page slicing over in-memory sequences and SQL statements.

Both entry points share the same rules:

- ``page_number`` and ``page_size`` below 1 are clamped to 1.
- ``total_pages`` is ``ceil(total_count / page_size)``, 0 for an empty source.
- ``previous_page`` is set only when ``page_number > 1``; ``next_page`` only
  when ``page_number < total_pages``. Both are ``None`` for an empty source.
- A page past the end yields no items, the metadata stays accurate.
- Source order is preserved; no sorting is applied here.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import func
from sqlmodel import Session, select

from src.bookshelf.core.models.pagination import Pagination

T = TypeVar("T")
U = TypeVar("U")


class PageResult(BaseModel, Generic[T]):
    """A bounded slice of an ordered source plus its navigation metadata."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    items: list[T] = Field(default_factory=list)
    current_page: int
    total_pages: int
    previous_page: int | None = None
    next_page: int | None = None
    total_count: int
    page_size: int

    @property
    def pagination(self) -> Pagination:
        return Pagination(
            current_page=self.current_page,
            total_pages=self.total_pages,
            previous_page=self.previous_page,
            next_page=self.next_page,
            total_count=self.total_count,
            page_size=self.page_size,
        )

    def is_empty(self) -> bool:
        return not self.items

    def map(self, fn: Callable[[T], U]) -> PageResult[U]:
        """Convert every item, keeping the metadata."""
        return PageResult[Any](
            items=[fn(item) for item in self.items],
            **self.pagination.model_dump(),
        )


def clamp_page_args(page_number: int, page_size: int) -> tuple[int, int]:
    return max(1, int(page_number)), max(1, int(page_size))


def build_page(
    items: list[T], total_count: int, page_number: int, page_size: int
) -> PageResult[T]:
    """Assemble a page from an already-sliced item list."""
    total_pages = math.ceil(total_count / page_size) if total_count > 0 else 0
    previous_page = page_number - 1 if page_number > 1 and total_count > 0 else None
    next_page = page_number + 1 if page_number < total_pages else None
    return PageResult[Any](
        items=items,
        current_page=page_number,
        total_pages=total_pages,
        previous_page=previous_page,
        next_page=next_page,
        total_count=total_count,
        page_size=page_size,
    )


def paginate(source: Iterable[T], page_number: int = 1, page_size: int = 10) -> PageResult[T]:
    """Return one page of ``source``.

    The source is read once; generators are materialized so the total count
    can be computed.
    """
    page_number, page_size = clamp_page_args(page_number, page_size)
    items = list(source)
    start = (page_number - 1) * page_size
    return build_page(items[start : start + page_size], len(items), page_number, page_size)


def paginate_statement(
    session: Session, statement: Any, page_number: int = 1, page_size: int = 10
) -> PageResult[Any]:
    """Return one page of the rows selected by ``statement``.

    The statement should carry its own ``ORDER BY``; a count query over the
    same statement provides ``total_count``.
    """
    page_number, page_size = clamp_page_args(page_number, page_size)
    count_statement = select(func.count()).select_from(
        statement.order_by(None).subquery()
    )
    total_count = session.exec(count_statement).one()
    rows = list(
        session.exec(statement.offset((page_number - 1) * page_size).limit(page_size)).all()
    )
    return build_page(rows, total_count, page_number, page_size)
