"""Book data-access layer."""

from loguru import logger
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from src.bookshelf.core.exceptions import DuplicateTitleConflict, PersistenceError
from src.bookshelf.core.services.pagination import PageResult, paginate_statement
from src.bookshelf.entities.service.book.entity import Book
from src.bookshelf.entities.service.book.table import (
    TITLE_UNIQUE_CONSTRAINT,
    BookTable,
)


def _is_title_conflict(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return TITLE_UNIQUE_CONSTRAINT in message or "book.title" in message


class BookRepository:
    """Data-access layer for books.

    Changes are staged on the session and only become durable on ``commit``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def _to_entity(row: BookTable) -> Book:
        return Book.model_validate(row.model_dump())

    @staticmethod
    def _to_row(book: Book, row: BookTable) -> BookTable:
        row.title = book.title
        row.description = book.description
        row.author = book.author
        row.cover_path = book.cover_path or None
        row.publish_date = book.publish_date
        row.release_date = book.release_date
        row.update_date = book.update_date
        return row

    def _translate(self, exc: SQLAlchemyError, action: str) -> PersistenceError:
        self._session.rollback()
        if isinstance(exc, IntegrityError) and _is_title_conflict(exc):
            logger.warning("Unique title constraint rejected {}", action)
            return DuplicateTitleConflict(f"Title already taken ({action})")
        logger.error(
            "Database {} failed",
            action,
            error_type=type(exc).__name__,
            error_message=str(exc),
        )
        return PersistenceError(f"Database {action} failed: {exc}")

    def get(self, book_id: int) -> Book | None:
        row = self._session.get(BookTable, book_id)
        if row is None:
            return None
        return self._to_entity(row)

    def get_by_title(self, title: str) -> Book | None:
        statement = select(BookTable).where(BookTable.title == title)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def list_page(self, page_number: int, page_size: int) -> PageResult[Book]:
        statement = select(BookTable).order_by(BookTable.id)
        page = paginate_statement(self._session, statement, page_number, page_size)
        return page.map(self._to_entity)

    def create(self, book: Book) -> Book:
        """Stage a new book and assign its id."""
        row = self._to_row(book, BookTable())
        self._session.add(row)
        try:
            self._session.flush()
        except SQLAlchemyError as exc:
            raise self._translate(exc, "insert") from exc
        book.id = row.id
        return book

    def update(self, book: Book) -> Book:
        row = self._session.get(BookTable, book.id)
        if row is None:
            raise ValueError(f"Book with id {book.id} not found")
        self._session.add(self._to_row(book, row))
        return book

    def delete(self, book: Book) -> None:
        row = self._session.get(BookTable, book.id)
        if row is None:
            raise ValueError(f"Book with id {book.id} not found")
        self._session.delete(row)

    def commit(self) -> None:
        """Flush every staged change as one transaction."""
        try:
            self._session.commit()
        except SQLAlchemyError as exc:
            raise self._translate(exc, "commit") from exc

    def rollback(self) -> None:
        self._session.rollback()
