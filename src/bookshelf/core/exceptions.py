"""Exceptions raised by the catalog core."""

from http import HTTPStatus


class CatalogError(Exception):
    """Base class for every error raised by the catalog core."""


class BookRequestError(CatalogError):
    """An expected business condition that is reported back to the caller.

    The service turns these into a response envelope carrying ``status_code``;
    they never reach the transport layer.
    """

    status_code: HTTPStatus = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidBookIdError(BookRequestError):
    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, book_id: int | None) -> None:
        super().__init__(
            "Invalid book identifier. The book ID must be a valid positive number."
        )
        self.book_id = book_id


class DuplicateTitleError(BookRequestError):
    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, title: str, message: str | None = None) -> None:
        super().__init__(message or f"A book with the title '{title}' already exists.")
        self.title = title


class BookNotFoundError(BookRequestError):
    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, book_id: int) -> None:
        super().__init__("Book not found.")
        self.book_id = book_id


class StorageWriteError(CatalogError):
    """Writing or removing a cover image failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class PersistenceError(CatalogError):
    """Flushing or committing pending changes failed; the session was rolled back."""


class DuplicateTitleConflict(PersistenceError):
    """The database refused a row because its title is already taken."""
