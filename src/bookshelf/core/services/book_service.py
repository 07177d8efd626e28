"""Catalog business rules for books and their cover images."""

from collections.abc import Callable
from http import HTTPStatus

from loguru import logger

from src.bookshelf.core.exceptions import (
    BookNotFoundError,
    BookRequestError,
    DuplicateTitleConflict,
    DuplicateTitleError,
    InvalidBookIdError,
    StorageWriteError,
)
from src.bookshelf.core.models.responses import ServiceResponse
from src.bookshelf.core.storage.asset_store import AssetStore
from src.bookshelf.entities.core._base import ensure_utc, utc_now
from src.bookshelf.entities.service.book.entity import Book
from src.bookshelf.entities.service.book.repository import BookRepository
from src.bookshelf.entities.service.book.schemas import BookInput, ImageUpload


class BookService:
    """Coordinates the book repository and the cover image store.

    Expected business outcomes (invalid id, missing book, duplicate title) are
    returned as ``ServiceResponse`` envelopes. Storage and persistence
    failures propagate.

    Cover files follow the database: a new file is written before the commit
    and discarded if the commit fails, a replaced or removed file is deleted
    only once the commit succeeded.
    """

    def __init__(self, repository: BookRepository, asset_store: AssetStore):
        self._repository = repository
        self._assets = asset_store

    def _find(self, book_id: int) -> Book:
        book = self._repository.get(book_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    def _save_image(self, image: ImageUpload | None) -> str | None:
        if image is None:
            return None
        return self._assets.save(image.content, image.filename)

    def _discard_image(self, relative_path: str | None) -> None:
        """Best-effort removal of a cover that is no longer referenced."""
        if not relative_path:
            return
        try:
            self._assets.delete_if_exists(relative_path)
        except StorageWriteError as exc:
            logger.warning("Could not remove cover image {}: {}", relative_path, exc)

    def _commit(self, new_image: str | None, title: str, message: str | None = None) -> None:
        """Commit staged changes, discarding ``new_image`` when they are refused."""
        try:
            self._repository.commit()
        except DuplicateTitleConflict as exc:
            self._discard_image(new_image)
            raise DuplicateTitleError(title, message) from exc
        except Exception:
            self._discard_image(new_image)
            raise

    def _respond(self, operation: str, action: Callable[[], ServiceResponse]) -> ServiceResponse:
        try:
            return action()
        except BookRequestError as exc:
            logger.info(
                "{} refused ({}): {}", operation, int(exc.status_code), exc.message
            )
            return ServiceResponse.create(None, exc.status_code, exc.message)

    def list_books(self, page_number: int = 1, page_size: int = 10) -> ServiceResponse[list[Book]]:
        page = self._repository.list_page(page_number, page_size)
        if page.is_empty():
            logger.info("No books on page {} (size {})", page.current_page, page.page_size)
            return ServiceResponse.create(
                [], HTTPStatus.NOT_FOUND, "No books were found.", page.pagination
            )
        return ServiceResponse.create(
            page.items, HTTPStatus.OK, "Books retrieved successfully.", page.pagination
        )

    def get_book(self, book_id: int | None) -> ServiceResponse[Book]:
        def action() -> ServiceResponse:
            if book_id is None or book_id <= 0:
                raise InvalidBookIdError(book_id)
            book = self._find(book_id)
            return ServiceResponse.create(book, HTTPStatus.OK, "Book retrieved successfully.")

        return self._respond("Get book", action)

    def create_book(self, data: BookInput, image: ImageUpload | None = None) -> ServiceResponse[Book]:
        def action() -> ServiceResponse:
            if self._repository.get_by_title(data.title) is not None:
                raise DuplicateTitleError(data.title)

            book = data.to_entity()
            new_image = self._save_image(image)
            if new_image:
                book.cover_path = new_image

            try:
                self._repository.create(book)
            except DuplicateTitleConflict as exc:
                self._discard_image(new_image)
                raise DuplicateTitleError(data.title) from exc
            except Exception:
                self._discard_image(new_image)
                raise
            self._commit(new_image, data.title)

            logger.info("Created book {} '{}'", book.id, book.title)
            return ServiceResponse.create(book, HTTPStatus.CREATED, "Book created successfully.")

        return self._respond("Create book", action)

    def update_book(
        self, book_id: int, data: BookInput, image: ImageUpload | None = None
    ) -> ServiceResponse[Book]:
        def action() -> ServiceResponse:
            book = self._find(book_id)
            duplicate_message = (
                "Cannot update the book. "
                f"Another book with the title '{data.title}' already exists."
            )
            holder = self._repository.get_by_title(data.title)
            if holder is not None and holder.id != book.id:
                raise DuplicateTitleError(data.title, duplicate_message)

            data.apply_to(book)
            book.publish_date = ensure_utc(book.publish_date)
            book.release_date = ensure_utc(book.release_date)
            book.update_date = utc_now()

            old_image = book.cover_path
            new_image = self._save_image(image)
            if new_image:
                book.cover_path = new_image

            try:
                self._repository.update(book)
            except Exception:
                self._discard_image(new_image)
                raise
            self._commit(new_image, data.title, duplicate_message)

            if new_image and old_image != new_image:
                self._discard_image(old_image)

            logger.info("Updated book {}", book.id)
            return ServiceResponse.create(book, HTTPStatus.OK, "Book updated successfully.")

        return self._respond("Update book", action)

    def delete_image(self, book_id: int) -> ServiceResponse[Book]:
        def action() -> ServiceResponse:
            book = self._find(book_id)
            old_image = book.cover_path
            if old_image:
                book.cover_path = ""
                self._repository.update(book)
                self._repository.commit()
                self._discard_image(old_image)
                logger.info("Removed cover of book {}", book.id)
            return ServiceResponse.create(
                book, HTTPStatus.OK, "Book image deleted successfully."
            )

        return self._respond("Delete book image", action)

    def delete_book(self, book_id: int) -> ServiceResponse[None]:
        def action() -> ServiceResponse:
            book = self._find(book_id)
            self._repository.delete(book)
            self._repository.commit()
            self._discard_image(book.cover_path)
            logger.info("Deleted book {}", book_id)
            return ServiceResponse.create(None, HTTPStatus.OK, "Book deleted successfully.")

        return self._respond("Delete book", action)
