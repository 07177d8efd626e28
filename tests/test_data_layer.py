"""Consolidated data layer tests.

This module covers:
- Book entity validation, equality and timestamp normalization
- Book table persistence and the unique title constraint
- Book repository operations against in-memory SQLite
- BookInput mapping onto new and existing entities
"""

from datetime import UTC, datetime, timedelta, timezone
from unittest.mock import patch

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlmodel import Session, select

from src.bookshelf.core.exceptions import DuplicateTitleConflict, PersistenceError
from src.bookshelf.entities.service.book import (
    Book,
    BookInput,
    BookRepository,
    BookTable,
)
from tests.fixtures.books import make_input


class TestBookEntity:
    """Test Book domain entity."""

    def test_book_creation_defaults(self):
        book = Book(title="Emma", description="A novel.", author="Jane Austen")

        assert book.id is None
        assert book.cover_path == ""
        assert not book.has_cover
        assert book.release_date is None
        assert book.update_date is None
        assert book.publish_date.tzinfo is not None

    @pytest.mark.parametrize(
        "overrides",
        [
            {"title": ""},
            {"title": "T" * 151},
            {"description": ""},
            {"description": "D" * 501},
            {"author": ""},
        ],
    )
    def test_book_field_constraints(self, overrides):
        fields = {"title": "Emma", "description": "A novel.", "author": "Jane Austen"}
        fields.update(overrides)

        with pytest.raises(ValidationError):
            Book(**fields)

    def test_book_boundary_lengths(self):
        book = Book(title="T" * 150, description="D" * 500, author="A")

        assert len(book.title) == 150
        assert len(book.description) == 500

    def test_naive_timestamps_are_tagged_utc(self):
        book = Book(
            title="Emma",
            description="A novel.",
            author="Jane Austen",
            publish_date=datetime(2024, 3, 1, 8, 0),
        )

        assert book.publish_date == datetime(2024, 3, 1, 8, 0, tzinfo=UTC)

    def test_aware_timestamps_are_converted_to_utc(self):
        book = Book(
            title="Emma",
            description="A novel.",
            author="Jane Austen",
            release_date=datetime(1815, 12, 23, 12, 0, tzinfo=timezone(timedelta(hours=3))),
        )

        assert book.release_date == datetime(1815, 12, 23, 9, 0, tzinfo=UTC)
        assert book.release_date.utcoffset() == timedelta(0)

    def test_null_cover_becomes_empty(self):
        book = Book(title="Emma", description="A novel.", author="Jane Austen", cover_path=None)

        assert book.cover_path == ""

    def test_book_equality(self):
        """Should compare books by their business attributes, ignoring timestamps."""
        book1 = Book(
            id=1,
            title="Emma",
            description="A novel.",
            author="Jane Austen",
            publish_date=datetime(2024, 1, 1, tzinfo=UTC),
        )
        book2 = Book(
            id=1,
            title="Emma",
            description="A novel.",
            author="Jane Austen",
            publish_date=datetime(2025, 1, 1, tzinfo=UTC),
        )
        book3 = Book(id=2, title="Emma", description="A novel.", author="Jane Austen")

        assert book1 == book2
        assert book1 != book3
        assert hash(book1) == hash(book2)

    def test_book_serializes_camel_case(self):
        book = Book(id=3, title="Emma", description="A novel.", author="Jane Austen")

        data = book.model_dump(mode="json", by_alias=True)

        assert set(data) == {
            "id",
            "title",
            "description",
            "author",
            "coverPath",
            "publishDate",
            "releaseDate",
            "updateDate",
        }


class TestBookInput:
    def test_to_entity_stamps_publish_date(self):
        before = datetime.now(UTC)

        book = make_input(publish_date=datetime(1999, 1, 1)).to_entity()

        assert book.id is None
        assert book.cover_path == ""
        assert book.publish_date >= before

    def test_apply_to_keeps_publish_date_when_absent(self, sample_book: Book):
        original = sample_book.publish_date

        make_input(title="Dune Messiah").apply_to(sample_book)

        assert sample_book.title == "Dune Messiah"
        assert sample_book.publish_date == original

    def test_apply_to_overwrites_release_date(self, sample_book: Book):
        sample_book.release_date = datetime(1965, 8, 1, tzinfo=UTC)

        make_input().apply_to(sample_book)

        assert sample_book.release_date is None

    def test_apply_to_never_touches_cover(self, sample_book: Book):
        sample_book.cover_path = "/images/books/keep.png"

        make_input().apply_to(sample_book)

        assert sample_book.cover_path == "/images/books/keep.png"

    def test_blank_title_rejected(self):
        with pytest.raises(ValidationError):
            BookInput(title="   ", description="x", author="y")

    def test_populated_from_camel_case(self):
        data = BookInput.model_validate(
            {
                "title": "Emma",
                "description": "A novel.",
                "author": "Jane Austen",
                "releaseDate": "1815-12-23T00:00:00Z",
            }
        )

        assert data.release_date == datetime(1815, 12, 23, tzinfo=UTC)


class TestBookTable:
    """Test the Book table model."""

    def test_book_table_creation(self, session: Session):
        row = BookTable(
            title="Emma",
            description="A novel.",
            author="Jane Austen",
            publish_date=datetime(2024, 1, 1, tzinfo=UTC),
        )
        session.add(row)
        session.commit()

        assert row.id == 1
        stored = session.exec(select(BookTable).where(BookTable.title == "Emma")).one()
        assert stored.author == "Jane Austen"
        assert stored.cover_path is None

    def test_unique_title_constraint(self, session: Session):
        session.add(BookTable(title="Emma", description="a", author="b", publish_date=datetime.now(UTC)))
        session.commit()

        session.add(BookTable(title="Emma", description="c", author="d", publish_date=datetime.now(UTC)))
        with pytest.raises(IntegrityError):
            session.commit()
        session.rollback()


class TestBookRepository:
    """Test BookRepository with an in-memory database."""

    def test_create_assigns_id(self, repository: BookRepository, sample_book: Book):
        created = repository.create(sample_book)
        repository.commit()

        assert created.id == 1
        assert repository.get(1) == created

    def test_get_nonexistent(self, repository: BookRepository):
        assert repository.get(999) is None

    def test_get_by_title_is_exact(self, repository: BookRepository, sample_book: Book):
        repository.create(sample_book)
        repository.commit()

        assert repository.get_by_title("Dune") is not None
        assert repository.get_by_title("dune") is None
        assert repository.get_by_title("Dune ") is None

    def test_round_trip_keeps_utc(self, repository: BookRepository, sample_book: Book):
        sample_book.release_date = datetime(1965, 8, 1, 6, 0, tzinfo=UTC)
        repository.create(sample_book)
        repository.commit()

        loaded = repository.get(sample_book.id)

        assert loaded.publish_date == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)
        assert loaded.release_date == datetime(1965, 8, 1, 6, 0, tzinfo=UTC)
        assert loaded.publish_date.tzinfo is not None

    def test_update_copies_fields(self, repository: BookRepository, sample_book: Book):
        repository.create(sample_book)
        repository.commit()

        sample_book.title = "Dune Messiah"
        sample_book.cover_path = "/images/books/a.png"
        repository.update(sample_book)
        repository.commit()

        loaded = repository.get(sample_book.id)
        assert loaded.title == "Dune Messiah"
        assert loaded.cover_path == "/images/books/a.png"

    def test_update_missing_row(self, repository: BookRepository, sample_book: Book):
        sample_book.id = 42

        with pytest.raises(ValueError):
            repository.update(sample_book)

    def test_delete(self, repository: BookRepository, sample_book: Book):
        repository.create(sample_book)
        repository.commit()

        repository.delete(sample_book)
        repository.commit()

        assert repository.get(sample_book.id) is None

    def test_uncommitted_changes_are_rolled_back(self, repository: BookRepository, sample_book: Book):
        repository.create(sample_book)
        repository.rollback()

        assert repository.get_by_title("Dune") is None

    def test_list_page_orders_by_id(self, repository: BookRepository, seed_books):
        seed_books(7)

        page = repository.list_page(2, 3)

        assert [book.title for book in page.items] == ["Book 4", "Book 5", "Book 6"]
        assert all(isinstance(book, Book) for book in page.items)
        assert page.total_count == 7
        assert page.total_pages == 3

    def test_duplicate_title_on_create(self, repository: BookRepository, sample_book: Book):
        repository.create(sample_book)
        repository.commit()

        duplicate = Book(title="Dune", description="Other", author="Someone")
        with pytest.raises(DuplicateTitleConflict):
            repository.create(duplicate)

        assert repository.list_page(1, 10).total_count == 1

    def test_duplicate_title_on_commit(self, repository: BookRepository):
        repository.create(Book(title="Dune", description="a", author="b"))
        other = repository.create(Book(title="Emma", description="c", author="d"))
        repository.commit()

        other.title = "Dune"
        repository.update(other)
        with pytest.raises(DuplicateTitleConflict):
            repository.commit()

        assert repository.get(other.id).title == "Emma"

    def test_other_commit_failures(self, repository: BookRepository, session: Session, sample_book: Book):
        repository.create(sample_book)
        error = OperationalError("COMMIT", {}, Exception("database is locked"))

        with patch.object(session, "commit", side_effect=error):
            with pytest.raises(PersistenceError) as exc_info:
                repository.commit()

        assert not isinstance(exc_info.value, DuplicateTitleConflict)
