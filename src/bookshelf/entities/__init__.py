"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
- schemas.py: Input shapes accepted from clients
"""

from .service.book import Book, BookInput, BookRepository, BookTable, ImageUpload

__all__ = [
    "Book",
    "BookInput",
    "BookRepository",
    "BookTable",
    "ImageUpload",
]
