"""Entity package: Book."""

from .entity import Book
from .repository import BookRepository
from .schemas import BookInput, ImageUpload
from .table import BookTable

__all__ = ["Book", "BookInput", "BookRepository", "BookTable", "ImageUpload"]
