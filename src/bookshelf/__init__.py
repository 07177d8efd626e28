"""Bookshelf catalog API.

This package contains the catalog backend: book entities and persistence,
the catalog service with its cover image store, pagination helpers, and the
FastAPI application that exposes them.
"""

__version__ = "0.1.0"
