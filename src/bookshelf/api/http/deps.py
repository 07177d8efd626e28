"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.bookshelf.api.http.app_data import ApplicationDependencies
from src.bookshelf.core.services.book_service import BookService
from src.bookshelf.core.storage import AssetStore
from src.bookshelf.entities.service.book import BookRepository


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that lives for one request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_asset_store(request: Request) -> AssetStore:
    """Get the cover image store."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.asset_store


def get_book_repository(session: Session = Depends(get_db_session)) -> BookRepository:
    return BookRepository(session)


def get_book_service(
    repository: BookRepository = Depends(get_book_repository),
    asset_store: AssetStore = Depends(get_asset_store),
) -> BookService:
    """Build the catalog service for the current request."""
    return BookService(repository, asset_store)
