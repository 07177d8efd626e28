"""Schema management for the catalog database."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine

from src.bookshelf.runtime.context import get_config


class DbManageService:
    def __init__(self, engine: Engine | None = None):
        if engine is None:
            engine = create_engine(get_config().database.connection_string, echo=False)
        self._engine = engine

    def _register_tables(self) -> None:
        from src.bookshelf.entities.service.book.table import BookTable  # noqa: F401

    def create_all(self) -> None:
        """Create all missing database tables."""
        self._register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop every catalog table. Stored cover files are left untouched."""
        self._register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Dropped all catalog tables.")
