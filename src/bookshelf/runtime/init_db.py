"""Database initialization script."""

from src.bookshelf.core.services.database.db_manage import DbManageService
from src.bookshelf.core.services.database.db_session import DbSessionService


def init_db(reset: bool = False) -> None:
    """Create all database tables, dropping existing ones first when ``reset``."""
    db_manage_service = DbManageService(DbSessionService().engine)
    if reset:
        db_manage_service.drop_all()
    db_manage_service.create_all()


if __name__ == "__main__":
    init_db()
