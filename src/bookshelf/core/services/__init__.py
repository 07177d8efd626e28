"""Core services exports."""

from .database.db_session import DbSessionService
from .pagination import PageResult, build_page, paginate, paginate_statement

__all__ = [
    # Pagination
    "PageResult",
    "build_page",
    "paginate",
    "paginate_statement",
    # Database Service
    "DbSessionService",
]
