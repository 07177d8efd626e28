from pydantic import Field

from .base import CamelModel


class Pagination(CamelModel):
    """Navigation metadata attached to a page of results."""

    current_page: int = Field(description="1-based number of the returned page")
    total_pages: int = Field(description="Number of pages, 0 for an empty source")
    previous_page: int | None = Field(default=None)
    next_page: int | None = Field(default=None)
    total_count: int = Field(description="Number of items in the whole source")
    page_size: int = Field(description="Maximum number of items per page")
