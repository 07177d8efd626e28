"""Response envelope returned by the catalog service."""

from http import HTTPStatus
from typing import Generic, TypeVar

from pydantic import Field

from .base import CamelModel
from .pagination import Pagination

T = TypeVar("T")


class ServiceResponse(CamelModel, Generic[T]):
    """Outcome of a service operation.

    ``status_code`` classifies the outcome with an HTTP status so the
    transport can relay it unchanged.
    """

    status_code: int = Field(description="HTTP status classification")
    message: str = ""
    details: T | None = None
    pagination: Pagination | None = None

    @classmethod
    def create(
        cls,
        details: T | None,
        status_code: HTTPStatus,
        message: str = "",
        pagination: Pagination | None = None,
    ) -> "ServiceResponse[T]":
        return cls(
            status_code=int(status_code),
            message=message,
            details=details,
            pagination=pagination,
        )

    def to_payload(self) -> dict:
        """JSON-ready body with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
