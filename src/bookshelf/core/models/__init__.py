"""Transport-neutral models shared by the catalog service and the API."""

from .base import CamelModel
from .pagination import Pagination
from .responses import ServiceResponse

__all__ = ["CamelModel", "Pagination", "ServiceResponse"]
