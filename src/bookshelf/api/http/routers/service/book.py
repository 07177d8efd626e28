"""Book API router with CRUD operations.

Every endpoint relays the service envelope unchanged: its ``statusCode``
becomes the HTTP status of the response.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.responses import JSONResponse

from src.bookshelf.api.http.deps import get_book_service
from src.bookshelf.core.models import ServiceResponse
from src.bookshelf.core.services.book_service import BookService
from src.bookshelf.entities.service.book import BookInput, ImageUpload
from src.bookshelf.runtime.context import get_config

pagination_config = get_config().pagination

router = APIRouter(prefix="/api/books", tags=["books"])


def _relay(response: ServiceResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status_code, content=response.to_payload())


def _book_input(**fields) -> BookInput:
    try:
        return BookInput(**fields)
    except ValidationError as exc:
        raise RequestValidationError(
            exc.errors(include_url=False, include_context=False)
        ) from exc


def _image_upload(image: UploadFile | None) -> ImageUpload | None:
    # Browsers send an empty part when no file was picked
    if image is None or not image.filename:
        return None
    return ImageUpload(
        filename=image.filename,
        content=image.file.read(),
        content_type=image.content_type,
    )


@router.get("", response_class=JSONResponse)
def list_books(
    page_number: int = Query(1, ge=1, alias="pageNumber", description="1-based page index"),
    page_size: int = Query(
        pagination_config.default_page_size,
        ge=1,
        le=pagination_config.max_page_size,
        alias="pageSize",
    ),
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """List books ordered by id, one page at a time."""
    return _relay(service.list_books(page_number, page_size))


@router.get("/{book_id}", response_class=JSONResponse)
def get_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    return _relay(service.get_book(book_id))


@router.post("", response_class=JSONResponse)
def create_book(
    title: str = Form(..., min_length=1, max_length=150),
    description: str = Form(..., min_length=1, max_length=500),
    author: str = Form(..., min_length=1),
    release_date: datetime | None = Form(None),
    image: UploadFile | None = File(None),
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """Create a book, optionally with a cover image."""
    data = _book_input(
        title=title, description=description, author=author, release_date=release_date
    )
    return _relay(service.create_book(data, _image_upload(image)))


@router.put("/{book_id}", response_class=JSONResponse)
def update_book(
    book_id: int,
    title: str = Form(..., min_length=1, max_length=150),
    description: str = Form(..., min_length=1, max_length=500),
    author: str = Form(..., min_length=1),
    release_date: datetime | None = Form(None),
    publish_date: datetime | None = Form(None),
    image: UploadFile | None = File(None),
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    """Replace the fields of a book; a supplied image replaces its cover."""
    data = _book_input(
        title=title,
        description=description,
        author=author,
        release_date=release_date,
        publish_date=publish_date,
    )
    return _relay(service.update_book(book_id, data, _image_upload(image)))


@router.delete("/{book_id}/image", response_class=JSONResponse)
def delete_book_image(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    return _relay(service.delete_image(book_id))


@router.delete("/{book_id}", response_class=JSONResponse)
def delete_book(
    book_id: int,
    service: BookService = Depends(get_book_service),
) -> JSONResponse:
    return _relay(service.delete_book(book_id))
