"""
Book endpoints for API v1.

These routes expose CRUD operations for books under ``/api/v1/books``.
Handlers are plain functions; FastAPI runs them in its thread pool, one
request per worker.  ``ResourceNotFoundError`` raised by the service is
turned into HTTP 404, every other error propagates.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from book_api.app.api.deps import get_book_service
from book_api.app.core.exceptions import ResourceNotFoundError
from book_api.app.schemas.book import BookCreate, BookRead, BookUpdate
from book_api.app.services.book_service import BookService

router = APIRouter()


@router.post(
    "",
    response_model=BookRead,
    summary="Add a new book",
    description="Add a new book to the collection",
)
def create_book(
    book: BookCreate,
    service: BookService = Depends(get_book_service),
) -> BookRead:
    return service.create_book(book)


@router.get(
    "",
    response_model=List[BookRead],
    summary="Get all books",
    description="Retrieve a list of all books",
)
def list_books(service: BookService = Depends(get_book_service)) -> List[BookRead]:
    return service.list_books()


@router.get(
    "/{book_id}",
    response_model=BookRead,
    summary="Get book by ID",
    description="Retrieve a book by its ID",
)
def get_book(
    book_id: int = Path(..., description="ID of the book to be retrieved"),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    try:
        return service.get_book(book_id)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.put(
    "/{book_id}",
    response_model=BookRead,
    summary="Update a book",
    description="Update details of an existing book",
)
def update_book(
    book: BookUpdate,
    book_id: int = Path(..., description="ID of the book to be updated"),
    service: BookService = Depends(get_book_service),
) -> BookRead:
    try:
        return service.update_book(book_id, book)
    except ResourceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_200_OK,
    response_class=Response,
    summary="Delete a book",
    description="Remove a book from the collection",
)
def delete_book(
    book_id: int = Path(..., description="ID of the book to be deleted"),
    service: BookService = Depends(get_book_service),
) -> Response:
    # Unknown ids are not an error here; the response is the same.
    service.delete_book(book_id)
    return Response(status_code=status.HTTP_200_OK)
