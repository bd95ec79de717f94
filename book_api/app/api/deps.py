"""FastAPI dependencies shared by the endpoint modules."""

from fastapi import Request

from book_api.app.services.book_service import BookService


def get_book_service(request: Request) -> BookService:
    """Return the ``BookService`` built by ``create_app``."""
    return request.app.state.book_service
