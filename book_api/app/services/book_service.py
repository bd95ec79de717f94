"""
Service layer for books.

``BookService`` adds one rule on top of the repository: reading or
updating a book that does not exist raises ``ResourceNotFoundError``.
Deleting an unknown id is not an error; the call is forwarded to the
repository unconditionally.
"""

from __future__ import annotations

import logging
from typing import List

from book_api.app.core.exceptions import ResourceNotFoundError
from book_api.app.repositories.book_repository import BookRepository
from book_api.app.schemas.book import BookCreate, BookRead, BookUpdate

logger = logging.getLogger(__name__)


class BookService:
    """Business operations on books backed by a ``BookRepository``."""

    def __init__(self, repository: BookRepository) -> None:
        self.repository = repository

    def list_books(self) -> List[BookRead]:
        return self.repository.find_all()

    def get_book(self, book_id: int) -> BookRead:
        """Return the book with ``book_id``.

        Raises
        ------
        ResourceNotFoundError
            If no book has this id.
        """
        book = self.repository.find_by_id(book_id)
        if book is None:
            logger.info("Book %s not found", book_id)
            raise ResourceNotFoundError("Book", book_id)
        return book

    def create_book(self, data: BookCreate) -> BookRead:
        book = self.repository.insert(data)
        logger.info("Created book %s", book.id)
        return book

    def update_book(self, book_id: int, data: BookUpdate) -> BookRead:
        """Overwrite title, author and year of an existing book.

        The id of the stored record is kept.  Nothing is written when the
        book does not exist.

        Raises
        ------
        ResourceNotFoundError
            If no book has this id.
        """
        existing = self.get_book(book_id)
        updated = BookRead(
            id=existing.id,
            title=data.title,
            author=data.author,
            year=data.year,
        )
        saved = self.repository.save(updated)
        logger.info("Updated book %s", book_id)
        return saved

    def delete_book(self, book_id: int) -> None:
        self.repository.delete_by_id(book_id)
        logger.info("Delete requested for book %s", book_id)
