"""
SQLite repository for books.

``BookRepository`` is the only component that touches the ``books``
table.  It is constructed with the database URL and opens a fresh
connection per operation, so each operation is atomic on its own and
the repository can be shared across worker threads.  Id assignment is
left to SQLite (``INTEGER PRIMARY KEY AUTOINCREMENT``).

All queries use parameterized statements.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import List, Optional, Union

from book_api.app.core.db import get_cursor
from book_api.app.schemas.book import BookCreate, BookRead, BookUpdate

logger = logging.getLogger(__name__)

# Range of an SQLite INTEGER; no stored row can have an id outside it.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1


def _storable_id(book_id: int) -> bool:
    return SQLITE_MIN_INTEGER <= book_id <= SQLITE_MAX_INTEGER


class BookRepository:
    """Keyed storage for book records."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url

    def insert(self, book: Union[BookCreate, BookUpdate]) -> BookRead:
        """Store a new book and return it with the id assigned by SQLite."""
        with get_cursor(self.database_url) as cursor:
            cursor.execute(
                "INSERT INTO books (title, author, year) VALUES (?, ?, ?)",
                (book.title, book.author, book.year),
            )
            book_id = cursor.lastrowid
            row = cursor.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
        logger.debug("Inserted book %s", book_id)
        return self._row_to_book_read(row)

    def find_all(self) -> List[BookRead]:
        """Return every stored book in insertion order."""
        with get_cursor(self.database_url) as cursor:
            rows = cursor.execute("SELECT * FROM books ORDER BY id ASC").fetchall()
        return [self._row_to_book_read(row) for row in rows]

    def find_by_id(self, book_id: int) -> Optional[BookRead]:
        """Return the book with ``book_id`` or ``None``."""
        if not _storable_id(book_id):
            return None
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute("SELECT * FROM books WHERE id = ?", (book_id,)).fetchone()
        if not row:
            return None
        return self._row_to_book_read(row)

    def save(self, book: BookRead) -> BookRead:
        """Insert or overwrite the record with ``book.id``."""
        with get_cursor(self.database_url) as cursor:
            cursor.execute(
                "INSERT INTO books (id, title, author, year) VALUES (?, ?, ?, ?)"
                " ON CONFLICT(id) DO UPDATE SET title = excluded.title,"
                " author = excluded.author, year = excluded.year",
                (book.id, book.title, book.author, book.year),
            )
            row = cursor.execute("SELECT * FROM books WHERE id = ?", (book.id,)).fetchone()
        logger.debug("Saved book %s", book.id)
        return self._row_to_book_read(row)

    def delete_by_id(self, book_id: int) -> None:
        """Remove the book with ``book_id``; absent ids are ignored."""
        if not _storable_id(book_id):
            return
        with get_cursor(self.database_url) as cursor:
            cursor.execute("DELETE FROM books WHERE id = ?", (book_id,))
            affected = cursor.rowcount
        if affected:
            logger.debug("Deleted book %s", book_id)

    def delete_all(self) -> None:
        """Remove every book.  Ids already handed out are not reused."""
        with get_cursor(self.database_url) as cursor:
            cursor.execute("DELETE FROM books")

    def count(self) -> int:
        with get_cursor(self.database_url) as cursor:
            row = cursor.execute("SELECT COUNT(*) AS total FROM books").fetchone()
        return row["total"]

    @staticmethod
    def _row_to_book_read(row: sqlite3.Row) -> BookRead:
        """Convert a database row to a BookRead schema instance."""
        return BookRead(
            id=row["id"],
            title=row["title"],
            author=row["author"],
            year=row["year"],
        )
