"""
Startup seeding of sample books.

``load_initial_books`` is called from the application lifespan when
``Settings.seed_data`` is enabled.  The two sample books are only
inserted into an empty store, so restarting against a persistent
database file does not add further copies.
"""

import logging
from typing import List

from book_api.app.repositories.book_repository import BookRepository
from book_api.app.schemas.book import BookCreate, BookRead

logger = logging.getLogger(__name__)

INITIAL_BOOKS = (
    BookCreate(title="Kifo Kisimani", author="Kithaka Mberia", year=1925),
    BookCreate(title="The River Between", author="Ngugi wa Thingo", year=1960),
)


def load_initial_books(repository: BookRepository) -> List[BookRead]:
    """Insert the sample books into an empty store.

    Returns the stored records, or an empty list when the store already
    held books and nothing was inserted.
    """
    existing = repository.count()
    if existing:
        logger.info("Skipping initial data, %s books already stored.", existing)
        return []
    stored = [repository.insert(book) for book in INITIAL_BOOKS]
    logger.info("Initial data loaded into the database.")
    return stored
