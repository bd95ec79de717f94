import logging
from unittest.mock import MagicMock

import pytest

from book_api.app.core.exceptions import ResourceNotFoundError
from book_api.app.repositories.book_repository import BookRepository
from book_api.app.schemas.book import BookCreate, BookRead, BookUpdate
from book_api.app.services.book_service import BookService


@pytest.fixture
def mock_repository():
    return MagicMock(spec=BookRepository)


@pytest.fixture
def mocked_service(mock_repository):
    return BookService(mock_repository)


class TestBookServiceWithMockedRepository:
    def test_create_book(self, mocked_service, mock_repository):
        book = BookCreate(title="Kifo Kisimani", author="Kithaka Mberia", year=1925)
        saved = BookRead(id=1, title="Kifo Kisimani", author="Kithaka Mberia", year=1925)
        mock_repository.insert.return_value = saved

        assert mocked_service.create_book(book) == saved
        mock_repository.insert.assert_called_once_with(book)

    def test_list_books(self, mocked_service, mock_repository):
        books = [
            BookRead(id=1, title="Kotlin Programming", author="John Doe", year=1925),
            BookRead(id=2, title="Spring Boot Essentials", author="Jane Doe", year=1925),
        ]
        mock_repository.find_all.return_value = books

        assert mocked_service.list_books() == books
        mock_repository.find_all.assert_called_once_with()

    def test_get_book(self, mocked_service, mock_repository):
        book = BookRead(id=1, title="Kotlin Programming", author="John Doe", year=1925)
        mock_repository.find_by_id.return_value = book

        assert mocked_service.get_book(1) == book
        mock_repository.find_by_id.assert_called_once_with(1)

    def test_get_book_not_found(self, mocked_service, mock_repository):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundError, match="Book not found with id 1") as exc_info:
            mocked_service.get_book(1)
        assert exc_info.value.resource_id == 1

    def test_update_existing_book(self, mocked_service, mock_repository):
        existing = BookRead(id=1, title="Kotlin Programming 1", author="John Doe", year=1925)
        updated = BookRead(id=1, title="Kotlin Programming 2", author="New Author", year=1925)
        mock_repository.find_by_id.return_value = existing
        mock_repository.save.return_value = updated

        result = mocked_service.update_book(
            1, BookUpdate(title="Kotlin Programming 2", author="New Author", year=1925)
        )

        assert result == updated
        mock_repository.find_by_id.assert_called_once_with(1)
        mock_repository.save.assert_called_once_with(updated)

    def test_update_missing_book(self, mocked_service, mock_repository):
        mock_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundError):
            mocked_service.update_book(1, BookUpdate(title="Kotlin Programming 2"))
        mock_repository.save.assert_not_called()

    def test_delete_book(self, mocked_service, mock_repository):
        mocked_service.delete_book(1)

        mock_repository.delete_by_id.assert_called_once_with(1)


class TestBookServiceWithDatabase:
    def test_created_books_are_listed_and_retrievable(self, service):
        first = service.create_book(BookCreate(title="B1", author="A1", year=2001))
        second = service.create_book(BookCreate(title="B2", author="A2", year=2002))

        assert service.list_books() == [first, second]
        assert service.get_book(first.id) == first
        assert service.get_book(second.id) == second

    def test_update_keeps_id(self, service):
        stored = service.create_book(BookCreate(title="Kotlin Programming", author="John Doe", year=1925))

        result = service.update_book(
            stored.id, BookUpdate(title="Spring Boot Updated", author="John Doe", year=2025)
        )

        assert result == BookRead(id=stored.id, title="Spring Boot Updated", author="John Doe", year=2025)
        assert service.get_book(stored.id) == result

    def test_update_overwrites_with_nulls(self, service):
        stored = service.create_book(BookCreate(title="Title", author="Author", year=2000))

        result = service.update_book(stored.id, BookUpdate(title="Only Title"))

        assert result.title == "Only Title"
        assert result.author is None
        assert result.year is None

    def test_update_missing_book_leaves_store_unchanged(self, service, repository):
        with pytest.raises(ResourceNotFoundError):
            service.update_book(999, BookUpdate(title="X", author="Y", year=1))

        assert repository.find_all() == []

    def test_deleted_book_is_not_found(self, service):
        stored = service.create_book(BookCreate(title="Gone", author="Soon", year=2020))

        service.delete_book(stored.id)

        with pytest.raises(ResourceNotFoundError):
            service.get_book(stored.id)
        # Deleting an absent id does not fail
        service.delete_book(stored.id)

    def test_delete_of_absent_book_is_logged_as_request(self, service, caplog):
        with caplog.at_level(logging.INFO):
            service.delete_book(999)

        assert "Delete requested for book 999" in caplog.text
        assert "Deleted book" not in caplog.text
