import pytest
from fastapi.testclient import TestClient

from book_api.app.core.config import Settings
from book_api.app.core.db import init_db
from book_api.app.main import create_app
from book_api.app.repositories.book_repository import BookRepository
from book_api.app.services.book_service import BookService


@pytest.fixture
def database_url(tmp_path, request):
    # Unique database file per test
    db_file = str(tmp_path / f"test_{request.node.name}.db")
    init_db(db_file)
    return db_file


@pytest.fixture
def repository(database_url):
    return BookRepository(database_url)


@pytest.fixture
def service(repository):
    return BookService(repository)


@pytest.fixture
def test_settings(database_url):
    return Settings(database_url=database_url, seed_data=False)


@pytest.fixture
def client(test_settings):
    app = create_app(test_settings)
    # Entering the client runs the lifespan (migrations, seeding)
    with TestClient(app) as test_client:
        yield test_client
