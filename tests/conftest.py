"""
pytest configuration and fixtures for the person directory test suite
Every test gets its own SQLite file under tmp_path.
"""

import httpx
import pytest
import pytest_asyncio

from person_directory.app import create_app
from person_directory.database.connection import SQLiteDatabase
from person_directory.services.persons_service import PersonsService


@pytest.fixture
def database(tmp_path):
    """SQLite database backed by a fresh file"""
    return SQLiteDatabase(str(tmp_path / "persons.db"), timeout=5.0)


@pytest.fixture
def persons_service(database):
    """PersonsService with the persons table already created"""
    service = PersonsService(database)
    result = service.ensure_schema()
    assert result.success, f"Schema setup failed: {result.error}"
    return service


@pytest.fixture
def app(persons_service):
    return create_app(persons_service)


@pytest_asyncio.fixture
async def api_client(app):
    """In-process HTTP client for the FastAPI app"""
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture
def sample_person():
    return {"name": "A", "email": "a@x.com", "mobile": "123"}
