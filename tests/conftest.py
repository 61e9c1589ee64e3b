import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from app.config import Settings
from app.database import Database
from app.main import create_app


# Create test database (SQLite in-memory for testing)
SQLALCHEMY_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def database():
    """Fresh in-memory database for each test."""
    db = Database(
        SQLALCHEMY_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    db.create_all()

    yield db

    db.drop_all()
    db.dispose()


@pytest.fixture(scope="function")
def app(database):
    return create_app(Settings(), database=database)


@pytest.fixture(scope="function")
def client(app):
    """Create test client served from the test database."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(database):
    """Create database session for direct database access in tests."""
    session = database.session()

    yield session

    session.close()
