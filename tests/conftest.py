"""Shared fixtures for the test suite.

API tests run the real app lifespan against an in-memory SQLite database, so
every ``client`` fixture starts from an empty schema.
"""

import os

os.environ.setdefault("FT_JWT_SECRET", "test-jwt-secret-for-testing-only-0123456789")
os.environ.setdefault("FT_BCRYPT_ROUNDS", "4")
os.environ.setdefault("FT_LOG_JSON", "false")
os.environ["FT_DB_PATH"] = ":memory:"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.database import close_database, connect_database  # noqa: E402
from app.main import app  # noqa: E402
from app.users.repository import UserRepository  # noqa: E402
from tests.helpers import register_and_login  # noqa: E402


@pytest_asyncio.fixture
async def db():
    """Fresh in-memory database with the full schema."""
    connection = await connect_database(":memory:")
    yield connection
    await close_database(connection)


@pytest_asyncio.fixture
async def user_id(db) -> int:
    return await UserRepository(db).create("Alice Example", "alice@example.com", "not-a-hash")


@pytest_asyncio.fixture
async def other_user_id(db) -> int:
    return await UserRepository(db).create("Bob Example", "bob@example.com", "not-a-hash")


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client) -> dict:
    return register_and_login(client, "alice@example.com")


@pytest.fixture
def other_auth_headers(client) -> dict:
    return register_and_login(client, "bob@example.com")
