import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from glozzio.main import create_app
from glozzio.services.product_repository import ProductRepository
from glozzio.services.user_store import UserStore
from glozzio.utils.database import Database

TEST_DB = "glozzio_test"
TEST_SECRET = "test-secret"


@pytest.fixture(scope="function")
def mongo_client():
    """In-memory stand-in for the motor client, fresh for each test."""
    return AsyncMongoMockClient()


@pytest.fixture(scope="function")
async def database(mongo_client):
    db = Database("mongodb://localhost:27017", TEST_DB, client=mongo_client)
    await db.connect()
    try:
        yield db
    finally:
        await db.close()


@pytest.fixture(scope="function")
def user_store(database):
    return UserStore(database.users)


@pytest.fixture(scope="function")
def product_repository(database):
    return ProductRepository(database.products)


@pytest.fixture(scope="function")
def client(mongo_client):
    """TestClient running the full app (lifespan included) against the in-memory store."""
    app = create_app(Database("mongodb://localhost:27017", TEST_DB, client=mongo_client), token_secret=TEST_SECRET)
    with TestClient(app) as c:
        yield c
