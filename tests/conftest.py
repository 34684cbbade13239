"""Fixtures shared by the API and store tests."""

from collections.abc import Generator

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.database import Database

from shop_server.database import get_db, init_db
from shop_server.main import app


@pytest.fixture
def db() -> Database:
    """
    In-memory database with the same indexes as production.
    """
    database = mongomock.MongoClient()["shop_test"]
    init_db(database)
    return database


@pytest.fixture
def client(db: Database) -> Generator[TestClient, None, None]:
    """
    Test client whose requests use the in-memory database.
    """
    app.dependency_overrides[get_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def product(client: TestClient) -> dict:
    response = client.post("/product", json={"name": "Lamp", "price": 19.5, "userId": "owner-1"})
    assert response.status_code == 200
    return response.json()
