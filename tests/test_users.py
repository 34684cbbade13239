"""Tests for registration and login."""

from fastapi.testclient import TestClient
from pymongo.database import Database

from shop_server.core.security import verify_password

ALICE = {"username": "alice", "email": "alice@example.com", "password": "s3cret"}


def test_register_response_omits_password_hash_by_design(client: TestClient):
    response = client.post("/users", json=ALICE)

    assert response.status_code == 200
    body = response.json()
    assert body["username"] == "alice"
    assert body["email"] == "alice@example.com"
    assert "_id" in body
    assert "password_hash" not in body
    assert "password" not in body


def test_register_stores_hash_not_plaintext(client: TestClient, db: Database):
    client.post("/users", json=ALICE)

    stored = db["users"].find_one({"username": "alice"})
    assert "password" not in stored
    assert stored["password_hash"] != "s3cret"
    assert verify_password("s3cret", stored["password_hash"])


def test_register_existing_username_is_rejected(client: TestClient, db: Database):
    client.post("/users", json=ALICE)

    response = client.post("/users", json={**ALICE, "email": "other@example.com"})

    assert response.status_code == 409
    assert response.json()["detail"] == "user already exists"
    assert db["users"].count_documents({"username": "alice"}) == 1


def test_login_with_correct_password(client: TestClient):
    client.post("/users", json=ALICE)

    response = client.post("/getUser", json={"username": "alice", "password": "s3cret"})

    assert response.status_code == 200
    assert response.json()["username"] == "alice"


def test_login_with_wrong_password(client: TestClient):
    client.post("/users", json=ALICE)

    response = client.post("/getUser", json={"username": "alice", "password": "nope"})

    assert response.status_code == 401
    assert response.json()["detail"] == "invalid password"


def test_login_with_unknown_user(client: TestClient):
    response = client.post("/getUser", json={"username": "bob", "password": "s3cret"})

    assert response.status_code == 401
    assert response.json()["detail"] == "invalid user"


def test_register_and_login_with_form_body(client: TestClient):
    registered = client.post("/users", data={"username": "dana", "email": "d@example.com", "password": "pw"})
    logged_in = client.post("/getUser", data={"username": "dana", "password": "pw"})

    assert registered.status_code == 200
    assert registered.json()["username"] == "dana"
    assert logged_in.status_code == 200
    assert logged_in.json()["email"] == "d@example.com"
