"""Store-level tests for persistence failures and conditional writes."""

from unittest.mock import MagicMock

from pymongo.database import Database
from pymongo.errors import PyMongoError

from shop_server.core import product_store, user_store
from shop_server.core.results import Failure, FailureKind, Ok
from shop_server.models.product import OwnerClaim, ProductFields
from shop_server.models.user import LoginRequest, RegisterRequest


def failing_db(method: str) -> MagicMock:
    """
    Database stub whose collections raise on the given method.
    """
    db = MagicMock()
    getattr(db.__getitem__.return_value, method).side_effect = PyMongoError("connection refused")
    return db


def test_create_product_reports_persistence_error():
    result = product_store.create_product(failing_db("insert_one"), ProductFields(name="x"))

    assert result == Failure(FailureKind.PERSISTENCE, "connection refused")


def test_list_products_reports_persistence_error():
    result = product_store.list_products(failing_db("find"))

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.PERSISTENCE


def test_register_reports_persistence_error():
    req = RegisterRequest(username="carol", password="pw")

    result = user_store.register_user(failing_db("insert_one"), req)

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.PERSISTENCE


def test_login_reports_persistence_error():
    req = LoginRequest(username="carol", password="pw")

    result = user_store.authenticate_user(failing_db("find_one"), req)

    assert isinstance(result, Failure)
    assert result.kind is FailureKind.PERSISTENCE


def test_update_leaves_owner_untouched(db: Database):
    created = product_store.create_product(
        db, ProductFields(name="Chair", price=10, userId="u1")
    )
    assert isinstance(created, Ok)

    result = product_store.update_product(
        db, created.value.id, ProductFields(name="Stool", price=5, userId="u1")
    )

    assert isinstance(result, Ok)
    stored = db["products"].find_one()
    assert stored["name"] == "Stool"
    assert stored["owner_id"] == "u1"


def test_delete_by_other_user_keeps_product(db: Database):
    created = product_store.create_product(
        db, ProductFields(name="Chair", price=10, userId="u1")
    )

    result = product_store.delete_product(db, created.value.id, OwnerClaim(userId="u2"))

    assert result == Failure(FailureKind.UNAUTHORIZED, "401")
    assert db["products"].count_documents({}) == 1
