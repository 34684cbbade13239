# shop_server/core/product_store.py

import logging
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.database import Database
from pymongo.errors import PyMongoError

from shop_server.core.ownership import is_owner
from shop_server.core.results import Failure, FailureKind, Ok, Result
from shop_server.database import PRODUCTS
from shop_server.models.product import OwnerClaim, Product, ProductFields, UpdateOutcome


logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "cannot find product with that id"
NOT_OWNER = "401"
DELETED = "deleted"


def _object_id(product_id: str) -> ObjectId | None:
    try:
        return ObjectId(product_id)
    except (InvalidId, TypeError):
        return None


def _persistence_failure(action: str, error: PyMongoError) -> Failure:
    logger.error("Failed to %s: %s", action, error)
    return Failure(FailureKind.PERSISTENCE, str(error))


def _not_found() -> Failure:
    return Failure(FailureKind.NOT_FOUND, PRODUCT_NOT_FOUND)


def _find(db: Database, oid: ObjectId) -> dict | None:
    return db[PRODUCTS].find_one({"_id": oid})


def _explain_unmatched(db: Database, oid: ObjectId) -> Failure:
    # the conditional write matched nothing: either the id is gone or the owner differs
    if _find(db, oid) is None:
        return _not_found()
    return Failure(FailureKind.UNAUTHORIZED, NOT_OWNER)


# -------------------------------
# Reads
# -------------------------------

def list_products(db: Database) -> Result[list[Product]]:
    try:
        return Ok([Product.from_document(doc) for doc in db[PRODUCTS].find()])
    except PyMongoError as e:
        return _persistence_failure("list products", e)


def get_product(db: Database, product_id: str) -> Result[Product]:
    oid = _object_id(product_id)
    if oid is None:
        return _not_found()
    try:
        doc = _find(db, oid)
    except PyMongoError as e:
        return _persistence_failure(f"read product {product_id}", e)
    if doc is None:
        return _not_found()
    return Ok(Product.from_document(doc))


def get_owned_product(db: Database, product_id: str, claim: OwnerClaim) -> Result[Product]:
    """
    Returns the product only when the caller's claimed user id matches its owner.
    """
    oid = _object_id(product_id)
    if oid is None:
        return _not_found()
    try:
        doc = _find(db, oid)
    except PyMongoError as e:
        return _persistence_failure(f"read product {product_id}", e)
    if doc is None:
        return _not_found()
    if not is_owner(doc, claim.user_id):
        return Failure(FailureKind.UNAUTHORIZED, NOT_OWNER)
    return Ok(Product.from_document(doc))


# -------------------------------
# Writes
# -------------------------------

def create_product(db: Database, fields: ProductFields) -> Result[Product]:
    document = {
        "name": fields.name,
        "price": fields.price,
        "owner_id": fields.user_id,
    }
    try:
        inserted = db[PRODUCTS].insert_one(document)
    except PyMongoError as e:
        return _persistence_failure("create product", e)
    document["_id"] = inserted.inserted_id
    return Ok(Product.from_document(document))


def update_product(db: Database, product_id: str, fields: ProductFields) -> Result[UpdateOutcome]:
    """
    Replaces name and price of a product owned by the caller.
    The owner is part of the update filter, so the check and the write
    happen in one operation. A null owner filter also matches products
    stored without one.
    """
    oid = _object_id(product_id)
    if oid is None:
        return _not_found()
    try:
        result = db[PRODUCTS].update_one(
            {"_id": oid, "owner_id": fields.user_id},
            {"$set": {"name": fields.name, "price": fields.price}},
        )
        if result.matched_count == 0:
            return _explain_unmatched(db, oid)
    except PyMongoError as e:
        return _persistence_failure(f"update product {product_id}", e)
    return Ok(UpdateOutcome(
        acknowledged=result.acknowledged,
        matched_count=result.matched_count,
        modified_count=result.modified_count,
    ))


def delete_product(db: Database, product_id: str, claim: OwnerClaim) -> Result[str]:
    oid = _object_id(product_id)
    if oid is None:
        return _not_found()
    try:
        result = db[PRODUCTS].delete_one({"_id": oid, "owner_id": claim.user_id})
        if result.deleted_count == 0:
            return _explain_unmatched(db, oid)
    except PyMongoError as e:
        return _persistence_failure(f"delete product {product_id}", e)
    return Ok(DELETED)
