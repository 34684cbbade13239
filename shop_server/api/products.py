# shop_server/api/products.py

from fastapi import APIRouter, Depends
from pymongo.database import Database

from shop_server.api.forms import body_of
from shop_server.core import product_store
from shop_server.core.results import unwrap
from shop_server.database import get_db
from shop_server.models.product import OwnerClaim, Product, ProductFields, UpdateOutcome


# Initialize FastAPI router
router = APIRouter()


# -------------------------------
# Product Endpoints
# -------------------------------

@router.post("/product", response_model=Product)
def create_product(
    body: ProductFields = Depends(body_of(ProductFields)),
    db: Database = Depends(get_db),
):
    return unwrap(product_store.create_product(db, body))


@router.get("/allProducts", response_model=list[Product])
def list_products(db: Database = Depends(get_db)):
    return unwrap(product_store.list_products(db))


@router.get("/product/{product_id}", response_model=Product)
def get_product(product_id: str, db: Database = Depends(get_db)):
    """
    Returns a single product by id without checking who owns it.
    """
    return unwrap(product_store.get_product(db, product_id))


@router.post("/product/{product_id}", response_model=Product)
def get_owned_product(
    product_id: str,
    body: OwnerClaim = Depends(body_of(OwnerClaim)),
    db: Database = Depends(get_db),
):
    """
    Returns a single product only to its owner.
    Responds 401 when `userId` does not match the product's owner.
    """
    return unwrap(product_store.get_owned_product(db, product_id, body))


@router.patch("/product/{product_id}", response_model=UpdateOutcome)
def update_product(
    product_id: str,
    body: ProductFields = Depends(body_of(ProductFields)),
    db: Database = Depends(get_db),
):
    """
    Replaces the name and price of a product owned by the caller.
    The owner itself is never changed.
    """
    return unwrap(product_store.update_product(db, product_id, body))


@router.delete("/product/{product_id}", response_model=str)
def delete_product(
    product_id: str,
    body: OwnerClaim = Depends(body_of(OwnerClaim)),
    db: Database = Depends(get_db),
):
    return unwrap(product_store.delete_product(db, product_id, body))
