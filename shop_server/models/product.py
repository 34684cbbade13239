# shop_server/models/product.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from shop_server.core.ownership import normalize_owner_id
from . import Document


# -------------------------------
# Product Model
# -------------------------------

class Product(Document):
    """
    Product document stored in the `products` collection.
    `owner_id` is the id of the user who created it and never changes.
    """
    name: str | None = None
    price: float | None = None
    owner_id: str | None = None


# -------------------------------
# Request / Response Schemas
# -------------------------------

class OwnerClaim(BaseModel):
    """
    Request body carrying the caller's claimed user id.
    Numbers and strings compare loosely, so the id is kept as text.
    """
    model_config = ConfigDict(populate_by_name=True)

    user_id: str | None = Field(default=None, alias="userId")

    @field_validator("user_id", mode="before")
    @classmethod
    def stringify_user_id(cls, value):
        return normalize_owner_id(value)


class ProductFields(OwnerClaim):
    name: str | None = None
    price: float | None = None


class UpdateOutcome(BaseModel):
    acknowledged: bool
    matched_count: int
    modified_count: int
