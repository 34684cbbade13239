# shop_server/models/__init__.py

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """
    Base for records read back from a Mongo collection.
    Exposes the ObjectId under its `_id` key as a hex string.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")

    @classmethod
    def from_document(cls, doc: dict):
        return cls.model_validate({**doc, "_id": str(doc["_id"])})
