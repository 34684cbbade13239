# shop_server/core/ownership.py

from collections.abc import Mapping


def normalize_owner_id(value) -> str | None:
    """
    Reduces a user id to the text form it is stored and compared in.
    Integral floats collapse to their integer form, so 7, 7.0 and "7" agree.
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def is_owner(record: Mapping | None, claimed_owner) -> bool:
    """
    Compares a product's stored owner with the owner claimed by the caller.
    Ids are compared loosely: 7 matches "7", and a product stored without
    an owner matches a request that claims none.
    """
    if record is None:
        return False
    return normalize_owner_id(record.get("owner_id")) == normalize_owner_id(claimed_owner)
