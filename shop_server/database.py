# shop_server/database.py

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from shop_server.config import MONGO_URI, MONGO_DB_NAME


PRODUCTS = "products"
USERS = "users"

_client: MongoClient | None = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        _client = MongoClient(MONGO_URI)
    return _client


def close_client():
    global _client
    if _client is not None:
        _client.close()
        _client = None


def init_db(db: Database):
    # usernames are unique at the store level, so registration is a single insert
    db[USERS].create_index([("username", ASCENDING)], unique=True)


def get_db() -> Database:
    return get_client()[MONGO_DB_NAME]
