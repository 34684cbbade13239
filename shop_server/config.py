# shop_server/config.py

import os
from urllib.parse import quote_plus
from dotenv import load_dotenv


load_dotenv()


MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "shop")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def build_mongo_uri(
    user: str | None,
    password: str | None,
    cluster: str | None,
    db_name: str = MONGO_DB_NAME,
) -> str:
    """
    Composes an Atlas connection string from the cluster credentials.
    Falls back to a local server when no cluster name is configured.
    """
    if not cluster:
        return "mongodb://localhost:27017"
    return (
        f"mongodb+srv://{quote_plus(user or '')}:{quote_plus(password or '')}"
        f"@{cluster}.mongodb.net/{db_name}?retryWrites=true&w=majority"
    )


MONGO_URI = os.getenv("MONGO_URI") or build_mongo_uri(
    os.getenv("MONGO_USER"),
    os.getenv("MONGO_PASSWORD"),
    os.getenv("MONGO_CLUSTER_NAME"),
)
