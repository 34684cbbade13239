# shop_server/main.py

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from shop_server.api import products, users
from shop_server.config import HOST, LOG_LEVEL, MONGO_DB_NAME, PORT
from shop_server.database import close_client, get_db, init_db


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "Welcome to our Products API. Use endpoints to filter out the data"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # same handle the request handlers get, test overrides included
    resolve_db = app.dependency_overrides.get(get_db, get_db)
    try:
        init_db(resolve_db())
    except PyMongoError as e:
        logger.error("Database connection error: %s", e)
        raise
    logger.info("Connected to database %s", MONGO_DB_NAME)
    yield
    close_client()
    logger.info("Database connection closed")


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_request(request: Request, call_next):
    logger.info("%s request for %s", request.method, request.url.path)
    return await call_next(request)


@app.get("/", response_class=PlainTextResponse)
def home():
    return WELCOME_MESSAGE


app.include_router(products.router)
app.include_router(users.router)


if __name__ == "__main__":
    uvicorn.run("shop_server.main:app", host=HOST, port=PORT)
