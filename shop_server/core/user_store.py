# shop_server/core/user_store.py

import logging
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from shop_server.core.results import Failure, FailureKind, Ok, Result
from shop_server.core.security import get_password_hash, verify_password
from shop_server.database import USERS
from shop_server.models.user import LoginRequest, RegisterRequest, User


logger = logging.getLogger(__name__)

USER_EXISTS = "user already exists"
INVALID_USER = "invalid user"
INVALID_PASSWORD = "invalid password"


def register_user(db: Database, req: RegisterRequest) -> Result[User]:
    """
    Stores a new user with a bcrypt hash of the password.
    Relies on the unique index on `username` to reject duplicates.
    """
    document = {
        "username": req.username,
        "email": req.email,
        "password_hash": get_password_hash(req.password),
    }
    try:
        db[USERS].insert_one(document)
    except DuplicateKeyError:
        return Failure(FailureKind.CONFLICT, USER_EXISTS)
    except PyMongoError as e:
        logger.error("Failed to register user %s: %s", req.username, e)
        return Failure(FailureKind.PERSISTENCE, str(e))
    return Ok(User.from_document(document))


def authenticate_user(db: Database, req: LoginRequest) -> Result[User]:
    try:
        user = db[USERS].find_one({"username": req.username})
    except PyMongoError as e:
        logger.error("Failed to look up user %s: %s", req.username, e)
        return Failure(FailureKind.PERSISTENCE, str(e))
    if user is None:
        return Failure(FailureKind.INVALID_CREDENTIALS, INVALID_USER)
    if not verify_password(req.password, user["password_hash"]):
        return Failure(FailureKind.INVALID_CREDENTIALS, INVALID_PASSWORD)
    return Ok(User.from_document(user))
