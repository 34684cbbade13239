# shop_server/api/users.py

from fastapi import APIRouter, Depends
from pymongo.database import Database

from shop_server.api.forms import body_of
from shop_server.core import user_store
from shop_server.core.results import unwrap
from shop_server.database import get_db
from shop_server.models.user import LoginRequest, RegisterRequest, User


router = APIRouter()


@router.post("/users", response_model=User)
def register(
    req: RegisterRequest = Depends(body_of(RegisterRequest)),
    db: Database = Depends(get_db),
):
    """
    Registers a new user. Responds 409 when the username is taken.
    Accepts a JSON or form-encoded body.
    """
    return unwrap(user_store.register_user(db, req))


@router.post("/getUser", response_model=User)
def login(
    req: LoginRequest = Depends(body_of(LoginRequest)),
    db: Database = Depends(get_db),
):
    """
    Checks a username/password pair and returns the matching user.
    Responds 401 with "invalid user" or "invalid password" otherwise.
    """
    return unwrap(user_store.authenticate_user(db, req))
