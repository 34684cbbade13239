# shop_server/models/user.py

from pydantic import BaseModel
from . import Document


# -------------------------------
# User Model
# -------------------------------

class User(Document):
    """
    User document as returned to clients.
    Deliberately leaves out the stored `password_hash`: register and login
    answer with the public fields only, never the credential hash.
    """
    username: str
    email: str | None = None


class RegisterRequest(BaseModel):
    username: str
    email: str | None = None
    password: str


class LoginRequest(BaseModel):
    username: str
    password: str
